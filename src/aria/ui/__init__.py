"""Terminal UI module for ARIA.

Provides a Textual-based TUI over the conversation core.

Module structure (each module hides a design decision):
- config.py: Constants (names, formats, suggestions, log levels)
- widgets.py: Custom widgets (chat history, input bar, welcome, log panel)
- styles.py: CSS styling (layout decisions)
- themes.py: Dark and light palettes
- screens.py: Modal dialogs (sign-in)
- app.py: Application orchestration (event subscription, key bindings)
"""

from .app import AriaApp, run_textual_tui
from .config import LogLevel
from .widgets import (
    ChatHistoryWidget,
    ChatInputBar,
    DebugPanel,
    ThinkingIndicator,
    WelcomePanel,
)

__all__ = [
    "AriaApp",
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "LogLevel",
    "ThinkingIndicator",
    "WelcomePanel",
    "run_textual_tui",
]
