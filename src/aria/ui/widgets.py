"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Chat message rendering and click-to-copy
- Input history management
- Welcome suggestions
- Log rendering and level filtering
"""

from datetime import datetime

import pyperclip
from rich.text import Text
from textual.app import App
from textual.containers import Grid, Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message as TextualMessage
from textual.widgets import Button, RichLog, Static, TextArea

from ..chat.models import Message
from .config import (
    ASSISTANT_NAME,
    COPY_NOTIFY_TIMEOUT,
    INPUT_HISTORY_MAX_SIZE,
    LOG_TIMESTAMP_FORMAT,
    MESSAGE_TIME_FORMAT,
    SUGGESTIONS,
    USER_NAME,
    LogLevel,
)


def copy_text(app: App, text: str) -> bool:
    """Copy text to the system clipboard and report the outcome as a toast.

    Falls back to Textual's OSC 52 terminal clipboard when no system
    clipboard mechanism is available.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException:
        try:
            app.copy_to_clipboard(text)
        except Exception:
            app.notify("Failed to copy message", severity="error", timeout=COPY_NOTIFY_TIMEOUT)
            return False
        app.notify("Message copied (terminal)", timeout=COPY_NOTIFY_TIMEOUT)
        return True
    app.notify("Message copied!", timeout=COPY_NOTIFY_TIMEOUT)
    return True


class ClickableMessage(Vertical):
    """A chat message container that copies its raw content when clicked."""

    def __init__(self, message: Message, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.message = message

    def on_click(self, event: Click) -> None:
        event.stop()
        copy_text(self.app, self.message.content)


class ChatHistoryWidget(VerticalScroll):
    """Scrollable conversation view, one block per transcript entry."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "Conversation history"
    ALLOW_SELECT = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._messages: list[Message] = []

    @property
    def message_count(self) -> int:
        return len(self._messages)

    def add_message(self, message: Message) -> None:
        """Render a transcript entry at the bottom and scroll to it."""
        self._messages.append(message)
        self._render_message(message)
        self.border_subtitle = f"{len(self._messages)} messages"
        self.scroll_end(animate=False)

    def get_last_response(self) -> str | None:
        """Get the last assistant response."""
        for msg in reversed(self._messages):
            if not msg.is_user:
                return msg.content
        return None

    def clear_history(self) -> None:
        """Remove every rendered message."""
        self._messages.clear()
        self.remove_children()
        self.border_subtitle = "Conversation history"

    def _render_message(self, msg: Message) -> None:
        if msg.is_user:
            name = USER_NAME
            border_class = "user-message"
        else:
            name = ASSISTANT_NAME
            border_class = "assistant-message"

        header_text = Text(f"{name}  {msg.created_at.strftime(MESSAGE_TIME_FORMAT)}")

        container = ClickableMessage(msg, classes=f"chat-message {border_class}")
        container.compose_add_child(Static(header_text, classes="message-header"))

        # Plain text for both senders: content is never interpreted as markup
        container.compose_add_child(Static(Text(msg.content), classes="message-content"))

        self.mount(container)


class SuggestionCard(Button):
    """Clickable starter prompt on the welcome panel."""

    def __init__(self, title: str, description: str, prompt: str, **kwargs) -> None:
        super().__init__(f"{title}\n{description}", **kwargs)
        self.prompt = prompt


class WelcomePanel(Vertical):
    """Greeting with starter prompts, shown while the chat is empty."""

    class SuggestionSelected(TextualMessage):
        """Posted when a suggestion card is chosen."""

        def __init__(self, prompt: str) -> None:
            super().__init__()
            self.prompt = prompt

    def compose(self):
        yield Static(f"Welcome to {ASSISTANT_NAME}", id="welcome-title")
        yield Static(
            "Your Adaptive Reasoning & Intelligence Assistant. "
            "Ask me anything and I'll help you find the answers you need.",
            id="welcome-subtitle",
        )
        with Grid(id="suggestions"):
            for index, (title, description, prompt) in enumerate(SUGGESTIONS):
                yield SuggestionCard(title, description, prompt, id=f"suggestion-{index}")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if isinstance(event.button, SuggestionCard):
            event.stop()
            self.post_message(self.SuggestionSelected(event.button.prompt))


class ThinkingIndicator(Static):
    """One-line 'ARIA is thinking...' marker shown while a reply is pending."""

    def on_mount(self) -> None:
        self.display = False

    def show(self) -> None:
        self.update(f"{ASSISTANT_NAME} is thinking...")
        self.display = True

    def hide(self) -> None:
        self.display = False


class ChatInputBar(Horizontal):
    """Chat input bar with TextArea and Send button."""

    class Submitted(TextualMessage):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._history: list[str] = []
        self._history_index: int = -1
        self._busy = False

    def compose(self):
        text_area = TextArea(id="chat-input", show_line_numbers=False)
        text_area.cursor_blink = False
        yield text_area
        yield Button("Send", id="send-btn").with_tooltip("Send message (Ctrl+J)")

    def on_mount(self) -> None:
        text_area = self.query_one("#chat-input", TextArea)
        text_area.highlight_cursor_line = False
        text_area.focus()

    @property
    def busy(self) -> bool:
        return self._busy

    def set_busy(self, busy: bool) -> None:
        """Lock the input while a reply is pending."""
        self._busy = busy
        self.set_class(busy, "-busy")
        self.query_one("#send-btn", Button).disabled = busy
        self.query_one("#send-btn", Button).label = "..." if busy else "Send"
        self.query_one("#chat-input", TextArea).read_only = busy
        if not busy:
            self.focus_input()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def on_key(self, event) -> None:
        """Handle keyboard shortcuts.

        Note: ctrl+enter cannot work in terminals (terminal doesn't pass
        ctrl/shift modifiers with Enter). Use ctrl+j as the submit shortcut.
        """
        if event.key == "ctrl+j":
            self._submit()
            event.prevent_default()
            event.stop()
        elif event.key == "up" and self._is_cursor_at_start():
            self._navigate_history(-1)
            event.prevent_default()
            event.stop()
        elif event.key == "down" and self._is_cursor_at_end():
            self._navigate_history(1)
            event.prevent_default()
            event.stop()

    def _is_cursor_at_start(self) -> bool:
        text_area = self.query_one("#chat-input", TextArea)
        return text_area.cursor_location == (0, 0)

    def _is_cursor_at_end(self) -> bool:
        text_area = self.query_one("#chat-input", TextArea)
        lines = text_area.text.split("\n")
        last_row = len(lines) - 1
        last_col = len(lines[-1]) if lines else 0
        return text_area.cursor_location == (last_row, last_col)

    def _navigate_history(self, direction: int) -> None:
        if not self._history:
            return
        text_area = self.query_one("#chat-input", TextArea)
        if direction < 0:
            if self._history_index == -1:
                self._history_index = len(self._history) - 1
            elif self._history_index > 0:
                self._history_index -= 1
        else:
            if self._history_index < len(self._history) - 1:
                self._history_index += 1
            else:
                self._history_index = -1
                text_area.text = ""
                return
        text_area.text = self._history[self._history_index]

    def _submit(self) -> None:
        if self._busy:
            return
        text_area = self.query_one("#chat-input", TextArea)
        value = text_area.text.strip()
        if value:
            if not self._history or self._history[-1] != value:
                self._history.append(value)
                del self._history[:-INPUT_HISTORY_MAX_SIZE]
            self._history_index = -1
            text_area.text = ""
            self.post_message(self.Submitted(value))

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", TextArea).focus()


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "Chat": "green",
        "LLM": "magenta",
        "Auth": "bright_blue",
        "Prefs": "bright_yellow",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def write_entry(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Chat, LLM, Auth, ...)
            message: Log message, written without markup interpretation
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_color = self.LEVEL_COLORS.get(level, "white")
        comp_color = self.COMPONENT_COLORS.get(component, "white")

        line = Text()
        line.append(f"{timestamp} ", style="dim")
        line.append(f"{LogLevel.name(level):<5} ", style=level_color)
        line.append(f"[{component}] ", style=comp_color)
        line.append(message)
        self.write(line)

    def debug(self, component: str, message: str) -> None:
        self.write_entry(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        self.write_entry(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        self.write_entry(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        self.write_entry(component, message, LogLevel.ERROR)

    def route(self, level: str, component: str, message: str) -> None:
        """Debug-callback entry point: ``callback(level, component, message)``."""
        self.write_entry(component, message, LogLevel.from_string(level))

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
