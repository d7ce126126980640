"""Main Textual TUI application.

Orchestrates the UI components. The app only subscribes to the
coordinator's transcript, busy and notification events and forwards user
actions; it never edits conversation state itself.
"""

import asyncio
import contextlib
from collections.abc import Callable

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from ..auth import AuthEvent, IdentityProvider, User
from ..chat import Notification, SendCoordinator, TranscriptEvent
from ..preferences import ThemePreference
from .config import APP_SUBTITLE, NOTIFY_TIMEOUT, LogLevel
from .screens import SignInScreen
from .styles import APP_CSS
from .themes import THEMES, theme_name
from .widgets import (
    ChatHistoryWidget,
    ChatInputBar,
    DebugPanel,
    ThinkingIndicator,
    WelcomePanel,
    copy_text,
)


class AriaApp(App):
    """Textual TUI for the ARIA chat."""

    CSS = APP_CSS
    TITLE = "ARIA"
    SUB_TITLE = APP_SUBTITLE

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+n", "new_chat", "New Chat"),
        Binding("ctrl+t", "toggle_theme", "Theme"),
        Binding("ctrl+r", "copy_last_response", "Copy Reply"),
        Binding("ctrl+d", "toggle_debug", "Log"),
        Binding("ctrl+o", "sign_out", "Sign Out"),
    ]

    def __init__(
        self,
        coordinator: SendCoordinator,
        identity: IdentityProvider | None = None,
        preferences: ThemePreference | None = None,
        log_level: str | None = None,
        provider_name: str = "",
    ) -> None:
        super().__init__()
        self._coordinator = coordinator
        self._identity = identity
        self._preferences = preferences
        self._log_level = log_level
        self._provider_name = provider_name
        self._dark = preferences.load() if preferences is not None else True
        self._unsubscribers: list[Callable[[], None]] = []

    @property
    def coordinator(self) -> SendCoordinator:
        return self._coordinator

    @property
    def dark_mode(self) -> bool:
        return self._dark

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="main"):
            yield WelcomePanel(id="welcome")
            yield ChatHistoryWidget(id="chat-history")
            yield ThinkingIndicator(id="thinking")
            yield DebugPanel(id="debug-panel")
        yield ChatInputBar(id="chat-input-bar")
        yield Static(
            "Ctrl+J to send. ARIA can make mistakes. Consider checking important information.",
            id="input-hint",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        for theme in THEMES:
            self.register_theme(theme)
        self.theme = theme_name(self._dark)

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        self._coordinator.set_debug_callback(log_panel.route)
        self._unsubscribers.extend([
            self._coordinator.transcript.subscribe(self._on_transcript_event),
            self._coordinator.subscribe_busy(self._on_busy_changed),
            self._coordinator.subscribe_notifications(self._on_notification),
        ])

        # Render anything already in the transcript (e.g. a preloaded session)
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        for message in self._coordinator.transcript:
            chat.add_message(message)
        self._sync_welcome()

        if self._identity is not None:
            self._unsubscribers.append(self._identity.on_auth_state_change(self._on_auth_change))
            if self._identity.current_user is None:
                self._require_sign_in()
        self._update_subtitle()

    def on_unmount(self) -> None:
        """Detach from the coordinator and identity provider."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()
        self._coordinator.set_debug_callback(None)

    def _trace(self, level: str, message: str) -> None:
        self.query_one("#debug-panel", DebugPanel).route(level, "TUI", message)

    def _update_subtitle(self) -> None:
        parts = [getattr(self._coordinator.client, "model", "unknown")]
        if self._provider_name:
            parts.append(self._provider_name)
        if self._identity is not None and self._identity.current_user is not None:
            parts.append(self._identity.current_user.display_name)
        self.sub_title = " | ".join(parts)

    def _sync_welcome(self) -> None:
        empty = len(self._coordinator.transcript) == 0
        self.query_one("#welcome", WelcomePanel).display = empty
        self.query_one("#chat-history", ChatHistoryWidget).display = not empty

    # Coordinator events -------------------------------------------------

    def _on_transcript_event(self, event: TranscriptEvent) -> None:
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        if event.kind == "reset":
            chat.clear_history()
        elif event.message is not None:
            chat.add_message(event.message)
        self._sync_welcome()

    def _on_busy_changed(self, busy: bool) -> None:
        thinking = self.query_one("#thinking", ThinkingIndicator)
        if busy:
            thinking.show()
        else:
            thinking.hide()
        self.query_one("#chat-input-bar", ChatInputBar).set_busy(busy)

    def _on_notification(self, notification: Notification) -> None:
        self.notify(notification.message, severity=notification.severity, timeout=NOTIFY_TIMEOUT)

    # User input ---------------------------------------------------------

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        self.send_prompt(event.value)

    def on_welcome_panel_suggestion_selected(self, event: WelcomePanel.SuggestionSelected) -> None:
        """Send the prompt of a chosen suggestion card."""
        self.send_prompt(event.prompt)

    def send_prompt(self, text: str) -> None:
        """Start a round trip in the background (ignored while busy)."""
        if self._coordinator.busy or not text.strip():
            return
        self._round_trip(text)

    @work(group="round-trip")
    async def _round_trip(self, text: str) -> None:
        await self._coordinator.submit(text)

    # Authentication -----------------------------------------------------

    def _require_sign_in(self) -> None:
        def _signed_in(user: User | None) -> None:
            if user is not None:
                self._trace("info", f"Signed in as {user.email}")
            self.query_one("#chat-input-bar", ChatInputBar).focus_input()

        self.push_screen(SignInScreen(self._identity), _signed_in)

    def _on_auth_change(self, event: AuthEvent, user: User | None) -> None:
        self._update_subtitle()
        if event == AuthEvent.SIGNED_OUT:
            self._coordinator.new_chat()
            self._require_sign_in()

    # Actions ------------------------------------------------------------

    def action_new_chat(self) -> None:
        """Clear the conversation."""
        self._coordinator.new_chat()
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def action_toggle_theme(self) -> None:
        """Switch between dark and light themes and remember the choice."""
        self._dark = not self._dark
        self.theme = theme_name(self._dark)
        if self._preferences is not None:
            try:
                self._preferences.save(self._dark)
            except OSError as e:
                self._trace("warning", f"Could not save theme preference: {e}")
        self.notify(f"{'Dark' if self._dark else 'Light'} theme", timeout=2)

    def action_copy_last_response(self) -> None:
        """Copy last assistant response to clipboard."""
        response = self.query_one("#chat-history", ChatHistoryWidget).get_last_response()
        if response:
            copy_text(self, response)
        else:
            self.notify("No response to copy", severity="warning", timeout=2)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        is_visible = self.query_one("#debug-panel", DebugPanel).toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    async def action_sign_out(self) -> None:
        """Sign out of the identity provider, if one is configured."""
        if self._identity is None:
            self.notify("Sign-in is not enabled", severity="warning", timeout=2)
            return
        await self._identity.sign_out()


async def run_textual_tui(
    coordinator: SendCoordinator,
    identity: IdentityProvider | None = None,
    preferences: ThemePreference | None = None,
    log_level: str | None = None,
    provider_name: str = "",
) -> None:
    """Run the Textual TUI.

    Args:
        coordinator: Session coordinator owning transcript and busy flag
        identity: Identity provider gating the chat, None to skip sign-in
        preferences: Theme preference store, None to always start dark
        log_level: Log level for panel (debug/info/warning/error), None to hide
        provider_name: Shown in the subtitle next to the model name
    """
    app = AriaApp(
        coordinator=coordinator,
        identity=identity,
        preferences=preferences,
        log_level=log_level,
        provider_name=provider_name,
    )
    with contextlib.suppress(KeyboardInterrupt, asyncio.CancelledError):
        await app.run_async()
