"""Modal screens for the TUI.

This module hides the design decisions about:
- Sign-in dialog appearance (CSS, layout)
- How credentials are collected and errors are shown

The identity provider itself stays opaque: this screen only calls
``sign_in`` / ``sign_up`` and reports the outcome.
"""

from textual import work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Static

from ..auth import AuthError, IdentityProvider, User
from .config import APP_SUBTITLE, ASSISTANT_NAME


class SignInScreen(ModalScreen[User]):
    """Modal sign-in / sign-up dialog gating the chat.

    Dismisses with the signed-in user. Escape quits the app, since the chat
    is not available without an account.
    """

    CSS = """
    SignInScreen {
        align: center middle;
        background: $background 80%;
    }

    #signin-dialog {
        width: 60;
        height: auto;
        border: tall $primary;
        background: $surface;
        padding: 1 2;
    }

    #signin-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: $primary;
    }

    #signin-subtitle {
        width: 100%;
        text-align: center;
        color: $text-muted;
        margin-bottom: 1;
    }

    #signin-dialog Input {
        margin-bottom: 1;
    }

    #signin-error {
        width: 100%;
        height: auto;
        color: $error;
        text-align: center;
    }

    #signin-buttons {
        width: 100%;
        height: 3;
        align: center middle;
    }

    #signin-buttons Button {
        margin: 0 1;
        min-width: 12;
    }
    """

    BINDINGS = [
        Binding("escape", "quit_app", "Quit", show=False),
    ]

    def __init__(self, identity: IdentityProvider) -> None:
        super().__init__()
        self._identity = identity

    def compose(self) -> ComposeResult:
        with Vertical(id="signin-dialog"):
            yield Static(f"Sign in to {ASSISTANT_NAME}", id="signin-title")
            yield Static(APP_SUBTITLE, id="signin-subtitle")
            yield Input(placeholder="Email", id="signin-email")
            yield Input(placeholder="Password", password=True, id="signin-password")
            yield Input(placeholder="Name (sign up only)", id="signin-name")
            yield Static("", id="signin-error")
            with Horizontal(id="signin-buttons"):
                yield Button("Sign in", id="btn-sign-in", variant="primary")
                yield Button("Sign up", id="btn-sign-up", variant="success")

    def _show_error(self, text: str) -> None:
        self.query_one("#signin-error", Static).update(text)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        email = self.query_one("#signin-email", Input).value
        password = self.query_one("#signin-password", Input).value
        if not email or not password:
            self._show_error("Email and password are required")
            return
        if event.button.id == "btn-sign-in":
            self._authenticate(email, password, None)
        elif event.button.id == "btn-sign-up":
            name = self.query_one("#signin-name", Input).value
            self._authenticate(email, password, name)

    @work(exclusive=True)
    async def _authenticate(self, email: str, password: str, name: str | None) -> None:
        try:
            if name is None:
                user = await self._identity.sign_in(email, password)
            else:
                user = await self._identity.sign_up(email, password, name)
        except AuthError as e:
            self._show_error(str(e))
            return
        self.dismiss(user)

    def action_quit_app(self) -> None:
        self.app.exit()
