"""Abstract base class for identity providers.

The chat never implements authentication itself. It only needs to know who
is signed in and to be told when that changes. The abstraction hides:
- Which identity service is used
- Credential checks and session handling
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from .models import AuthEvent, User

AuthListener = Callable[[AuthEvent, User | None], None]


class IdentityProvider(ABC):
    """Opaque identity collaborator."""

    def __init__(self) -> None:
        self._listeners: list[AuthListener] = []

    @property
    @abstractmethod
    def current_user(self) -> User | None:
        """The signed-in user, if any."""

    @abstractmethod
    async def sign_up(self, email: str, password: str, name: str = "") -> User:
        """Create an account and sign it in."""

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> User:
        """Sign in with email and password.

        Raises:
            AuthError: If the credentials are refused
        """

    @abstractmethod
    async def sign_out(self) -> None:
        """End the current session."""

    @abstractmethod
    async def update_profile(self, name: str) -> User:
        """Change the display name of the signed-in user."""

    def on_auth_state_change(self, listener: AuthListener) -> Callable[[], None]:
        """Register a listener for sign-in state changes.

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, event: AuthEvent, user: User | None) -> None:
        for listener in list(self._listeners):
            listener(event, user)
