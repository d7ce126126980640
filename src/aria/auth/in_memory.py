"""In-memory identity provider.

Accounts live in a dict and are lost when the app exits.
Suitable for local development and testing only.
"""

import hashlib
import hmac
import secrets

from .base import IdentityProvider
from .models import AuthError, AuthEvent, User


def _digest(password: str, salt: bytes) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, 100_000)


class InMemoryIdentityProvider(IdentityProvider):
    """Process-local identity provider (session-only)."""

    def __init__(self) -> None:
        super().__init__()
        # email -> (user, salt, digest)
        self._accounts: dict[str, tuple[User, bytes, bytes]] = {}
        self._current: User | None = None

    @property
    def current_user(self) -> User | None:
        return self._current

    async def sign_up(self, email: str, password: str, name: str = "") -> User:
        """Register a new account and sign it in."""
        key = email.strip().lower()
        if not key or "@" not in key:
            raise AuthError("A valid email address is required")
        if len(password) < 6:
            raise AuthError("Password must be at least 6 characters")
        if key in self._accounts:
            raise AuthError("An account with this email already exists")

        salt = secrets.token_bytes(16)
        user = User(email=key, name=name.strip())
        self._accounts[key] = (user, salt, _digest(password, salt))
        self._current = user
        self._emit(AuthEvent.SIGNED_IN, user)
        return user

    async def sign_in(self, email: str, password: str) -> User:
        """Sign in an existing account."""
        account = self._accounts.get(email.strip().lower())
        if account is None:
            raise AuthError("Invalid email or password")
        user, salt, digest = account
        if not hmac.compare_digest(digest, _digest(password, salt)):
            raise AuthError("Invalid email or password")
        self._current = user
        self._emit(AuthEvent.SIGNED_IN, user)
        return user

    async def sign_out(self) -> None:
        """Sign out (no-op when nobody is signed in)."""
        if self._current is None:
            return
        self._current = None
        self._emit(AuthEvent.SIGNED_OUT, None)

    async def update_profile(self, name: str) -> User:
        """Rename the signed-in user."""
        if self._current is None:
            raise AuthError("Not signed in")
        user = self._current.model_copy(update={"name": name.strip()})
        _, salt, digest = self._accounts[user.email]
        self._accounts[user.email] = (user, salt, digest)
        self._current = user
        self._emit(AuthEvent.USER_UPDATED, user)
        return user
