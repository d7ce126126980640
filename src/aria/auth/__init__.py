"""Identity collaborator for the signed-in chat.

Only the surface the chat needs is modelled here; a real deployment plugs in
an external identity service behind the same interface.
"""

from .base import IdentityProvider
from .in_memory import InMemoryIdentityProvider
from .models import AuthError, AuthEvent, User

__all__ = [
    "AuthError",
    "AuthEvent",
    "IdentityProvider",
    "InMemoryIdentityProvider",
    "User",
]
