"""Data models for the identity collaborator."""

from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class AuthEvent(str, Enum):
    """Kinds of authentication state change."""

    SIGNED_IN = "signed_in"
    SIGNED_OUT = "signed_out"
    USER_UPDATED = "user_updated"


class User(BaseModel):
    """Signed-in account as seen by the chat."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    email: str
    name: str = ""

    @property
    def display_name(self) -> str:
        return self.name or self.email.split("@")[0]


class AuthError(Exception):
    """Authentication request was refused by the identity provider."""
