"""Data models for the conversation.

Messages are immutable once built; the transcript owns them.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class Sender(str, Enum):
    """Author of a message."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single entry of the transcript."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex, description="Opaque unique token")
    content: str = Field(description="Raw text of the message")
    sender: Sender = Field(description="Who wrote the message")
    created_at: datetime = Field(default_factory=datetime.now)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(content=content, sender=Sender.USER)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(content=content, sender=Sender.ASSISTANT)

    @property
    def is_user(self) -> bool:
        return self.sender == Sender.USER


@dataclass(frozen=True)
class TranscriptEvent:
    """Change notification emitted by the transcript."""

    kind: Literal["appended", "reset"]
    message: Message | None = None


@dataclass(frozen=True)
class Notification:
    """Transient toast for the presentation layer."""

    message: str
    severity: Literal["information", "warning", "error"] = "information"
