"""Conversation core.

Presentation-free: the transcript store, the send coordinator that runs one
round trip at a time, and the completion client that talks to a provider.
"""

from .client import NO_RESPONSE_PLACEHOLDER, Completer, CompletionClient, to_chat_messages
from .coordinator import (
    DEFAULT_ERROR_MESSAGE,
    DEFAULT_FAILURE_NOTICE,
    NEW_CHAT_NOTICE,
    SendCoordinator,
)
from .models import Message, Notification, Sender, TranscriptEvent
from .transcript import Transcript

__all__ = [
    "Completer",
    "CompletionClient",
    "DEFAULT_ERROR_MESSAGE",
    "DEFAULT_FAILURE_NOTICE",
    "Message",
    "NEW_CHAT_NOTICE",
    "NO_RESPONSE_PLACEHOLDER",
    "Notification",
    "SendCoordinator",
    "Sender",
    "Transcript",
    "TranscriptEvent",
    "to_chat_messages",
]
