"""
ARIA: Adaptive Reasoning & Intelligence Assistant.

A chat client that keeps a conversation transcript, replays it to a remote
text-generation API and shows the reply. Each module hides one design
decision: the conversation core (chat), the provider back-ends (llm), the
identity collaborator (auth) and the terminal presentation (ui).
"""

__version__ = "0.1.0"

from .chat import (
    CompletionClient,
    Message,
    Notification,
    SendCoordinator,
    Sender,
    Transcript,
)
from .llm import NetworkError, ProtocolError, create_llm_provider

__all__ = [
    "CompletionClient",
    "Message",
    "NetworkError",
    "Notification",
    "ProtocolError",
    "SendCoordinator",
    "Sender",
    "Transcript",
    "create_llm_provider",
]
