from abc import ABC, abstractmethod
from typing import Any

from .models import ChatMessage, LLMResponse


class LLMProvider(ABC):
    """A remote (or simulated) text-generation back-end.

    Hides which service answers, how the request is encoded and how the
    service reports failure. Every implementation:
    - sends exactly one request per ``chat_completion`` call (no retries)
    - returns the first candidate's text, or an empty string
    - raises only NetworkError or ProtocolError for failed calls

    Usable as an async context manager; leaving the block closes it.
    """

    #: Short identifier used in logs and the TUI subtitle
    name: str = "llm"

    @property
    @abstractmethod
    def model(self) -> str:
        """Model used when a call does not name one."""

    @abstractmethod
    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Ask the back-end to continue a conversation.

        Args:
            messages: Whole conversation, oldest first (system entries allowed)
            model: Overrides the default model for this call
            temperature: Sampling temperature
            max_tokens: Output limit, None for the service default
            **kwargs: Back-end specific request options

        Raises:
            NetworkError: No response was received
            ProtocolError: The response status or body was unusable
        """

    @abstractmethod
    async def close(self) -> None:
        """Release network resources."""

    async def __aenter__(self) -> "LLMProvider":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        # httpx can report a closed loop while shutting down; nothing is left to release then
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
