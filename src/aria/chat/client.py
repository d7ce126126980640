"""Completion client.

Translates the transcript into provider messages and the provider response
back into plain text. The whole history is replayed on every call.
"""

from collections.abc import Sequence
from typing import Any, Protocol

from ..llm.base import LLMProvider
from ..llm.models import ChatMessage
from .models import Message, Sender

NO_RESPONSE_PLACEHOLDER = "No response from ARIA. Please try rephrasing your message."

_ROLES = {
    Sender.USER: "user",
    Sender.ASSISTANT: "assistant",
}


class Completer(Protocol):
    """Anything that can turn a transcript into a reply."""

    async def complete(self, transcript: Sequence[Message]) -> str: ...


def to_chat_messages(
    transcript: Sequence[Message],
    system_prompt: str | None = None
) -> list[ChatMessage]:
    """Map transcript entries to role-tagged provider messages."""
    messages = []
    if system_prompt:
        messages.append(ChatMessage(role="system", content=system_prompt))
    for msg in transcript:
        messages.append(ChatMessage(role=_ROLES[msg.sender], content=msg.content))
    return messages


class CompletionClient:
    """Boundary between the conversation and a remote text-generation API."""

    def __init__(
        self,
        provider: LLMProvider,
        system_prompt: str | None = None,
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        placeholder: str = NO_RESPONSE_PLACEHOLDER,
    ) -> None:
        self._provider = provider
        self._system_prompt = system_prompt
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._placeholder = placeholder
        self.last_usage: dict[str, Any] | None = None

    @property
    def provider(self) -> LLMProvider:
        return self._provider

    @property
    def model(self) -> str:
        return self._model or self._provider.model

    async def complete(self, transcript: Sequence[Message]) -> str:
        """Request a reply for the full transcript.

        Args:
            transcript: Complete conversation, oldest first

        Returns:
            Text of the first candidate, or the placeholder if it was empty

        Raises:
            NetworkError: No response was received
            ProtocolError: The response was unusable
        """
        response = await self._provider.chat_completion(
            to_chat_messages(transcript, self._system_prompt),
            model=self._model,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )
        self.last_usage = response.usage
        return response.content or self._placeholder

    async def close(self) -> None:
        await self._provider.close()
