"""Offline demo provider.

Answers with a canned reply after an artificial delay, so the interface can
be exercised without any API key.
"""

import asyncio
import random
from typing import Any

from ..base import LLMProvider
from ..models import ChatMessage, LLMResponse

DEMO_RESPONSES = (
    "I'm ARIA, your AI assistant! I'm currently running in demo mode. "
    "To enable full AI functionality, configure an API key.",
    "That's a great question! In demo mode, I can show you how the interface works. "
    "For real AI responses, connect an API key.",
    "I'd love to help you with that! This is a demonstration of the chat interface. "
    "Add an API key to unlock full AI capabilities.",
    "Interesting! I'm designed to be helpful, harmless, and honest. "
    "Right now I'm showing you the UI - add an API key for real conversations.",
    "I understand what you're asking. This interface is ready for real AI "
    "conversations once you configure an API key!",
)


class DemoProvider(LLMProvider):
    """Canned-reply provider with simulated network latency."""

    name = "demo"

    def __init__(
        self,
        delay: tuple[float, float] = (1.0, 3.0),
        responses: tuple[str, ...] | list[str] = DEMO_RESPONSES,
        seed: int | None = None,
        **_: Any
    ):
        """Initialize demo provider.

        Args:
            delay: (min, max) seconds to wait before answering
            responses: Replies to choose from
            seed: Seed for reproducible reply selection
        """
        low, high = delay
        if low < 0 or high < low:
            raise ValueError(f"Invalid delay range: {delay}")
        if not responses:
            raise ValueError("DemoProvider needs at least one response")
        self._delay = (low, high)
        self._responses = tuple(responses)
        self._random = random.Random(seed)

    @property
    def model(self) -> str:
        return "aria-demo"

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        await asyncio.sleep(self._random.uniform(*self._delay))
        return LLMResponse(
            content=self._random.choice(self._responses),
            model=model or self.model,
        )

    async def close(self) -> None:
        pass
