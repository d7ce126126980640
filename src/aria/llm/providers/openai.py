"""OpenAI chat-completions provider.

Works against api.openai.com or any endpoint speaking the same protocol
(``base_url``). The key travels as a bearer credential.
"""

from typing import Any

import openai
from openai import AsyncOpenAI

from ..base import LLMProvider
from ..errors import NetworkError, ProtocolError
from ..models import ChatMessage, LLMResponse


class OpenAIProvider(LLMProvider):
    """OpenAI back-end.

    Hidden design decisions:
    - AsyncOpenAI client setup, with the SDK's own retries turned off
    - Which SDK exceptions count as network or protocol failure
    """

    name = "openai"

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-3.5-turbo",
        base_url: str | None = None,
        organization: str | None = None,
        client: Any | None = None,
        **client_kwargs: Any
    ):
        """Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            model: Default model to use
            base_url: Optional OpenAI-compatible endpoint
            organization: Optional organization ID
            client: Pre-built client exposing ``chat.completions.create``
            **client_kwargs: Additional kwargs for AsyncOpenAI
        """
        self._model = model
        if client is None:
            client_kwargs.setdefault("max_retries", 0)
            client = AsyncOpenAI(
                api_key=api_key,
                base_url=base_url,
                organization=organization,
                **client_kwargs
            )
        self._client = client

    @property
    def model(self) -> str:
        return self._model

    def _build_request(
        self,
        messages: list[ChatMessage],
        model: str,
        temperature: float,
        max_tokens: int | None,
        **kwargs: Any
    ) -> dict[str, Any]:
        request: dict[str, Any] = {
            "model": model,
            "messages": [{"role": msg.role, "content": msg.content} for msg in messages],
            "temperature": temperature,
            **kwargs
        }
        if max_tokens is not None:
            request["max_tokens"] = max_tokens
        return request

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Send the conversation to ``/chat/completions`` once.

        Raises:
            NetworkError: The request never got a response (includes timeouts)
            ProtocolError: OpenAI answered with an error status or a bad body
        """
        model_to_use = model or self._model
        request = self._build_request(messages, model_to_use, temperature, max_tokens, **kwargs)

        try:
            completion = await self._client.chat.completions.create(**request)
        except openai.APIConnectionError as e:
            raise NetworkError(f"Could not reach OpenAI API: {e}") from e
        except openai.APIStatusError as e:
            raise ProtocolError(f"OpenAI API error: {e.message}", status_code=e.status_code) from e
        except openai.APIError as e:
            raise ProtocolError(f"OpenAI API error: {e.message}") from e

        content = ""
        if completion.choices:
            content = completion.choices[0].message.content or ""

        usage = None
        if completion.usage:
            usage = {
                "prompt_tokens": completion.usage.prompt_tokens,
                "completion_tokens": completion.usage.completion_tokens,
                "total_tokens": completion.usage.total_tokens,
            }

        return LLMResponse(content=content, model=completion.model or model_to_use, usage=usage)

    async def close(self) -> None:
        await self._client.close()
