"""Google Gemini provider.

Talks to the Generative Language API through the official Google GenAI SDK.
Reference: https://github.com/googleapis/python-genai

Gemini may answer without any text (safety filtering, empty candidate list).
That is not an error here: the content comes back empty and the caller
decides what to show.
"""

from typing import Any

import httpx
from google import genai
from google.genai import errors, types

from ..base import LLMProvider
from ..errors import NetworkError, ProtocolError
from ..models import ChatMessage, LLMResponse

# Relaxed so that ordinary code questions are not blocked
DEFAULT_SAFETY_SETTINGS = [
    types.SafetySetting(category="HARM_CATEGORY_HARASSMENT", threshold="BLOCK_ONLY_HIGH"),
    types.SafetySetting(category="HARM_CATEGORY_HATE_SPEECH", threshold="BLOCK_ONLY_HIGH"),
    types.SafetySetting(category="HARM_CATEGORY_SEXUALLY_EXPLICIT", threshold="BLOCK_ONLY_HIGH"),
    types.SafetySetting(category="HARM_CATEGORY_DANGEROUS_CONTENT", threshold="BLOCK_ONLY_HIGH"),
]

_ROLES = {"user": "user", "assistant": "model"}


class GeminiProvider(LLMProvider):
    """Gemini back-end.

    Hidden design decisions:
    - API key credential handed to ``genai.Client``
    - Role relabelling ('assistant' becomes 'model', system becomes the
      system instruction)
    - Which SDK and transport exceptions count as network or protocol failure
    """

    name = "gemini"

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-1.5-flash",
        client: Any | None = None,
        **client_kwargs: Any
    ):
        """Initialize Gemini provider.

        Args:
            api_key: Google AI API key
            model: Default model (gemini-1.5-flash, gemini-2.5-flash, ...)
            client: Pre-built client exposing ``aio.models.generate_content``
            **client_kwargs: Additional kwargs for genai.Client
        """
        self._model = model
        self._client = client if client is not None else genai.Client(api_key=api_key, **client_kwargs)

    @property
    def model(self) -> str:
        return self._model

    def _convert_messages(self, messages: list[ChatMessage]) -> tuple[str | None, list[types.Content]]:
        """Split a conversation into (system_instruction, contents)."""
        system_instruction = None
        contents = []
        for msg in messages:
            if msg.role == "system":
                system_instruction = msg.content
                continue
            contents.append(types.Content(
                role=_ROLES[msg.role],
                parts=[types.Part(text=msg.content)]
            ))
        return system_instruction, contents

    def _build_config(
        self,
        system_instruction: str | None,
        temperature: float,
        max_tokens: int | None,
        **kwargs: Any
    ) -> types.GenerateContentConfig:
        config = types.GenerateContentConfig(
            temperature=temperature,
            system_instruction=system_instruction,
            safety_settings=DEFAULT_SAFETY_SETTINGS,
            **kwargs
        )
        if max_tokens is not None:
            config.max_output_tokens = max_tokens
        return config

    def _extract_content(self, response: Any) -> str:
        """Joined text parts of the first candidate, or ''."""
        if not response.candidates:
            return ""
        content = response.candidates[0].content
        if not content or not content.parts:
            return ""
        return "".join(part.text for part in content.parts if getattr(part, "text", None))

    def _extract_usage(self, response: Any) -> dict[str, int] | None:
        meta = response.usage_metadata
        if not meta:
            return None
        return {
            "prompt_tokens": meta.prompt_token_count or 0,
            "completion_tokens": meta.candidates_token_count or 0,
            "total_tokens": meta.total_token_count or 0,
        }

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Send the conversation to ``generateContent`` once.

        Raises:
            NetworkError: The request never got a response
            ProtocolError: Gemini answered with an error status or a bad body
        """
        model_to_use = model or self._model
        system_instruction, contents = self._convert_messages(messages)
        config = self._build_config(system_instruction, temperature, max_tokens, **kwargs)

        try:
            response = await self._client.aio.models.generate_content(
                model=model_to_use,
                contents=contents,
                config=config
            )
        except errors.APIError as e:
            raise ProtocolError(f"Gemini API error: {e.message or e.status}", status_code=e.code) from e
        except (httpx.TransportError, OSError) as e:
            raise NetworkError(f"Could not reach Gemini API: {e}") from e
        except ValueError as e:
            raise ProtocolError(f"Malformed Gemini response: {e}") from e

        return LLMResponse(
            content=self._extract_content(response),
            model=model_to_use,
            usage=self._extract_usage(response)
        )

    async def close(self) -> None:
        # genai.Client holds no connection that needs closing
        pass
