"""Tests for the completion client."""
from typing import Any

import pytest

from aria.chat import NO_RESPONSE_PLACEHOLDER, CompletionClient, Message, to_chat_messages
from aria.llm import ChatMessage, LLMProvider, LLMResponse, NetworkError, ProtocolError


class RecordingProvider(LLMProvider):
    """Provider double that records requests and returns a fixed reply."""

    def __init__(self, content: str = "Hi there!", error: Exception | None = None):
        self.content = content
        self.error = error
        self.requests: list[dict[str, Any]] = []
        self.closed = False

    @property
    def model(self) -> str:
        return "recording-model"

    async def chat_completion(self, messages, model=None, temperature=0.7, max_tokens=None, **kwargs):
        self.requests.append({
            "messages": messages,
            "model": model,
            "temperature": temperature,
            "max_tokens": max_tokens,
        })
        if self.error is not None:
            raise self.error
        return LLMResponse(
            content=self.content,
            model=model or self.model,
            usage={"prompt_tokens": 3, "completion_tokens": 2, "total_tokens": 5},
        )

    async def close(self) -> None:
        self.closed = True


class TestToChatMessages:
    def test_roles_follow_sender(self):
        transcript = [Message.user("Hello"), Message.assistant("Hi there!"), Message.user("Bye")]

        result = to_chat_messages(transcript)

        assert result == [
            ChatMessage(role="user", content="Hello"),
            ChatMessage(role="assistant", content="Hi there!"),
            ChatMessage(role="user", content="Bye"),
        ]

    def test_system_prompt_goes_first(self):
        result = to_chat_messages([Message.user("Hello")], system_prompt="Be brief.")

        assert result[0] == ChatMessage(role="system", content="Be brief.")
        assert result[1].role == "user"

    def test_empty_system_prompt_is_omitted(self):
        result = to_chat_messages([Message.user("Hello")], system_prompt="")
        assert [m.role for m in result] == ["user"]

    def test_empty_transcript(self):
        assert to_chat_messages([]) == []


class TestCompletionClient:
    @pytest.mark.asyncio
    async def test_returns_reply_text(self):
        client = CompletionClient(RecordingProvider("Hi there!"))

        reply = await client.complete([Message.user("Hello")])

        assert reply == "Hi there!"

    @pytest.mark.asyncio
    async def test_sends_full_history_in_order(self):
        provider = RecordingProvider()
        client = CompletionClient(provider)
        transcript = [
            Message.user("one"),
            Message.assistant("first"),
            Message.user("two"),
        ]

        await client.complete(transcript)

        sent = provider.requests[0]["messages"]
        assert [(m.role, m.content) for m in sent] == [
            ("user", "one"),
            ("assistant", "first"),
            ("user", "two"),
        ]

    @pytest.mark.asyncio
    async def test_system_prompt_prepended(self):
        provider = RecordingProvider()
        client = CompletionClient(provider, system_prompt="You are ARIA.")

        await client.complete([Message.user("Hello")])

        assert provider.requests[0]["messages"][0].role == "system"

    @pytest.mark.asyncio
    async def test_empty_reply_becomes_placeholder(self):
        client = CompletionClient(RecordingProvider(""))

        reply = await client.complete([Message.user("Hello")])

        assert reply == NO_RESPONSE_PLACEHOLDER

    @pytest.mark.asyncio
    async def test_custom_placeholder(self):
        client = CompletionClient(RecordingProvider(""), placeholder="(nothing)")
        assert await client.complete([Message.user("Hello")]) == "(nothing)"

    @pytest.mark.asyncio
    async def test_request_parameters_forwarded(self):
        provider = RecordingProvider()
        client = CompletionClient(provider, model="other-model", temperature=0.2, max_tokens=64)

        await client.complete([Message.user("Hello")])

        request = provider.requests[0]
        assert request["model"] == "other-model"
        assert request["temperature"] == 0.2
        assert request["max_tokens"] == 64

    @pytest.mark.asyncio
    async def test_usage_recorded(self):
        client = CompletionClient(RecordingProvider())
        assert client.last_usage is None

        await client.complete([Message.user("Hello")])

        assert client.last_usage["total_tokens"] == 5

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [NetworkError("refused"), ProtocolError("bad", status_code=500)])
    async def test_errors_propagate(self, error):
        provider = RecordingProvider(error=error)
        client = CompletionClient(provider)

        with pytest.raises(type(error)):
            await client.complete([Message.user("Hello")])
        assert len(provider.requests) == 1

    def test_model_defaults_to_provider(self):
        assert CompletionClient(RecordingProvider()).model == "recording-model"
        assert CompletionClient(RecordingProvider(), model="x").model == "x"

    @pytest.mark.asyncio
    async def test_close_closes_provider(self):
        provider = RecordingProvider()
        client = CompletionClient(provider)

        await client.close()

        assert provider.closed is True
