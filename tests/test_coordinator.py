"""Unit tests for the send coordinator round trip."""
import asyncio

import pytest
from hypothesis import given
from hypothesis import strategies as st

from aria.chat import (
    DEFAULT_ERROR_MESSAGE,
    DEFAULT_FAILURE_NOTICE,
    NEW_CHAT_NOTICE,
    SendCoordinator,
    Sender,
    Transcript,
)
from aria.llm import NetworkError, ProtocolError

from .conftest import ScriptedCompleter


def _pairs(transcript: Transcript) -> list[tuple[str, str]]:
    return [(m.sender.value, m.content) for m in transcript]


class TestSubmitSuccess:
    """Tests for a successful round trip."""

    @pytest.mark.asyncio
    async def test_hello_scenario(self, coordinator, transcript):
        """Submit 'Hello' and receive 'Hi there!'."""
        await coordinator.submit("Hello")

        assert _pairs(transcript) == [("user", "Hello"), ("assistant", "Hi there!")]
        assert coordinator.busy is False

    @pytest.mark.asyncio
    async def test_user_message_appended_before_call(self, coordinator, completer, transcript):
        """The client sees the new user message at the end of the history."""
        await coordinator.submit("Hello")

        sent = completer.calls[0]
        assert len(sent) == 1
        assert sent[-1].sender == Sender.USER
        assert sent[-1].content == "Hello"

    @pytest.mark.asyncio
    async def test_user_message_visible_while_call_pending(self, transcript):
        gate = asyncio.Event()
        coordinator = SendCoordinator(ScriptedCompleter("Hi there!", gate=gate), transcript=transcript)

        task = asyncio.create_task(coordinator.submit("Hello"))
        await asyncio.sleep(0)

        assert _pairs(transcript) == [("user", "Hello")]
        assert coordinator.busy is True

        gate.set()
        await task
        assert len(transcript) == 2
        assert coordinator.busy is False

    @pytest.mark.asyncio
    async def test_input_is_trimmed(self, coordinator, transcript):
        await coordinator.submit("  Hello \n")
        assert transcript.messages[0].content == "Hello"

    @pytest.mark.asyncio
    async def test_full_history_replayed(self, transcript):
        completer = ScriptedCompleter("first reply", "second reply")
        coordinator = SendCoordinator(completer, transcript=transcript)

        await coordinator.submit("one")
        await coordinator.submit("two")

        assert len(completer.calls) == 2
        assert [m.content for m in completer.calls[1]] == ["one", "first reply", "two"]
        assert _pairs(transcript) == [
            ("user", "one"),
            ("assistant", "first reply"),
            ("user", "two"),
            ("assistant", "second reply"),
        ]

    @pytest.mark.asyncio
    async def test_busy_listener_sees_true_then_false(self, coordinator):
        changes = []
        coordinator.subscribe_busy(changes.append)

        await coordinator.submit("Hello")

        assert changes == [True, False]

    @pytest.mark.asyncio
    async def test_no_notification_on_success(self, coordinator):
        notifications = []
        coordinator.subscribe_notifications(notifications.append)

        await coordinator.submit("Hello")

        assert notifications == []


class TestSubmitFailure:
    """Tests for failed round trips."""

    @pytest.mark.asyncio
    async def test_network_failure_scenario(self, failing_completer, transcript):
        coordinator = SendCoordinator(failing_completer, transcript=transcript)
        notifications = []
        coordinator.subscribe_notifications(notifications.append)

        await coordinator.submit("Hello")

        assert _pairs(transcript) == [("user", "Hello"), ("assistant", DEFAULT_ERROR_MESSAGE)]
        assert coordinator.busy is False
        assert len(notifications) == 1
        assert notifications[0].severity == "error"
        assert notifications[0].message == DEFAULT_FAILURE_NOTICE

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [
        NetworkError("timeout"),
        ProtocolError("bad status", status_code=401),
        ProtocolError("malformed body"),
        RuntimeError("unexpected"),
    ])
    async def test_all_failures_collapse_to_one_message(self, transcript, error):
        coordinator = SendCoordinator(ScriptedCompleter(error), transcript=transcript)

        await coordinator.submit("Hello")

        assert transcript.last.content == DEFAULT_ERROR_MESSAGE
        assert transcript.last.sender == Sender.ASSISTANT
        assert coordinator.busy is False

    @pytest.mark.asyncio
    async def test_custom_error_strings(self, failing_completer, transcript):
        coordinator = SendCoordinator(
            failing_completer,
            transcript=transcript,
            error_message="Could not reach the API.",
            failure_notice="Request failed.",
        )
        notifications = []
        coordinator.subscribe_notifications(notifications.append)

        await coordinator.submit("Hello")

        assert transcript.last.content == "Could not reach the API."
        assert notifications[0].message == "Request failed."

    @pytest.mark.asyncio
    async def test_no_retry_after_failure(self, transcript):
        completer = ScriptedCompleter(NetworkError("down"), "would succeed")
        coordinator = SendCoordinator(completer, transcript=transcript)

        await coordinator.submit("Hello")

        assert len(completer.calls) == 1
        assert len(transcript) == 2

    @pytest.mark.asyncio
    async def test_resubmit_after_failure_works(self, transcript):
        completer = ScriptedCompleter(NetworkError("down"), "Hi there!")
        coordinator = SendCoordinator(completer, transcript=transcript)

        await coordinator.submit("Hello")
        await coordinator.submit("Hello")

        assert transcript.last.content == "Hi there!"
        assert len(transcript) == 4

    @pytest.mark.asyncio
    async def test_cancellation_clears_busy_flag(self, transcript):
        gate = asyncio.Event()
        coordinator = SendCoordinator(ScriptedCompleter("never", gate=gate), transcript=transcript)

        task = asyncio.create_task(coordinator.submit("Hello"))
        await asyncio.sleep(0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert coordinator.busy is False
        assert len(transcript) == 1


class TestRejectedSubmissions:
    """Submissions that must be silent no-ops."""

    @pytest.mark.asyncio
    async def test_empty_input_ignored(self, coordinator, completer, transcript):
        notifications = []
        coordinator.subscribe_notifications(notifications.append)

        await coordinator.submit("")

        assert len(transcript) == 0
        assert completer.calls == []
        assert notifications == []

    @given(st.text(alphabet=" \t\r\n", max_size=20))
    def test_whitespace_only_input_ignored(self, text: str):
        """Property test: blank input never touches the transcript."""
        transcript = Transcript()
        completer = ScriptedCompleter("reply")
        coordinator = SendCoordinator(completer, transcript=transcript)

        asyncio.run(coordinator.submit(text))

        assert len(transcript) == 0
        assert completer.calls == []

    @pytest.mark.asyncio
    async def test_submit_while_busy_is_dropped(self, transcript):
        gate = asyncio.Event()
        completer = ScriptedCompleter("first", "second", gate=gate)
        coordinator = SendCoordinator(completer, transcript=transcript)

        task = asyncio.create_task(coordinator.submit("one"))
        await asyncio.sleep(0)
        assert coordinator.busy is True

        await coordinator.submit("two")
        assert len(transcript) == 1

        gate.set()
        await task

        assert _pairs(transcript) == [("user", "one"), ("assistant", "first")]
        assert len(completer.calls) == 1


class TestNewChat:
    """Tests for resetting the conversation."""

    @pytest.mark.asyncio
    async def test_reset_then_fresh_session(self, transcript):
        completer = ScriptedCompleter("first", "Hi there!")
        coordinator = SendCoordinator(completer, transcript=transcript)
        await coordinator.submit("earlier")

        coordinator.new_chat()
        assert len(transcript) == 0

        await coordinator.submit("Hello")

        assert _pairs(transcript) == [("user", "Hello"), ("assistant", "Hi there!")]
        assert [m.content for m in completer.calls[-1]] == ["Hello"]

    def test_new_chat_notifies(self, coordinator):
        notifications = []
        coordinator.subscribe_notifications(notifications.append)

        coordinator.new_chat()

        assert len(notifications) == 1
        assert notifications[0].message == NEW_CHAT_NOTICE
        assert notifications[0].severity == "information"

    @pytest.mark.asyncio
    async def test_reply_of_discarded_chat_is_dropped(self, transcript):
        gate = asyncio.Event()
        coordinator = SendCoordinator(ScriptedCompleter("late reply", gate=gate), transcript=transcript)

        task = asyncio.create_task(coordinator.submit("Hello"))
        await asyncio.sleep(0)
        coordinator.new_chat()
        gate.set()
        await task

        assert len(transcript) == 0
        assert coordinator.busy is False

    @pytest.mark.asyncio
    async def test_failure_of_discarded_chat_is_silent(self, transcript):
        gate = asyncio.Event()
        coordinator = SendCoordinator(
            ScriptedCompleter(NetworkError("down"), gate=gate),
            transcript=transcript,
        )
        notifications = []

        task = asyncio.create_task(coordinator.submit("Hello"))
        await asyncio.sleep(0)
        coordinator.new_chat()
        coordinator.subscribe_notifications(notifications.append)
        gate.set()
        await task

        assert len(transcript) == 0
        assert notifications == []


class TestDebugCallback:
    """Tests for execution logging."""

    @pytest.mark.asyncio
    async def test_round_trip_is_logged(self, coordinator):
        entries = []
        coordinator.set_debug_callback(lambda level, component, message: entries.append((level, component)))

        await coordinator.submit("Hello")

        assert ("info", "Chat") in entries
        assert ("info", "LLM") in entries

    @pytest.mark.asyncio
    async def test_failure_is_logged_as_error(self, failing_completer):
        coordinator = SendCoordinator(failing_completer)
        entries = []
        coordinator.set_debug_callback(lambda level, component, message: entries.append((level, message)))

        await coordinator.submit("Hello")

        assert any(level == "error" and "connection refused" in msg for level, msg in entries)

    def test_default_transcript_is_private(self, completer):
        first = SendCoordinator(completer)
        second = SendCoordinator(completer)
        assert first.transcript is not second.transcript

    @pytest.mark.asyncio
    async def test_debug_callback_can_be_removed(self, coordinator):
        entries = []
        coordinator.set_debug_callback(lambda level, component, message: entries.append(message))
        coordinator.set_debug_callback(None)

        await coordinator.submit("Hello")

        assert entries == []
