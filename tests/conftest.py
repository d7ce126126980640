"""Pytest configuration and shared fixtures."""
import asyncio
from collections.abc import Sequence

import pytest

from aria.chat import Message, SendCoordinator, Transcript
from aria.llm import NetworkError


class ScriptedCompleter:
    """Completion client double that replays scripted outcomes.

    Each outcome is either a reply string or an exception instance to raise.
    Every call records a snapshot of the transcript it received. When
    ``gate`` is set, calls wait on it before answering.
    """

    def __init__(self, *outcomes: str | Exception, gate: asyncio.Event | None = None):
        self._outcomes = list(outcomes)
        self.gate = gate
        self.calls: list[tuple[Message, ...]] = []
        self.model = "scripted"

    async def complete(self, transcript: Sequence[Message]) -> str:
        self.calls.append(tuple(transcript))
        if self.gate is not None:
            await self.gate.wait()
        outcome = self._outcomes.pop(0) if self._outcomes else "ok"
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def transcript():
    """Return an empty transcript."""
    return Transcript()


@pytest.fixture
def completer():
    """Completer answering 'Hi there!' once."""
    return ScriptedCompleter("Hi there!")


@pytest.fixture
def failing_completer():
    """Completer failing with a transport error."""
    return ScriptedCompleter(NetworkError("connection refused"))


@pytest.fixture
def coordinator(completer, transcript):
    """Coordinator wired to the scripted completer."""
    return SendCoordinator(completer, transcript=transcript)


@pytest.fixture
def preferences_path(tmp_path, monkeypatch):
    """Point the preference store at a temporary file."""
    path = tmp_path / "prefs" / "preferences.json"
    monkeypatch.setenv("ARIA_PREFERENCES_PATH", str(path))
    return path
