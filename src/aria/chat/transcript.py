"""Transcript store.

Hides how the ordered message history is kept and how observers learn about
changes. Append-only; the only other mutation is a full reset.
"""

from collections.abc import Callable, Iterator

from .models import Message, TranscriptEvent

TranscriptListener = Callable[[TranscriptEvent], None]


class Transcript:
    """Ordered, append-only message history for one session."""

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._ids: set[str] = set()
        self._listeners: list[TranscriptListener] = []

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))

    @property
    def messages(self) -> tuple[Message, ...]:
        """Snapshot of the history in display order."""
        return tuple(self._messages)

    @property
    def last(self) -> Message | None:
        return self._messages[-1] if self._messages else None

    def get(self, message_id: str) -> Message | None:
        """Find a message by id."""
        for msg in self._messages:
            if msg.id == message_id:
                return msg
        return None

    def append(self, message: Message) -> None:
        """Append a message at the end.

        Raises:
            ValueError: If a message with the same id is already present
        """
        if message.id in self._ids:
            raise ValueError(f"Duplicate message id: {message.id}")
        self._messages.append(message)
        self._ids.add(message.id)
        self._emit(TranscriptEvent(kind="appended", message=message))

    def reset(self) -> None:
        """Drop every message (new chat)."""
        self._messages.clear()
        self._ids.clear()
        self._emit(TranscriptEvent(kind="reset"))

    def subscribe(self, listener: TranscriptListener) -> Callable[[], None]:
        """Register a change listener.

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, event: TranscriptEvent) -> None:
        for listener in list(self._listeners):
            listener(event)
