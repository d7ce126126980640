"""Send coordinator.

Runs one round trip at a time: append the user message, mark the session
busy, ask the completion client, append the reply (or the fixed error text),
clear the busy flag. A submission while busy is dropped, never queued.
"""

from collections.abc import Callable
from typing import Any

from .client import Completer
from .models import Message, Notification
from .transcript import Transcript

DEFAULT_ERROR_MESSAGE = (
    "Sorry, I encountered an error. Please make sure your API key is "
    "configured correctly and try again."
)
DEFAULT_FAILURE_NOTICE = "Failed to get response from AI. Please try again."
NEW_CHAT_NOTICE = "New chat started"

BusyListener = Callable[[bool], None]
NotificationListener = Callable[[Notification], None]
# callback(level, component, message)
DebugCallback = Callable[[str, str, str], None]


def _truncate(text: str, limit: int) -> str:
    return text if len(text) <= limit else text[:limit] + "..."


class SendCoordinator:
    """Owns the session state (transcript + busy flag) for one conversation."""

    def __init__(
        self,
        client: Completer,
        transcript: Transcript | None = None,
        error_message: str = DEFAULT_ERROR_MESSAGE,
        failure_notice: str = DEFAULT_FAILURE_NOTICE,
    ) -> None:
        self._client = client
        self._transcript = transcript if transcript is not None else Transcript()
        self._error_message = error_message
        self._failure_notice = failure_notice
        self._busy = False
        # Bumped on every reset so a reply from a discarded chat is dropped
        self._generation = 0
        self._busy_listeners: list[BusyListener] = []
        self._notification_listeners: list[NotificationListener] = []
        self._debug_callback: DebugCallback | None = None

    @property
    def transcript(self) -> Transcript:
        return self._transcript

    @property
    def client(self) -> Completer:
        return self._client

    @property
    def busy(self) -> bool:
        """True exactly while a completion call is outstanding."""
        return self._busy

    @property
    def error_message(self) -> str:
        return self._error_message

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set the debug callback for execution logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    def subscribe_busy(self, listener: BusyListener) -> Callable[[], None]:
        """Register a listener for busy-flag changes."""
        return self._subscribe(self._busy_listeners, listener)

    def subscribe_notifications(self, listener: NotificationListener) -> Callable[[], None]:
        """Register a listener for transient notifications."""
        return self._subscribe(self._notification_listeners, listener)

    @staticmethod
    def _subscribe(listeners: list, listener: Any) -> Callable[[], None]:
        listeners.append(listener)

        def unsubscribe() -> None:
            if listener in listeners:
                listeners.remove(listener)

        return unsubscribe

    def _set_busy(self, value: bool) -> None:
        self._busy = value
        for listener in list(self._busy_listeners):
            listener(value)

    def _notify(self, notification: Notification) -> None:
        for listener in list(self._notification_listeners):
            listener(notification)

    async def submit(self, text: str) -> None:
        """Run one round trip for ``text``.

        Silently ignored when the text is blank or a round trip is already
        outstanding. Never raises for completion failures.
        """
        content = text.strip()
        if not content:
            self._debug("debug", "Chat", "Ignored empty submission")
            return
        if self._busy:
            self._debug("debug", "Chat", "Ignored submission while busy")
            return

        # Appended before the first await: visible as soon as submit is called
        self._transcript.append(Message.user(content))
        generation = self._generation
        self._set_busy(True)
        self._debug("info", "Chat", f"Sending {len(self._transcript)} message(s): '{_truncate(content, 50)}'")

        try:
            reply = await self._client.complete(self._transcript.messages)
        except Exception as e:
            self._debug("error", "LLM", f"Completion failed: {e}")
            if generation == self._generation:
                self._transcript.append(Message.assistant(self._error_message))
                self._notify(Notification(self._failure_notice, severity="error"))
            else:
                self._debug("debug", "Chat", "Dropped failure of a discarded chat")
        else:
            if generation == self._generation:
                self._debug("info", "LLM", f"Response received ({len(reply)} chars)")
                self._transcript.append(Message.assistant(reply))
            else:
                self._debug("debug", "Chat", "Dropped reply of a discarded chat")
        finally:
            self._set_busy(False)

    def new_chat(self) -> None:
        """Discard the conversation and start over."""
        self._generation += 1
        self._transcript.reset()
        self._debug("info", "Chat", "New chat started")
        self._notify(Notification(NEW_CHAT_NOTICE))
