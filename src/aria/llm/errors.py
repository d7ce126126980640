"""Failure taxonomy for completion calls.

Providers translate their SDK-specific exceptions into one of these two
classes so callers never depend on a particular client library.
"""


class CompletionError(Exception):
    """Base class for completion failures."""


class NetworkError(CompletionError):
    """No response was received (connection refused, DNS, reset, timeout)."""

    def __init__(self, message: str):
        super().__init__(f"Network error: {message}")


class ProtocolError(CompletionError):
    """A response was received but could not be used.

    Raised for statuses outside the 2xx range and for bodies that cannot be
    decoded.
    """

    def __init__(self, message: str, status_code: int | None = None):
        msg = f"Protocol error: {message}"
        if status_code is not None:
            msg += f" (status: {status_code})"
        super().__init__(msg)
        self.status_code = status_code
