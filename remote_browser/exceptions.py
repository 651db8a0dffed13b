"""Exception hierarchy for remote browser connections.

Every connector failure is a CdpConnectionError. Subclasses only narrow the
condition; callers can always catch the base class and inspect ``code``.
"""

from typing import Any, Optional

CDP_CONNECTION_FAILED = "CDP_CONNECTION_FAILED"
NO_CONTEXT = "NO_CONTEXT"


class CdpConnectionError(Exception):
    """Base exception for all connector failures.

    Attributes:
        message: Human-readable error message
        code: Optional machine-readable code (e.g. "CDP_CONNECTION_FAILED")
        details: Optional diagnostic payload, usually the original error
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details

    def __str__(self):
        if self.code:
            return f"{self.message} [{self.code}]"
        return self.message


class NoContextError(CdpConnectionError):
    """Connected, but the browser exposed no browsing context.

    Fatal for the attempt; never retried.
    """

    def __init__(self, message: str = "No browser context found after connecting", details: Any = None):
        super().__init__(message, code=NO_CONTEXT, details=details)


class NotConnectedError(CdpConnectionError):
    """Accessor used before a successful connect()."""

    def __init__(self, message: str = "Not connected. Call connect() first."):
        super().__init__(message)
