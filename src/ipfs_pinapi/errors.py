"""ipfs_pinapi error hierarchy.

Every exception raised by the client inherits from PinAPIError, so callers
can guard a whole session with one ``except PinAPIError``.

Hierarchy:
    PinAPIError
    ├── ConfigError          bad or conflicting options / configuration
    ├── TransportError       request could not be built or sent
    ├── RemoteError          the daemon answered with an explicit failure
    ├── ParseError           a CID returned by the daemon is malformed
    └── StreamDecodeError    a verify record could not be decoded
"""

from __future__ import annotations


class PinAPIError(Exception):
    """Base class for all ipfs_pinapi errors."""


class ConfigError(PinAPIError):
    """Invalid or conflicting options. Raised before any request is sent."""


class TransportError(PinAPIError):
    """Network or request construction failure talking to the daemon."""


class RemoteError(PinAPIError):
    """Failure reported by the daemon.

    ``str(err)`` is the daemon's message, unmodified.
    """

    def __init__(
        self, message: str, code: int | None = None, status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class ParseError(PinAPIError):
    """A content identifier failed to parse."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"invalid cid {value!r}: {reason}")
        self.value = value
        self.reason = reason


class StreamDecodeError(PinAPIError):
    """A value in a streamed response could not be decoded."""
