"""
Exceptions raised while querying and decoding server status
"""

from typing import Optional

from .constants import ErrorKind


class QueryError(Exception):
    """Base exception for status query failures"""
    kind = ErrorKind.TRANSPORT_ERROR


class TransportError(QueryError):
    """Raised when the UDP endpoint cannot bind, resolve or send"""
    kind = ErrorKind.TRANSPORT_ERROR


class QueryTimeoutError(QueryError):
    """Raised when no reply arrives before the deadline"""
    kind = ErrorKind.TIMEOUT


class DecodeError(QueryError):
    """Raised when a reply buffer is structurally invalid"""
    kind = ErrorKind.DECODE_ERROR


class TruncatedPacketError(DecodeError):
    """Raised when the buffer ends before a field is fully read"""
    kind = ErrorKind.TRUNCATED_PACKET

    def __init__(self, field: str, needed: int, available: int,
                 message: Optional[str] = None):
        self.field = field
        self.needed = needed
        self.available = available
        super().__init__(
            message or
            f"Truncated packet reading {field!r}: need {needed} bytes, {available} available"
        )


_ERRORS_BY_KIND = {
    ErrorKind.TRANSPORT_ERROR: TransportError,
    ErrorKind.TIMEOUT: QueryTimeoutError,
    ErrorKind.DECODE_ERROR: DecodeError,
    # field offsets are not kept in an outcome
    ErrorKind.TRUNCATED_PACKET: DecodeError,
}


def error_for(kind: ErrorKind, message: str) -> QueryError:
    """Build the exception matching an offline reason"""
    return _ERRORS_BY_KIND[kind](message)
