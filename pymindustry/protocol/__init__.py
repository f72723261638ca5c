"""
Status query wire protocol
"""

from .constants import (
    DEFAULT_PORT, DEFAULT_TIMEOUT, PING_PACKET, GameMode, ErrorKind
)
from .errors import (
    QueryError, TransportError, QueryTimeoutError, DecodeError, TruncatedPacketError
)
from .reader import PacketReader
from .codec import encode_query, decode_reply

__all__ = [
    'DEFAULT_PORT', 'DEFAULT_TIMEOUT', 'PING_PACKET', 'GameMode', 'ErrorKind',
    'QueryError', 'TransportError', 'QueryTimeoutError', 'DecodeError',
    'TruncatedPacketError',
    'PacketReader', 'encode_query', 'decode_reply'
]
