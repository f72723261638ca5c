"""
Protocol constants for the server status query
"""

from enum import Enum, IntEnum


DEFAULT_PORT = 6567
DEFAULT_TIMEOUT = 2.0

# Ping opcode pair sent as the whole request datagram
PING_PACKET = bytes([0xFE, 0x01])

# Strings carry a single length byte
MAX_STRING_LENGTH = 255
INT_SIZE = 4


class GameMode(IntEnum):
    """Game mode byte reported in the status reply"""
    SURVIVAL = 0
    SANDBOX = 1
    ATTACK = 2
    PVP = 3
    EDITOR = 4


class ErrorKind(Enum):
    """Reason a server was reported offline"""
    TRANSPORT_ERROR = "transport_error"
    TIMEOUT = "timeout"
    TRUNCATED_PACKET = "truncated_packet"
    DECODE_ERROR = "decode_error"
