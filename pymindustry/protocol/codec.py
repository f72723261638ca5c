"""
Status query packet codec

Builds the ping request and decodes the binary status reply. No I/O.
"""

import logging

from .constants import PING_PACKET
from .reader import BufferLike, PacketReader
from ..models import StatusReply

logger = logging.getLogger(__name__)


def encode_query() -> bytes:
    """Return the two-byte ping request"""
    return PING_PACKET


def decode_reply(buffer: BufferLike) -> StatusReply:
    """Decode a status reply buffer

    Fields are read in wire order into locals and the StatusReply is only
    built once all ten have been read, so a short buffer never yields a
    partial result. Bytes after the mode name are ignored.

    Args:
        buffer: Raw datagram payload

    Returns:
        Decoded StatusReply

    Raises:
        TruncatedPacketError: Buffer ended before a field was complete
        DecodeError: Buffer is not bytes-like
    """
    reader = PacketReader(buffer)

    host_name = reader.read_string("host_name")
    map_name = reader.read_string("map")
    players = reader.read_int("players")
    waves = reader.read_int("waves")
    game_version = reader.read_int("game_version")
    version_type = reader.read_string("version_type")
    game_mode = reader.read_byte("game_mode")
    player_limit = reader.read_int("player_limit")
    description = reader.read_string("description")
    mode_name = reader.read_string("mode_name")

    if reader.remaining():
        logger.debug(f"Ignoring {reader.remaining()} trailing bytes after mode_name")

    return StatusReply(
        host_name=host_name,
        map=map_name,
        players=players,
        waves=waves,
        game_version=game_version,
        version_type=version_type,
        game_mode=game_mode,
        player_limit=player_limit,
        description=description,
        mode_name=mode_name,
    )
