"""
Reply packet builders for tests
"""

import struct

from ..protocol.constants import MAX_STRING_LENGTH


def encode_string(value: str) -> bytes:
    """Encode a string with its single length byte"""
    raw = value.encode("utf-8")
    if len(raw) > MAX_STRING_LENGTH:
        raise ValueError(f"String too long for one length byte: {len(raw)} bytes")
    return bytes([len(raw)]) + raw


def build_reply_packet(host_name: str = "Test Server", map: str = "groundZero",
                       players: int = 0, waves: int = 1, game_version: int = 146,
                       version_type: str = "official", game_mode: int = 0,
                       player_limit: int = 0, description: str = "",
                       mode_name: str = "") -> bytes:
    """Build a status reply payload in wire order"""
    return b"".join([
        encode_string(host_name),
        encode_string(map),
        struct.pack(">iii", players, waves, game_version),
        encode_string(version_type),
        bytes([game_mode]),
        struct.pack(">i", player_limit),
        encode_string(description),
        encode_string(mode_name),
    ])
