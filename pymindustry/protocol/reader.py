"""
Cursor-based reader for status reply buffers

The reader never mutates the buffer or re-slices what is left of it: every read
checks the bytes remaining from the current position, consumes them and
advances ``pos``.
"""

import struct
from typing import Union

from .constants import INT_SIZE
from .errors import DecodeError, TruncatedPacketError


BufferLike = Union[bytes, bytearray, memoryview]

_INT32 = struct.Struct(">i")


class PacketReader:
    """Sequential reader over an immutable reply buffer"""

    def __init__(self, data: BufferLike, pos: int = 0):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise DecodeError(f"Expected a bytes-like buffer, got {type(data).__name__}")
        # bytes() snapshots mutable inputs so later caller edits can't leak in
        self.data = bytes(data)
        self.pos = pos

    def remaining(self) -> int:
        """Get number of bytes remaining to read"""
        return len(self.data) - self.pos

    def has_data(self, num_bytes: int = 1) -> bool:
        """Check if specified number of bytes are available"""
        return self.remaining() >= num_bytes

    def _require(self, field: str, num_bytes: int) -> None:
        if not self.has_data(num_bytes):
            raise TruncatedPacketError(field, num_bytes, self.remaining())

    def read_byte(self, field: str = "byte") -> int:
        """Read a single unsigned byte"""
        self._require(field, 1)
        value = self.data[self.pos]
        self.pos += 1
        return value

    def read_int(self, field: str = "int") -> int:
        """Read a signed 32-bit big-endian integer"""
        self._require(field, INT_SIZE)
        (value,) = _INT32.unpack_from(self.data, self.pos)
        self.pos += INT_SIZE
        return value

    def read_string(self, field: str = "string") -> str:
        """Read a string prefixed by a single length byte

        Invalid UTF-8 is replaced rather than rejected.
        """
        length = self.read_byte(f"{field} length")
        self._require(field, length)
        raw = self.data[self.pos:self.pos + length]
        self.pos += length
        return raw.decode("utf-8", errors="replace")
