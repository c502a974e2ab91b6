"""Serialisation buffer for game packets with typed little-endian fields."""

from __future__ import annotations

import struct
from functools import lru_cache

DEFAULT_BUFFER_SIZE = 100


class PacketError(Exception):
    """Raised when a packet is read or written out of bounds."""


@lru_cache(maxsize=None)
def _codec(fmt: str) -> struct.Struct:
    if not fmt:
        raise PacketError("empty field format")
    if fmt[0] not in "<>!=@":
        fmt = "<" + fmt
    try:
        return struct.Struct(fmt)
    except struct.error as err:
        raise PacketError(f"invalid field format {fmt!r}") from err


class Packet:
    """A bounded byte buffer with separate read and write positions."""

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self._buffer = bytearray(buffer_size)
        self._front = 0
        self._rear = 0

    @property
    def buffer_size(self) -> int:
        """Total capacity in bytes."""
        return len(self._buffer)

    @property
    def data_size(self) -> int:
        """Bytes written but not yet read."""
        return self._rear - self._front

    def __bytes__(self) -> bytes:
        return bytes(self._buffer[self._front:self._rear])

    def clear(self) -> None:
        """Reset both positions to the start."""
        if self._front > self._rear:
            raise PacketError("read position is past write position")
        self._front = 0
        self._rear = 0

    def move_write_pos(self, size: int) -> int:
        """Advance the write position and return it."""
        if size < 0:
            raise ValueError("cannot move backwards")
        self._rear += size
        return self._rear

    def move_read_pos(self, size: int) -> int:
        """Advance the read position and return it."""
        if size < 0:
            raise ValueError("cannot move backwards")
        self._front += size
        return self._front

    def write(self, fmt: str, value) -> Packet:
        """Append one value packed with the struct format ``fmt``."""
        codec = _codec(fmt)
        if self._rear + codec.size > self.buffer_size:
            raise PacketError("value does not fit in the packet buffer")
        try:
            codec.pack_into(self._buffer, self._rear, value)
        except struct.error as err:
            raise PacketError(str(err)) from err
        self._rear += codec.size
        return self

    def read(self, fmt: str):
        """Consume and return one value unpacked with the struct format ``fmt``."""
        codec = _codec(fmt)
        if self._front + codec.size > self._rear:
            raise PacketError("read past the end of written data")
        (value,) = codec.unpack_from(self._buffer, self._front)
        self._front += codec.size
        return value

    def put_data(self, data: bytes) -> int:
        """Append raw bytes and return how many were written."""
        if self._rear + len(data) > self.buffer_size:
            raise PacketError("data does not fit in the packet buffer")
        self._buffer[self._rear:self._rear + len(data)] = data
        self._rear += len(data)
        return len(data)

    def get_data(self, size: int) -> bytes:
        """Consume and return ``size`` raw bytes."""
        if size < 0 or self._front + size > self._rear:
            raise PacketError("read past the end of written data")
        data = bytes(self._buffer[self._front:self._front + size])
        self._front += size
        return data

    def copy_from(self, other: Packet) -> Packet:
        """Copy positions and contents of ``other`` into this packet."""
        if other._rear > self.buffer_size:
            raise PacketError("source packet does not fit in this buffer")
        self._front = other._front
        self._rear = other._rear
        self._buffer[:other._rear] = other._buffer[:other._rear]
        return self