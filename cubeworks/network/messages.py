"""Message types, network constants and a binary packet with typed fields."""

from __future__ import annotations

import struct
from enum import IntEnum

NETWORK_VERSION = 1
"""Protocol version a client sends when connecting."""

NETWORK_TIMEOUT = 5.0
"""Seconds of silence after which a peer or a reliable message is given up."""

NETWORK_RELIABLE_RETRY_TIME = 1.0 / 20
"""Seconds between resends of an unconfirmed reliable message."""

NETWORK_WORLD_UPDATE_RATE = 30
"""World state updates sent per second."""

NETWORK_MAX_CLIENTS = 64
"""Highest client id a server hands out."""


class MsgType(IntEnum):
    """Kind of a network message; the value is what goes on the wire."""

    EMPTY = 0
    ERROR = 1
    CONFIRM = 2
    CONNECT = 3
    DISCONNECT = 4
    INIT = 5
    SERVER_UPDATE = 6
    CLIENT_UPDATE = 7
    NEW_CLIENT = 8
    CUSTOM = 9


class PacketError(ValueError):
    """A value cannot be written to or read from a packet."""


_U8 = struct.Struct(">B")
_U16 = struct.Struct(">H")
_U32 = struct.Struct(">I")


class Packet:
    """A byte buffer with big-endian typed writes and sequential reads."""

    __slots__ = ("_data", "_pos")

    def __init__(self, data: bytes = b"") -> None:
        self._data = bytearray(data)
        self._pos = 0

    def _write(self, fmt: struct.Struct, value: int) -> Packet:
        try:
            self._data += fmt.pack(value)
        except struct.error as exc:
            raise PacketError(f"cannot encode {value!r}: {exc}") from exc
        return self

    def _read(self, fmt: struct.Struct) -> int:
        end = self._pos + fmt.size
        if end > len(self._data):
            raise PacketError(
                f"need {fmt.size} bytes at offset {self._pos}, packet has {len(self._data)}"
            )
        (value,) = fmt.unpack_from(self._data, self._pos)
        self._pos = end
        return value

    def write_uint16(self, value: int) -> Packet:
        """Append an unsigned 16-bit integer."""
        return self._write(_U16, value)

    def read_uint16(self) -> int:
        """Read the next unsigned 16-bit integer."""
        return self._read(_U16)

    def write_uint32(self, value: int) -> Packet:
        """Append an unsigned 32-bit integer."""
        return self._write(_U32, value)

    def read_uint32(self) -> int:
        """Read the next unsigned 32-bit integer."""
        return self._read(_U32)

    def write_bool(self, value: bool) -> Packet:
        """Append a boolean as one byte."""
        return self._write(_U8, 1 if value else 0)

    def read_bool(self) -> bool:
        """Read the next boolean."""
        return self._read(_U8) != 0

    def write_msg_type(self, msg_type: MsgType) -> Packet:
        """Append a message type as an unsigned 16-bit integer."""
        return self.write_uint16(int(msg_type))

    def read_msg_type(self) -> MsgType:
        """Read the next message type."""
        value = self.read_uint16()
        try:
            return MsgType(value)
        except ValueError as exc:
            raise PacketError(f"unknown message type {value}") from exc

    def append(self, data: bytes) -> Packet:
        """Append raw bytes."""
        self._data += data
        return self

    def data(self) -> bytes:
        """Return all bytes of the packet."""
        return bytes(self._data)

    def __bytes__(self) -> bytes:
        return self.data()

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Packet({bytes(self._data)!r})"