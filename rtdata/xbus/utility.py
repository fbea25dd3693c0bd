"""Xbus framing constants and big-endian field readers and writers."""

from __future__ import annotations

import struct

PREAMBLE = 0xFA
"""Byte that starts every Xbus message sent over a UART."""

MASTER_DEVICE = 0xFF
"""Bus identifier of the master device."""

NO_PAYLOAD = 0x00
"""Length byte of a message that carries no payload."""

EXTENDED_LENGTH = 0xFF
"""Length byte announcing a two-byte extended length."""

CONTROL_PIPE = 0x03
"""Opcode for writing to the control pipe in I2C/SPI mode."""

PIPE_STATUS = 0x04
NOTIFICATION_PIPE = 0x05
MEASUREMENT_PIPE = 0x06

_U8 = struct.Struct(">B")
_U16 = struct.Struct(">H")
_U32 = struct.Struct(">I")


def _read(codec: struct.Struct, data: bytes | bytearray | memoryview, offset: int) -> tuple[int, int]:
    if offset < 0 or offset + codec.size > len(data):
        raise ValueError(
            f"need {codec.size} byte(s) at offset {offset}, buffer holds {len(data)}"
        )
    (value,) = codec.unpack_from(data, offset)
    return value, offset + codec.size


def read_u8(data: bytes | bytearray | memoryview, offset: int = 0) -> tuple[int, int]:
    """Read an unsigned byte; return it with the offset just past it."""
    return _read(_U8, data, offset)


def read_u16(data: bytes | bytearray | memoryview, offset: int = 0) -> tuple[int, int]:
    """Read a big-endian unsigned 16-bit value; return it with the next offset."""
    return _read(_U16, data, offset)


def read_u32(data: bytes | bytearray | memoryview, offset: int = 0) -> tuple[int, int]:
    """Read a big-endian unsigned 32-bit value; return it with the next offset."""
    return _read(_U32, data, offset)


def write_u8(value: int) -> bytes:
    """Encode the low 8 bits of ``value``."""
    return _U8.pack(value & 0xFF)


def write_u16(value: int) -> bytes:
    """Encode the low 16 bits of ``value`` in big-endian order."""
    return _U16.pack(value & 0xFFFF)


def write_u32(value: int) -> bytes:
    """Encode the low 32 bits of ``value`` in big-endian order."""
    return _U32.pack(value & 0xFFFFFFFF)