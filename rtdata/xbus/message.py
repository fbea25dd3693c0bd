"""Xbus messages: identifiers, formatting for transmission and data item lookup."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union

from rtdata.xbus.utility import (
    CONTROL_PIPE,
    EXTENDED_LENGTH,
    MASTER_DEVICE,
    PREAMBLE,
    read_u8,
    read_u16,
    write_u16,
)


class MessageId(IntEnum):
    """Xbus message identifiers."""

    WAKEUP = 0x3E
    WAKEUP_ACK = 0x3F
    REQ_DID = 0x00
    DEVICE_ID = 0x01
    GOTO_CONFIG = 0x30
    GOTO_CONFIG_ACK = 0x31
    GOTO_MEASUREMENT = 0x10
    GOTO_MEASUREMENT_ACK = 0x11
    MT_DATA2 = 0x36
    REQ_OUTPUT_CONFIG = 0xC0
    SET_OUTPUT_CONFIG = 0xC0
    OUTPUT_CONFIG = 0xC1
    RESET = 0x40
    RESET_ACK = 0x41
    ERROR = 0x42


class DataIdentifier(IntEnum):
    """Identifiers of the data items in an MT_DATA2 message."""

    PACKET_COUNTER = 0x1020
    SAMPLE_TIME_FINE = 0x1060
    QUATERNION = 0x2010
    DELTA_V = 0x4010
    ACCELERATION = 0x4020
    RATE_OF_TURN = 0x8020
    DELTA_Q = 0x8030
    MAGNETIC_FIELD = 0xC020
    STATUS_WORD = 0xE020


class LowLevelFormat(Enum):
    """Framing used when sending a message to a motion tracker."""

    I2C = "i2c"
    SPI = "spi"
    UART = "uart"


@dataclass(frozen=True)
class OutputConfiguration:
    """One configured output: its data type and frequency in Hz.

    A frequency of 65535 includes the value in every data message.
    """

    dtype: int
    freq: int


Payload = Union[bytes, bytearray, Sequence[OutputConfiguration], int, None]


@dataclass
class XbusMessage:
    """A message identifier with an optional payload.

    The payload is raw bytes for most messages, a sequence of
    :class:`OutputConfiguration` for output configuration messages, and a
    device ID integer for a parsed DEVICE_ID message.
    """

    mid: int
    data: Payload = None

    def length(self) -> int:
        """The number of payload elements: bytes, configurations, or 1 for a device ID."""
        if self.data is None:
            return 0
        if isinstance(self.data, int):
            return 1
        return len(self.data)


_FRAME_PREFIX = {
    LowLevelFormat.I2C: bytes([CONTROL_PIPE]),
    LowLevelFormat.SPI: bytes([CONTROL_PIPE, 0, 0, 0]),
    LowLevelFormat.UART: bytes([PREAMBLE, MASTER_DEVICE]),
}


def _payload_bytes(message: XbusMessage) -> bytes:
    if message.mid == MessageId.SET_OUTPUT_CONFIG:
        configs = message.data or ()
        if isinstance(configs, (int, bytes, bytearray)):
            raise TypeError("an output configuration payload must be a sequence of OutputConfiguration")
        encoded = bytearray()
        for conf in configs:
            if not isinstance(conf, OutputConfiguration):
                raise TypeError(f"{conf!r} is not an OutputConfiguration")
            encoded += write_u16(conf.dtype) + write_u16(conf.freq)
        return bytes(encoded)
    if message.data is None:
        return b""
    if isinstance(message.data, (bytes, bytearray, memoryview)):
        return bytes(message.data)
    raise TypeError("the payload of this message must be bytes")


def format_message(message: XbusMessage, fmt: LowLevelFormat) -> bytes:
    """Frame ``message`` in the raw Xbus format for the given interface."""
    if not 0 <= message.mid <= 0xFF:
        raise ValueError(f"message id {message.mid} does not fit in a byte")
    payload = _payload_bytes(message)
    length = len(payload)
    if length > 0xFFFF:
        raise ValueError("payload is too long for an Xbus message")

    if length < EXTENDED_LENGTH:
        length_field = bytes([length])
    else:
        length_field = bytes([EXTENDED_LENGTH]) + write_u16(length)

    body = bytes([message.mid]) + length_field + payload
    checksum = (-MASTER_DEVICE - sum(body)) & 0xFF
    return _FRAME_PREFIX[fmt] + body + bytes([checksum])


def _find_item(data: bytes, data_id: int) -> int | None:
    offset = 0
    while offset < len(data):
        item_id, offset = read_u16(data, offset)
        item_size, offset = read_u8(data, offset)
        if item_id == data_id:
            return offset
        offset += item_size
    return None


def _read_floats(data: bytes, offset: int, count: int) -> tuple[float, ...]:
    try:
        return struct.unpack_from(f">{count}f", data, offset)
    except struct.error as exc:
        raise ValueError("data item is truncated") from exc


_U16_ITEMS = {DataIdentifier.PACKET_COUNTER}
_U32_ITEMS = {DataIdentifier.SAMPLE_TIME_FINE, DataIdentifier.STATUS_WORD}
_QUAD_ITEMS = {DataIdentifier.QUATERNION, DataIdentifier.DELTA_Q}
_TRIPLE_ITEMS = {
    DataIdentifier.DELTA_V,
    DataIdentifier.ACCELERATION,
    DataIdentifier.RATE_OF_TURN,
    DataIdentifier.MAGNETIC_FIELD,
}


def get_data_item(message: XbusMessage, data_id: int) -> int | tuple[float, ...] | None:
    """Read a data item from an MT_DATA2 message.

    Returns an integer for counters and status words, a tuple of floats for
    vector quantities, and None if the item is absent or of an unsupported type.
    """
    if message.data is None:
        return None
    if not isinstance(message.data, (bytes, bytearray, memoryview)):
        raise TypeError("an MT_DATA2 payload must be bytes")
    data = bytes(message.data)
    offset = _find_item(data, data_id)
    if offset is None:
        return None
    if data_id in _U16_ITEMS:
        return read_u16(data, offset)[0]
    if data_id in _U32_ITEMS:
        from rtdata.xbus.utility import read_u32

        return read_u32(data, offset)[0]
    if data_id in _QUAD_ITEMS:
        return _read_floats(data, offset, 4)
    if data_id in _TRIPLE_ITEMS:
        return _read_floats(data, offset, 3)
    return None


_DATA_DESCRIPTIONS = {
    DataIdentifier.PACKET_COUNTER: "Packet counter",
    DataIdentifier.SAMPLE_TIME_FINE: "Sample time fine",
    DataIdentifier.QUATERNION: "Quaternion",
    DataIdentifier.DELTA_V: "Velocity increment",
    DataIdentifier.ACCELERATION: "Acceleration",
    DataIdentifier.RATE_OF_TURN: "Rate of turn",
    DataIdentifier.DELTA_Q: "Orientation increment",
    DataIdentifier.MAGNETIC_FIELD: "Magnetic field",
    DataIdentifier.STATUS_WORD: "Status word",
}


def data_description(data_id: int) -> str:
    """A human-readable description of a data identifier."""
    return _DATA_DESCRIPTIONS.get(data_id, "Unknown data type")