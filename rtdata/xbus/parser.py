"""Byte-at-a-time parser for Xbus messages received from a motion tracker."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum, auto

from rtdata.xbus.message import MessageId, OutputConfiguration, XbusMessage
from rtdata.xbus.utility import EXTENDED_LENGTH, NO_PAYLOAD, PREAMBLE, read_u16, read_u32


class _State(Enum):
    PREAMBLE = auto()
    BUS_ID = auto()
    MESSAGE_ID = auto()
    LENGTH = auto()
    EXTENDED_LENGTH_MSB = auto()
    EXTENDED_LENGTH_LSB = auto()
    PAYLOAD = auto()
    CHECKSUM = auto()


def _message_id(value: int) -> int:
    try:
        return MessageId(value)
    except ValueError:
        return value


def _parse_device_id(raw: bytes) -> int | None:
    try:
        return read_u32(raw)[0]
    except ValueError:
        return None


def _parse_output_config(raw: bytes) -> list[OutputConfiguration]:
    configs = []
    offset = 0
    for _ in range(len(raw) // 4):
        dtype, offset = read_u16(raw, offset)
        freq, offset = read_u16(raw, offset)
        configs.append(OutputConfiguration(dtype, freq))
    return configs


class XbusParser:
    """Assembles Xbus messages from a stream of bytes.

    Every complete message with a valid checksum is handed to
    ``handle_message``. Messages with a bad checksum are dropped. The payload
    of DEVICE_ID messages is turned into the device ID integer and that of
    OUTPUT_CONFIG messages into a list of :class:`OutputConfiguration`; other
    payloads are delivered as raw bytes.
    """

    def __init__(self, handle_message: Callable[[XbusMessage], None]) -> None:
        if not callable(handle_message):
            raise TypeError("handle_message must be callable")
        self._handle_message = handle_message
        self._state = _State.PREAMBLE
        self._checksum = 0
        self._mid = 0
        self._length = 0
        self._payload = bytearray()

    def _start_payload(self) -> None:
        self._payload = bytearray()
        self._state = _State.PAYLOAD

    def _finish(self) -> XbusMessage:
        raw = bytes(self._payload)
        if self._length == 0:
            data = None
        elif self._mid == MessageId.DEVICE_ID:
            data = _parse_device_id(raw)
        elif self._mid == MessageId.OUTPUT_CONFIG:
            data = _parse_output_config(raw)
        else:
            data = raw
        return XbusMessage(self._mid, data)

    def parse_byte(self, byte: int) -> XbusMessage | None:
        """Feed one byte; return the message it completes, if any."""
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"{byte} is not a byte value")

        state = self._state
        if state is _State.PREAMBLE:
            if byte == PREAMBLE:
                self._checksum = 0
                self._state = _State.BUS_ID
            return None

        self._checksum = (self._checksum + byte) & 0xFF

        if state is _State.BUS_ID:
            self._state = _State.MESSAGE_ID
        elif state is _State.MESSAGE_ID:
            self._mid = _message_id(byte)
            self._state = _State.LENGTH
        elif state is _State.LENGTH:
            if byte == NO_PAYLOAD:
                self._length = 0
                self._payload = bytearray()
                self._state = _State.CHECKSUM
            elif byte < EXTENDED_LENGTH:
                self._length = byte
                self._start_payload()
            else:
                self._state = _State.EXTENDED_LENGTH_MSB
        elif state is _State.EXTENDED_LENGTH_MSB:
            self._length = byte << 8
            self._state = _State.EXTENDED_LENGTH_LSB
        elif state is _State.EXTENDED_LENGTH_LSB:
            self._length |= byte
            if self._length == 0:
                self._payload = bytearray()
                self._state = _State.CHECKSUM
            else:
                self._start_payload()
        elif state is _State.PAYLOAD:
            self._payload.append(byte)
            if len(self._payload) == self._length:
                self._state = _State.CHECKSUM
        elif state is _State.CHECKSUM:
            self._state = _State.PREAMBLE
            if self._checksum == 0:
                message = self._finish()
                self._handle_message(message)
                return message
        return None

    def parse_buffer(self, data: Iterable[int]) -> list[XbusMessage]:
        """Feed a sequence of bytes; return the messages completed along the way."""
        messages = []
        for byte in data:
            message = self.parse_byte(byte)
            if message is not None:
                messages.append(message)
        return messages