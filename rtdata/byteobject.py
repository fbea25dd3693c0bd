"""A compact, order-based binary container."""

from __future__ import annotations

import struct

from rtdata.serialized import SerializedObject

_HEADER = struct.Struct("<I")
_INT = struct.Struct("<i")
_UINT = struct.Struct("<I")
_FLOAT = struct.Struct("<f")
_DOUBLE = struct.Struct("<d")
_BOOL = struct.Struct("<?")
_LONG_INT = struct.Struct("<Q")

_MAX_STRING = 255


class ByteObject(SerializedObject):
    """Values stored one after another, each prefixed by its size in one byte.

    Keys are ignored: values must be read back in the order they were put.
    The whole buffer, as returned by :meth:`get_bytes`, is prefixed by its
    length as a little-endian 32-bit integer.
    """

    def __init__(self, topic: str | None = None) -> None:
        self._buffer = bytearray()
        if topic is not None:
            self.put_string("topic", topic)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray) -> ByteObject:
        """Rebuild a container from the output of :meth:`get_bytes`."""
        data = bytes(data)
        if len(data) < _HEADER.size:
            raise ValueError("The buffer is too short to hold its length header")
        (size,) = _HEADER.unpack_from(data)
        if size + _HEADER.size != len(data):
            raise ValueError("The buffer has a different number of bytes than declared")
        obj = cls()
        obj._buffer = bytearray(data[_HEADER.size:])
        return obj

    def _put(self, codec: struct.Struct, value: object) -> None:
        try:
            packed = codec.pack(value)
        except struct.error as exc:
            raise ValueError(f"cannot store {value!r}: {exc}") from exc
        self._buffer.append(codec.size)
        self._buffer += packed

    def _get(self, codec: struct.Struct):
        if len(self._buffer) < codec.size + 1:
            raise IndexError("Not enough remaining bytes to be deserialized")
        if self._buffer[0] != codec.size:
            raise ValueError("The asked type size does not match the stored value size")
        (value,) = codec.unpack_from(self._buffer, 1)
        del self._buffer[: codec.size + 1]
        return value

    def put_int(self, key: str, value: int) -> None:
        self._put(_INT, value)

    def put_uint(self, key: str, value: int) -> None:
        self._put(_UINT, value)

    def put_float(self, key: str, value: float) -> None:
        self._put(_FLOAT, value)

    def put_double(self, key: str, value: float) -> None:
        self._put(_DOUBLE, value)

    def put_bool(self, key: str, value: bool) -> None:
        self._put(_BOOL, value)

    def put_string(self, key: str, value: str) -> None:
        encoded = value.encode("utf-8")
        if len(encoded) > _MAX_STRING:
            raise ValueError(f"strings are limited to {_MAX_STRING} bytes")
        self._buffer.append(len(encoded))
        self._buffer += encoded

    def put_long_int(self, key: str, value: int) -> None:
        self._put(_LONG_INT, value)

    def get_int(self, key: str) -> int:
        return self._get(_INT)

    def get_uint(self, key: str) -> int:
        return self._get(_UINT)

    def get_float(self, key: str) -> float:
        return self._get(_FLOAT)

    def get_double(self, key: str) -> float:
        return self._get(_DOUBLE)

    def get_bool(self, key: str) -> bool:
        return self._get(_BOOL)

    def get_string(self, key: str) -> str:
        if not self._buffer:
            raise IndexError("Not enough remaining bytes to be deserialized")
        size = self._buffer[0]
        if len(self._buffer) < size + 1:
            raise IndexError("Not enough remaining bytes to be deserialized")
        value = bytes(self._buffer[1 : size + 1]).decode("utf-8")
        del self._buffer[: size + 1]
        return value

    def get_long_int(self, key: str) -> int:
        return self._get(_LONG_INT)

    def get_bytes(self) -> bytes:
        """The stored values, prefixed by their total length (little-endian, 32 bits)."""
        return _HEADER.pack(len(self._buffer)) + bytes(self._buffer)