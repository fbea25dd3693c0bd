"""A key-based container backed by a JSON document."""

from __future__ import annotations

import copy
import json
import struct
from collections.abc import Mapping
from typing import Any

from rtdata.serialized import SerializedObject

_FLOAT = struct.Struct("<f")


def _to_float32(value: float) -> float:
    return _FLOAT.unpack(_FLOAT.pack(value))[0]


def _wrap_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _wrap_signed(value: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half


class JSONObject(SerializedObject):
    """Values stored under their keys in a JSON object."""

    def __init__(self, topic: str | None = None) -> None:
        self._document: dict[str, Any] = {}
        if topic is not None:
            self.put_string("topic", topic)

    @classmethod
    def from_json(cls, document: Mapping[str, Any]) -> JSONObject:
        """Wrap a copy of an already parsed JSON object."""
        obj = cls()
        obj._document = copy.deepcopy(dict(document))
        return obj

    def put_int(self, key: str, value: int) -> None:
        self._document[key] = int(value)

    def put_uint(self, key: str, value: int) -> None:
        self._document[key] = int(value)

    def put_float(self, key: str, value: float) -> None:
        self._document[key] = _to_float32(value)

    def put_double(self, key: str, value: float) -> None:
        self._document[key] = float(value)

    def put_bool(self, key: str, value: bool) -> None:
        self._document[key] = bool(value)

    def put_string(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"value for {key!r} is not a string")
        self._document[key] = value

    def put_long_int(self, key: str, value: int) -> None:
        self._document[key] = int(value)

    def _number(self, key: str) -> int | float:
        value = self._document[key]
        if not isinstance(value, (int, float)):
            raise TypeError(f"value of {key!r} is not a number")
        return value

    def get_int(self, key: str) -> int:
        return _wrap_signed(int(self._number(key)), 32)

    def get_uint(self, key: str) -> int:
        return _wrap_unsigned(int(self._number(key)), 32)

    def get_float(self, key: str) -> float:
        return _to_float32(float(self._number(key)))

    def get_double(self, key: str) -> float:
        return float(self._number(key))

    def get_bool(self, key: str) -> bool:
        value = self._document[key]
        if not isinstance(value, bool):
            raise TypeError(f"value of {key!r} is not a boolean")
        return value

    def get_string(self, key: str) -> str:
        value = self._document[key]
        if not isinstance(value, str):
            raise TypeError(f"value of {key!r} is not a string")
        return value

    def get_long_int(self, key: str) -> int:
        return _wrap_unsigned(int(self._number(key)), 64)

    def to_json(self) -> dict[str, Any]:
        """A copy of the JSON document."""
        return copy.deepcopy(self._document)

    def to_json_string(self) -> str:
        """The document as compact JSON text with keys in sorted order."""
        return json.dumps(
            self._document, separators=(",", ":"), sort_keys=True, ensure_ascii=False
        )

    def get_bytes(self) -> bytes:
        """The JSON text encoded as UTF-8."""
        return self.to_json_string().encode("utf-8")