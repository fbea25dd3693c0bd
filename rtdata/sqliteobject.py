"""A container that turns values into columns of an SQL insert."""

from __future__ import annotations

import struct
from enum import Enum, auto
from typing import Any

from rtdata.serialized import SerializedObject

_FLOAT = struct.Struct("<f")


def _to_float32(value: float) -> float:
    return _FLOAT.unpack(_FLOAT.pack(value))[0]


def _to_signed64(value: int) -> int:
    value &= (1 << 64) - 1
    return value - (1 << 64) if value >= 1 << 63 else value


class _Kind(Enum):
    INT = auto()
    UINT = auto()
    FLOAT = auto()
    DOUBLE = auto()
    BOOL = auto()
    STRING = auto()
    LONGINT = auto()


class SQLiteObject(SerializedObject):
    """Values kept as named columns of a row for a table.

    Columns are listed in sorted order of their names.
    """

    def __init__(self, table: str = "default") -> None:
        self._table = table
        self._contents: dict[str, tuple[_Kind, Any]] = {}

    @property
    def table(self) -> str:
        """The name of the table the row belongs to."""
        return self._table

    def _put(self, key: str, value: Any, kind: _Kind) -> None:
        self._contents[key] = (kind, value)

    def _get(self, key: str, kind: _Kind) -> Any:
        stored_kind, value = self._contents[key]
        if stored_kind is not kind:
            raise TypeError(
                f"column {key!r} holds a {stored_kind.name.lower()} value, "
                f"not a {kind.name.lower()} value"
            )
        return value

    def _columns(self) -> list[str]:
        return sorted(self._contents)

    def put_int(self, key: str, value: int) -> None:
        self._put(key, int(value), _Kind.INT)

    def put_uint(self, key: str, value: int) -> None:
        self._put(key, int(value), _Kind.UINT)

    def put_float(self, key: str, value: float) -> None:
        self._put(key, _to_float32(value), _Kind.FLOAT)

    def put_double(self, key: str, value: float) -> None:
        self._put(key, float(value), _Kind.DOUBLE)

    def put_bool(self, key: str, value: bool) -> None:
        self._put(key, bool(value), _Kind.BOOL)

    def put_string(self, key: str, value: str) -> None:
        self._put(key, f'"{value}"', _Kind.STRING)

    def put_long_int(self, key: str, value: int) -> None:
        self._put(key, int(value), _Kind.LONGINT)

    def get_int(self, key: str) -> int:
        return self._get(key, _Kind.INT)

    def get_uint(self, key: str) -> int:
        return self._get(key, _Kind.UINT)

    def get_float(self, key: str) -> float:
        return self._get(key, _Kind.FLOAT)

    def get_double(self, key: str) -> float:
        return self._get(key, _Kind.DOUBLE)

    def get_bool(self, key: str) -> bool:
        return self._get(key, _Kind.BOOL)

    def get_string(self, key: str) -> str:
        content: str = self._get(key, _Kind.STRING)
        if len(content) >= 2 and content[0] == '"' and content[-1] == '"':
            content = content[1:-1]
        return content

    def get_long_int(self, key: str) -> int:
        return self._get(key, _Kind.LONGINT)

    def insert_statement(self) -> str:
        """An INSERT statement with a named parameter for every column."""
        columns = self._columns()
        names = ", ".join(columns)
        params = ", ".join(f":{column}" for column in columns)
        return f"INSERT INTO {self._table} ({names}) VALUES ({params});"

    def create_table_statement(self) -> str:
        """A CREATE TABLE statement with one untyped column for every value."""
        return f"CREATE TABLE {self._table} ({', '.join(self._columns())});"

    def bind_values(self) -> dict[str, Any]:
        """The parameters for :meth:`insert_statement`, keyed by column name.

        Booleans become integers and unsigned 64-bit values are reinterpreted
        as signed, as SQLite stores them.
        """
        bound: dict[str, Any] = {}
        for column in self._columns():
            kind, value = self._contents[column]
            if kind is _Kind.BOOL:
                value = int(value)
            elif kind is _Kind.LONGINT:
                value = _to_signed64(value)
            bound[column] = value
        return bound

    def get_bytes(self) -> bytes:
        """Always empty: this container has no byte representation."""
        return b""