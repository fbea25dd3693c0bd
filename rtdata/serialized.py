"""Interfaces for serialized containers and for objects that can be stored in them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar


class SerializedObject(ABC):
    """A container that typed values are put into and read back from.

    Every value is given a key; an implementation may ignore the key and
    rely on the order in which values are put and read instead.
    """

    @abstractmethod
    def put_int(self, key: str, value: int) -> None:
        """Store a signed 32-bit integer."""

    @abstractmethod
    def put_uint(self, key: str, value: int) -> None:
        """Store an unsigned 32-bit integer."""

    @abstractmethod
    def put_float(self, key: str, value: float) -> None:
        """Store a single-precision float."""

    @abstractmethod
    def put_double(self, key: str, value: float) -> None:
        """Store a double-precision float."""

    @abstractmethod
    def put_bool(self, key: str, value: bool) -> None:
        """Store a boolean."""

    @abstractmethod
    def put_string(self, key: str, value: str) -> None:
        """Store a string."""

    @abstractmethod
    def put_long_int(self, key: str, value: int) -> None:
        """Store an unsigned 64-bit integer."""

    @abstractmethod
    def get_int(self, key: str) -> int:
        """Read back a signed 32-bit integer."""

    @abstractmethod
    def get_uint(self, key: str) -> int:
        """Read back an unsigned 32-bit integer."""

    @abstractmethod
    def get_float(self, key: str) -> float:
        """Read back a single-precision float."""

    @abstractmethod
    def get_double(self, key: str) -> float:
        """Read back a double-precision float."""

    @abstractmethod
    def get_bool(self, key: str) -> bool:
        """Read back a boolean."""

    @abstractmethod
    def get_string(self, key: str) -> str:
        """Read back a string."""

    @abstractmethod
    def get_long_int(self, key: str) -> int:
        """Read back an unsigned 64-bit integer."""

    @abstractmethod
    def get_bytes(self) -> bytes:
        """The serialized representation as bytes."""


class Serializable(ABC):
    """An object that can write itself to and read itself from a SerializedObject."""

    @abstractmethod
    def serialize(self, obj: SerializedObject) -> None:
        """Write this object's state into ``obj``."""

    @abstractmethod
    def deserialize(self, obj: SerializedObject) -> None:
        """Load this object's state from ``obj``."""


_S = TypeVar("_S", bound=SerializedObject)
_D = TypeVar("_D", bound=Serializable)


def serialize(serializable: Serializable, destination: type[_S]) -> _S:
    """Serialize ``serializable`` into a new instance of the ``destination`` container class."""
    if not (isinstance(destination, type) and issubclass(destination, SerializedObject)):
        raise TypeError("the destination class must be derived from SerializedObject")
    obj = destination()
    serializable.serialize(obj)
    return obj


def deserialize(obj: SerializedObject, destination: type[_D]) -> _D:
    """Build a new instance of the ``destination`` class from the contents of ``obj``."""
    if not (isinstance(destination, type) and issubclass(destination, Serializable)):
        raise TypeError("the destination class must be derived from Serializable")
    result = destination()
    result.deserialize(obj)
    return result