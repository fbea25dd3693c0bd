"""Tree-shaped configuration loaded lazily from JSON documents."""

from __future__ import annotations

import copy
import json
from abc import abstractmethod
from collections.abc import Mapping, Sequence
from os import PathLike
from typing import Any, TypeVar

_T = TypeVar("_T")


def _matches(value: Any, kind: type) -> bool:
    """Whether ``value`` holds exactly the requested kind (a bool is not an int)."""
    if isinstance(value, bool) and kind is not bool and kind is not object:
        return False
    return isinstance(value, kind)


class Configuration:
    """A leaf of the configuration tree, holding a single value.

    Trees and arrays are built by the subclasses; indexing a leaf is an error.
    """

    def __init__(self, content: Any = None) -> None:
        self._content = content

    def __getitem__(self, key: str | int) -> Configuration:
        raise TypeError("Operation not supported on a leaf node")

    def get(self, kind: type[_T]) -> _T:
        """The value of this node, which must be of type ``kind``."""
        if not _matches(self._content, kind):
            raise TypeError(
                f"the node holds a {type(self._content).__name__}, "
                f"not a {getattr(kind, '__name__', kind)}"
            )
        return self._content

    def set(self, value: Any) -> None:
        """Replace the value of this node with one of the same type.

        The underlying configuration file is not updated.
        """
        if type(value) is not type(self._content):
            raise TypeError(
                f"cannot store a {type(value).__name__} in a node holding "
                f"a {type(self._content).__name__}"
            )
        self._content = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._content!r})"


class ConfigurationTreeNode(Configuration):
    """A node whose children are named; children are loaded on first access."""

    def __init__(self, content: Any = None) -> None:
        super().__init__(content)
        self._children: dict[str, Configuration] = {}

    def __getitem__(self, key: str | int) -> Configuration:
        if not isinstance(key, str):
            raise TypeError("Operation not supported on a tree node")
        if key not in self._children:
            self._children[key] = self._load(key)
        return self._children[key]

    @abstractmethod
    def _load(self, prop: str) -> Configuration:
        """Build the child node for ``prop``."""


class ConfigurationArrayNode(Configuration):
    """A node whose children are indexed; the whole array loads on first access."""

    def __init__(self, content: Any = None) -> None:
        super().__init__(content)
        self._children: list[Configuration] | None = None

    def __getitem__(self, key: str | int) -> Configuration:
        if isinstance(key, bool) or not isinstance(key, int):
            raise TypeError("Operation not supported on an array node")
        if self._children is None:
            self._children = self._load()
        return self._children[key]

    @abstractmethod
    def _load(self) -> list[Configuration]:
        """Build every child node of the array."""


def _node_for(value: Any) -> Configuration:
    if isinstance(value, Mapping):
        return JSONObjectConfiguration(value)
    if isinstance(value, list):
        return JSONArrayConfiguration(value)
    return Configuration(value)


def _read_json(path: str | PathLike[str]) -> Any:
    with open(path, encoding="utf-8") as handle:
        return json.load(handle)


class JSONObjectConfiguration(ConfigurationTreeNode):
    """A configuration tree backed by a JSON object.

    A property missing from the document yields an empty leaf.
    """

    def __init__(self, document: Mapping[str, Any] | None = None) -> None:
        super().__init__()
        self._document: dict[str, Any] = copy.deepcopy(dict(document or {}))

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> JSONObjectConfiguration:
        """Load and parse a JSON file whose top level is an object."""
        document = _read_json(path)
        if not isinstance(document, dict):
            raise ValueError(f"{path} does not hold a JSON object")
        return cls(document)

    def _load(self, prop: str) -> Configuration:
        if prop not in self._document:
            return Configuration()
        return _node_for(self._document[prop])


class JSONArrayConfiguration(ConfigurationArrayNode):
    """A configuration array backed by a JSON array."""

    def __init__(self, document: Sequence[Any] | None = None) -> None:
        super().__init__()
        self._document: list[Any] = copy.deepcopy(list(document or []))

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> JSONArrayConfiguration:
        """Load and parse a JSON file whose top level is an array."""
        document = _read_json(path)
        if not isinstance(document, list):
            raise ValueError(f"{path} does not hold a JSON array")
        return cls(document)

    def _load(self) -> list[Configuration]:
        return [_node_for(item) for item in self._document]


JSONConfiguration = JSONObjectConfiguration