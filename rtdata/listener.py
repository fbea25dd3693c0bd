"""Handlers for events dispatched on a topic."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any


class Listener(ABC):
    """Receives the events published on the topics it is subscribed to."""

    @abstractmethod
    def handle(self, topic: str, data: Any) -> None:
        """Handle a new event ``data`` published on ``topic``."""


class LambdaListener(Listener):
    """A listener that hands every event to a plain function."""

    def __init__(self, function: Callable[[str, Any], None]) -> None:
        if not callable(function):
            raise TypeError("the listener function must be callable")
        self._function = function

    def handle(self, topic: str, data: Any) -> None:
        self._function(topic, data)