"""Time units, durations and nanosecond-resolution timestamps."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import ClassVar

_U64_MASK = (1 << 64) - 1


def _u64(value: int) -> int:
    """Reduce an integer to the unsigned 64-bit range, wrapping like the counters do."""
    return value & _U64_MASK


@dataclass(frozen=True)
class TimeUnit:
    """A unit of time, expressed as a number of nanoseconds."""

    nanos: int

    SECONDS: ClassVar[TimeUnit]
    MILLISECONDS: ClassVar[TimeUnit]
    MICROSECONDS: ClassVar[TimeUnit]
    NANOSECONDS: ClassVar[TimeUnit]

    def __post_init__(self) -> None:
        if self.nanos <= 0:
            raise ValueError("a time unit must span at least one nanosecond")

    @staticmethod
    def convert(value: int, original: TimeUnit, destination: TimeUnit) -> int:
        """Convert ``value`` from ``original`` units to ``destination`` units (truncating)."""
        return _u64(original.nanos * value) // destination.nanos


TimeUnit.SECONDS = TimeUnit(1_000_000_000)
TimeUnit.MILLISECONDS = TimeUnit(1_000_000)
TimeUnit.MICROSECONDS = TimeUnit(1_000)
TimeUnit.NANOSECONDS = TimeUnit(1)


@dataclass(frozen=True)
class Duration:
    """The span of time between two points given in nanoseconds."""

    start: int = 0
    end: int = 0

    @classmethod
    def of(cls, value: int, unit: TimeUnit) -> Duration:
        """Build a duration of ``value`` in the given unit."""
        return cls(0, TimeUnit.convert(value, unit, TimeUnit.NANOSECONDS))

    def to_seconds(self) -> int:
        return TimeUnit.convert(self.to_nanos(), TimeUnit.NANOSECONDS, TimeUnit.SECONDS)

    def to_millis(self) -> int:
        return TimeUnit.convert(self.to_nanos(), TimeUnit.NANOSECONDS, TimeUnit.MILLISECONDS)

    def to_micros(self) -> int:
        return TimeUnit.convert(self.to_nanos(), TimeUnit.NANOSECONDS, TimeUnit.MICROSECONDS)

    def to_nanos(self) -> int:
        return _u64(self.end - self.start)


class Timestamp:
    """A point in time, counted in nanoseconds since the epoch."""

    __slots__ = ("_nanos",)

    EPOCH: ClassVar[Timestamp]

    def __init__(self, nanos: int = 0) -> None:
        self._nanos = _u64(nanos)

    @classmethod
    def now(cls) -> Timestamp:
        """The current time at the highest resolution available."""
        return cls(time.time_ns())

    @classmethod
    def from_duration(cls, time: int, units: TimeUnit) -> Timestamp:
        """A timestamp ``time`` units after the epoch."""
        return cls(TimeUnit.convert(time, units, TimeUnit.NANOSECONDS))

    def to_seconds(self) -> int:
        return TimeUnit.convert(self._nanos, TimeUnit.NANOSECONDS, TimeUnit.SECONDS)

    def to_millis(self) -> int:
        return TimeUnit.convert(self._nanos, TimeUnit.NANOSECONDS, TimeUnit.MILLISECONDS)

    def to_micros(self) -> int:
        return TimeUnit.convert(self._nanos, TimeUnit.NANOSECONDS, TimeUnit.MICROSECONDS)

    def to_nanos(self) -> int:
        return self._nanos

    def plus(self, time: int, unit: TimeUnit) -> Timestamp:
        """A new timestamp ``time`` units later."""
        return Timestamp(self._nanos + TimeUnit.convert(time, unit, TimeUnit.NANOSECONDS))

    def minus(self, time: int, unit: TimeUnit) -> Timestamp:
        """A new timestamp ``time`` units earlier."""
        return Timestamp(self._nanos - TimeUnit.convert(time, unit, TimeUnit.NANOSECONDS))

    def __add__(self, duration: object) -> Timestamp:
        if not isinstance(duration, Duration):
            return NotImplemented
        return Timestamp(self._nanos + duration.to_nanos())

    def __sub__(self, other: object) -> Duration | Timestamp:
        if isinstance(other, Timestamp):
            return Duration(other._nanos, self._nanos)
        if isinstance(other, Duration):
            return Timestamp(self._nanos - other.to_nanos())
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._nanos < other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._nanos > other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._nanos <= other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._nanos >= other._nanos

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._nanos == other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __repr__(self) -> str:
        return f"Timestamp({self._nanos})"


Timestamp.EPOCH = Timestamp(0)