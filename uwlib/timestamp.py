"""Monotonic timestamps with nanosecond resolution."""

import time
from dataclasses import dataclass

_NANOSECONDS_PER_SECOND = 1_000_000_000


@dataclass(frozen=True, order=True)
class Timestamp:
    """A point or span of time as whole seconds plus nanoseconds."""

    seconds: int = 0
    nanoseconds: int = 0

    def __add__(self, other):
        if not isinstance(other, Timestamp):
            return NotImplemented
        seconds = self.seconds + other.seconds
        nanoseconds = self.nanoseconds + other.nanoseconds
        if nanoseconds >= _NANOSECONDS_PER_SECOND:
            nanoseconds -= _NANOSECONDS_PER_SECOND
            seconds += 1
        return Timestamp(seconds, nanoseconds)

    def __sub__(self, other):
        if not isinstance(other, Timestamp):
            return NotImplemented
        seconds = self.seconds - other.seconds
        nanoseconds = self.nanoseconds - other.nanoseconds
        if self.nanoseconds < other.nanoseconds:
            seconds -= 1
            nanoseconds += _NANOSECONDS_PER_SECOND
        return Timestamp(seconds, nanoseconds)


def monotonic():
    """Return the current reading of the monotonic clock."""
    seconds, nanoseconds = divmod(time.monotonic_ns(), _NANOSECONDS_PER_SECOND)
    return Timestamp(seconds, nanoseconds)