"""
Time Source
===========

Supplies hour, minute and second once per tick, and the two numerals
the clock shows: hour*100 + minute, and second.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional


@dataclass(frozen=True)
class TimeReading:
    """
    Immutable wall-clock reading.

    Attributes:
        hour: 0-23
        minute: 0-59
        second: 0-59
    """

    hour: int
    minute: int
    second: int

    def __post_init__(self):
        """Validate ranges."""
        if not 0 <= self.hour <= 23:
            raise ValueError(f"hour must be in [0, 23], got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute must be in [0, 59], got {self.minute}")
        if not 0 <= self.second <= 59:
            raise ValueError(f"second must be in [0, 59], got {self.second}")

    @classmethod
    def from_datetime(cls, dt: datetime) -> "TimeReading":
        # leap seconds are folded into 59
        return cls(hour=dt.hour, minute=dt.minute, second=min(dt.second, 59))

    @property
    def hours_minutes(self) -> int:
        """First numeral, e.g. 12:34 -> 1234."""
        return self.hour * 100 + self.minute

    @property
    def seconds(self) -> int:
        return self.second

    @property
    def text(self) -> str:
        """Formatted as "%H:%M %S"."""
        return f"{self.hour:02d}:{self.minute:02d} {self.second:02d}"


class SystemTimeSource:
    """
    Reads local time.

    Usage:
        source = SystemTimeSource()
        reading = source.read()

        # Tests inject a fixed clock
        source = SystemTimeSource(now=lambda: datetime(2026, 1, 1, 12, 34, 56))
    """

    def __init__(self, now: Optional[Callable[[], datetime]] = None):
        self._now = now or datetime.now

    def read(self) -> TimeReading:
        return TimeReading.from_datetime(self._now())
