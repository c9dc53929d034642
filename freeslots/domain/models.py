"""
Domain models for the slot grid and busy intervals.
"""

from dataclasses import dataclass

from pendulum import DateTime

from ..config import MINUTES_PER_DAY


@dataclass(frozen=True)
class Slot:
    """
    A bookable interval ``[start, start + length)`` of the working day.

    ``start`` is expressed in minutes since local midnight of the
    canonical offset.
    """
    start: int
    length: int = 30

    @property
    def end(self) -> int:
        return self.start + self.length

    def overlaps(self, start: int, end: int) -> bool:
        """Check if this slot overlaps the minute range ``[start, end)``."""
        return self.start < end and self.end > start


@dataclass(frozen=True)
class BusyInterval:
    """
    One externally booked period.

    Unlike a slot, a busy interval is not validated for ordering: an empty
    or inverted interval simply matches nothing.
    """
    start: DateTime
    end: DateTime

    def duration_minutes(self) -> int:
        """Return the duration in minutes (negative when inverted)."""
        return int((self.end - self.start).total_seconds() // 60)
