"""
Core business logic for resolving free slots.

This is the heart of the application - pure domain logic without any
external dependencies (no I/O, no shared state between calls).
"""

from typing import AbstractSet, Iterable, List, Sequence, Set, Tuple

from ..config import GridConfig
from .models import BusyInterval, Slot
from .normalizer import match_busy_slots
from .slot_grid import build_slot_grid


def resolve_free_slots(grid: Sequence[Slot], busy: AbstractSet[Slot]) -> List[Slot]:
    """Subtract busy slots from the grid, keeping grid order."""
    return [slot for slot in grid if slot not in busy]


class AvailabilityCalculator:
    """
    Calculates free slots of the working day from busy intervals.

    Algorithm:
    1. Build the slot grid from the configuration
    2. Map every busy interval onto the grid slots it touches
    3. Subtract the matched slots from the grid

    A slot is either fully free or fully excluded, so the grid is always
    partitioned into free and busy slots.
    """

    def __init__(self, config: GridConfig):
        self.config = config

    def grid(self) -> Tuple[Slot, ...]:
        return build_slot_grid(self.config)

    def busy_slots(
        self,
        intervals: Iterable[BusyInterval],
        grid: Sequence[Slot] | None = None,
    ) -> Set[Slot]:
        """Collect every grid slot touched by any of the busy intervals."""
        if grid is None:
            grid = self.grid()

        matched: Set[Slot] = set()
        for interval in intervals:
            matched |= match_busy_slots(
                interval,
                grid,
                offset_seconds=self.config.utc_offset_seconds,
                rule=self.config.match_rule,
            )
        return matched

    def free_slots(self, intervals: Iterable[BusyInterval]) -> List[Slot]:
        """
        Find the free slots of the working day.

        Args:
            intervals: Busy intervals reported by the calendar

        Returns:
            Free slots in ascending start order
        """
        grid = self.grid()
        return resolve_free_slots(grid, self.busy_slots(intervals, grid=grid))
