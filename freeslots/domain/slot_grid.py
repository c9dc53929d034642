"""
Generation of the fixed slot grid for one working day.
"""

from typing import Tuple

from ..config import GridConfig
from .models import Slot


def build_slot_grid(config: GridConfig) -> Tuple[Slot, ...]:
    """
    Build the ordered, gap-free sequence of slots for the working day.

    The grid is expressed in minutes of the canonical offset only, so it
    never depends on the host machine's local time.

    Example (defaults): 9am-6pm in 30-minute steps -> 18 slots,
    starting at 540, 570, ..., 1050.
    """
    return tuple(
        Slot(start=start, length=config.slot_minutes)
        for start in range(
            config.day_start_minutes,
            config.day_end_minutes,
            config.slot_minutes,
        )
    )
