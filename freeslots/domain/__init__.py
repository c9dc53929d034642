"""
Domain layer - Pure availability logic without external dependencies.
"""

from .availability import AvailabilityCalculator, resolve_free_slots
from .models import BusyInterval, Slot
from .normalizer import match_busy_slots, minutes_of_day, parse_timestamp
from .renderer import format_slot, format_time, render_message
from .slot_grid import build_slot_grid

__all__ = [
    "AvailabilityCalculator",
    "BusyInterval",
    "Slot",
    "build_slot_grid",
    "format_slot",
    "format_time",
    "match_busy_slots",
    "minutes_of_day",
    "parse_timestamp",
    "render_message",
    "resolve_free_slots",
]
