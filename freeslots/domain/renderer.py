"""
Rendering of free slots as a single English sentence.
"""

from typing import Sequence

from .models import MINUTES_PER_DAY, Slot

NO_SLOTS_MESSAGE = "There are no available time slots."
SLOTS_PREFIX = "These are the available time slots "


def format_time(minutes: int) -> str:
    """
    Format minutes since midnight on a 12-hour clock.

    Examples: 540 -> "9am", 810 -> "1:30pm", 720 -> "12pm", 0 -> "12am".
    """
    minutes %= MINUTES_PER_DAY
    hour, minute = divmod(minutes, 60)
    suffix = "am" if hour < 12 else "pm"
    hour = hour % 12 or 12

    if minute == 0:
        return f"{hour}{suffix}"
    return f"{hour}:{minute:02d}{suffix}"


def format_slot(slot: Slot) -> str:
    """Format a slot as "9am to 9:30am"."""
    return f"{format_time(slot.start)} to {format_time(slot.end)}"


def join_with_and(items: Sequence[str]) -> str:
    """
    Join items as an English list.

    Items are comma separated, with "and" before the last one and no
    comma in front of it: "a", "a and b", "a, b and c".
    """
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    return f"{', '.join(items[:-1])} and {items[-1]}"


def render_message(slots: Sequence[Slot]) -> str:
    """Render the free slots as the final availability sentence."""
    if not slots:
        return NO_SLOTS_MESSAGE
    return f"{SLOTS_PREFIX}{join_with_and([format_slot(slot) for slot in slots])}."
