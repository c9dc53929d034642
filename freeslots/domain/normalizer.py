"""
Mapping of externally supplied busy intervals onto the slot grid.

All wall-clock arithmetic happens in the canonical fixed offset passed in by
the caller. The host machine's local timezone is never consulted.
"""

from typing import Dict, FrozenSet, Sequence

import pendulum
from pendulum import DateTime

from ..config import MatchRule
from .exceptions import TimestampError
from .models import MINUTES_PER_DAY, BusyInterval, Slot

SECONDS_PER_DAY = MINUTES_PER_DAY * 60


def parse_timestamp(value: object, offset_seconds: int) -> DateTime:
    """
    Parse an ISO 8601 timestamp into the canonical offset.

    Strings carrying their own offset (``Z``, ``-05:00``) keep their instant;
    strings without one are read as canonical-offset wall-clock time. Both a
    date and a time of day are required.

    Raises:
        TimestampError: If the value is not a string, cannot be parsed or
            lacks a date or a time part
    """
    if not isinstance(value, str) or not value.strip():
        raise TimestampError(f"Expected an ISO 8601 timestamp string, got {value!r}")

    tz = pendulum.fixed_timezone(offset_seconds)

    try:
        parsed = pendulum.parse(value.strip(), tz=tz, exact=True)
    except (ValueError, TypeError) as e:
        raise TimestampError(f"Could not parse timestamp {value!r}: {e}") from e

    if not isinstance(parsed, DateTime):
        raise TimestampError(f"Timestamp {value!r} does not describe a point in time")

    return parsed.in_timezone(tz)


def _seconds_of_day(dt: DateTime, offset_seconds: int) -> float:
    local = dt.in_timezone(pendulum.fixed_timezone(offset_seconds))
    return (
        local.hour * 3600
        + local.minute * 60
        + local.second
        + local.microsecond / 1_000_000
    )


def minutes_of_day(dt: DateTime, offset_seconds: int) -> int:
    """Return the wall-clock minutes since midnight in the canonical offset."""
    return int(_seconds_of_day(dt, offset_seconds) // 60) % MINUTES_PER_DAY


def match_busy_slots(
    interval: BusyInterval,
    grid: Sequence[Slot],
    offset_seconds: int,
    rule: MatchRule = MatchRule.OVERLAP,
) -> FrozenSet[Slot]:
    """
    Find the grid slots a busy interval touches.

    The interval is walked in slot-length steps from its start until its
    end, and each step's minute of day (modulo one day) is looked up in the
    grid. With ``MatchRule.OVERLAP`` the walk starts at the grid boundary at
    or before the interval start, so any overlap marks a slot; with
    ``MatchRule.SLOT_START`` it starts at the raw start and only steps
    landing exactly on a slot start count.

    Example (overlap, 30-minute grid from 9am):
    Busy: 09:10-09:50
    Result: {09:00, 09:30}
    """
    if not grid:
        return frozenset()

    total_seconds = (interval.end - interval.start).total_seconds()
    if total_seconds <= 0:
        return frozenset()

    if rule is MatchRule.OVERLAP and total_seconds >= SECONDS_PER_DAY:
        return frozenset(grid)

    slots_by_start: Dict[int, Slot] = {slot.start: slot for slot in grid}
    step_seconds = grid[0].length * 60
    anchor_seconds = grid[0].start * 60

    start_seconds = _seconds_of_day(interval.start, offset_seconds)
    end_seconds = start_seconds + total_seconds

    cursor = start_seconds
    if rule is MatchRule.OVERLAP:
        cursor -= (start_seconds - anchor_seconds) % step_seconds

    matched = set()
    while cursor < end_seconds:
        minute = int(cursor // 60) % MINUTES_PER_DAY
        slot = slots_by_start.get(minute)
        if slot is not None:
            matched.add(slot)
        cursor += step_seconds

    return frozenset(matched)
