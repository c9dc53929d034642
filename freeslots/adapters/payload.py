"""
Tolerant extraction of busy intervals from the upstream free/busy payload.

The upstream integration has delivered the free/busy response in a few
shapes over time. The tolerated shapes form a closed set:

1. ``{"calendars": {"<key>": {"busy": [{"start": ..., "end": ...}]}}}``
2. ``[{"body": <shape 1, as a mapping or a JSON string>}]``
3. An absent or empty body, or a missing ``calendars`` / calendar key /
   ``busy`` list, which all mean "no busy intervals".

Anything else is a malformed payload and raises ``PayloadError``.
"""

import json
from typing import Any, Dict, List, Optional

from ..domain.exceptions import PayloadError
from ..domain.models import BusyInterval
from ..domain.normalizer import parse_timestamp


def decode_body(body: Any) -> Any:
    """
    Decode the raw request body.

    Returns None for an absent or blank body.
    """
    if body is None:
        return None

    if isinstance(body, (bytes, bytearray)):
        body = body.decode("utf-8")

    if isinstance(body, str):
        if not body.strip():
            return None
        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise PayloadError(f"Request body is not valid JSON: {e}") from e

    # Already-decoded payloads (e.g. from a test client) pass through
    return body


def _unwrap_envelope(payload: Any) -> Optional[Dict[str, Any]]:
    """Reduce the tolerated shapes to the free/busy mapping (or None)."""
    if payload is None:
        return None

    if isinstance(payload, list):
        if len(payload) != 1 or not isinstance(payload[0], dict):
            raise PayloadError(
                "Array payloads must wrap exactly one object with a 'body' field"
            )
        inner = decode_body(payload[0].get("body"))
        if isinstance(inner, list):
            raise PayloadError("Array payloads cannot be nested inside 'body'")
        return _unwrap_envelope(inner)

    if not isinstance(payload, dict):
        raise PayloadError(f"Unexpected payload type: {type(payload).__name__}")

    return payload


def extract_raw_busy(body: Any, calendar_id: Optional[str] = None) -> List[Any]:
    """
    Extract the raw busy list for one calendar.

    Args:
        body: Raw request body (JSON string, bytes, decoded payload or None)
        calendar_id: Calendar key to read; the first calendar when None

    Returns:
        The raw busy entries, empty when any level of the path is absent

    Raises:
        PayloadError: If the body is present but malformed
    """
    payload = _unwrap_envelope(decode_body(body))
    if payload is None:
        return []

    calendars = payload.get("calendars")
    if calendars is None:
        return []
    if not isinstance(calendars, dict):
        raise PayloadError("'calendars' must be an object keyed by calendar id")

    if calendar_id is not None:
        calendar = calendars.get(calendar_id)
    else:
        calendar = next(iter(calendars.values()), None)

    if calendar is None:
        return []
    if not isinstance(calendar, dict):
        raise PayloadError("Calendar entries must be objects")

    busy = calendar.get("busy")
    if busy is None:
        return []
    if not isinstance(busy, list):
        raise PayloadError("'busy' must be a list of intervals")

    return busy


def parse_busy_intervals(raw_busy: List[Any], offset_seconds: int) -> List[BusyInterval]:
    """
    Convert raw busy entries to busy intervals in the canonical offset.

    Raises:
        PayloadError: If an entry is not an object with 'start' and 'end'
        TimestampError: If a timestamp cannot be parsed
    """
    intervals: List[BusyInterval] = []

    for item in raw_busy:
        if not isinstance(item, dict):
            raise PayloadError(f"Busy entries must be objects, got {item!r}")

        try:
            start = item["start"]
            end = item["end"]
        except KeyError as e:
            raise PayloadError(f"Busy entry is missing {e}: {item!r}") from e

        intervals.append(
            BusyInterval(
                start=parse_timestamp(start, offset_seconds),
                end=parse_timestamp(end, offset_seconds),
            )
        )

    return intervals
