"""
Serverless invocation boundary.

Receives an event with an optional ``body`` and returns
``{"statusCode", "headers", "body"}``. Success is a plain-text availability
sentence; any failure is a generic 500 whose cause is only logged.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from .config import DEFAULT_CONFIG, GridConfig
from .services.availability import AvailabilityService

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "An error occurred while processing the request."
TEXT_HEADERS = {"Content-Type": "text/plain"}


def build_response(status_code: int, body: str) -> Dict[str, Any]:
    """Build the response envelope expected by the hosting platform."""
    return {
        "statusCode": status_code,
        "headers": dict(TEXT_HEADERS),
        "body": body,
    }


def handle_event(
    event: Optional[Mapping[str, Any]],
    config: GridConfig = DEFAULT_CONFIG,
) -> Dict[str, Any]:
    """Compute the availability response for one event."""
    service = AvailabilityService(config)
    body = None

    try:
        body = (event or {}).get("body")
        message = service.compute(body)
    except Exception:
        # compute() logs the raw busy slots once extracted
        logger.exception("Failed to compute availability (body: %r)", body)
        return build_response(500, ERROR_MESSAGE)

    return build_response(200, message)


async def handler(
    event: Optional[Mapping[str, Any]],
    context: Any = None,
    config: GridConfig = DEFAULT_CONFIG,
) -> Dict[str, Any]:
    """
    Entry point for the hosting platform.

    Args:
        event: Invocation event; only its ``body`` is read
        context: Platform context (unused)
        config: Grid configuration, injectable for tests

    Returns:
        Response envelope with status 200 or 500
    """
    return handle_event(event, config=config)
