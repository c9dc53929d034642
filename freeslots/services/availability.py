"""
Application service turning a free/busy payload into an availability sentence.

The service coordinates payload extraction via the adapter layer and
delegates the slot arithmetic to the domain-level ``AvailabilityCalculator``
and rendering to the message renderer. This keeps the invocation boundary
thin and every step testable on its own.
"""

from __future__ import annotations

import json
import logging
from typing import Any, List, Optional

from ..adapters.payload import extract_raw_busy, parse_busy_intervals
from ..config import DEFAULT_CONFIG, GridConfig
from ..domain.availability import AvailabilityCalculator
from ..domain.models import Slot
from ..domain.renderer import render_message

logger = logging.getLogger(__name__)


class AvailabilityService:
    """
    Orchestrates busy-interval extraction, slot resolution and rendering.

    Holds no state besides its configuration: every call rebuilds the grid.
    """

    def __init__(
        self,
        config: GridConfig = DEFAULT_CONFIG,
        calculator: Optional[AvailabilityCalculator] = None,
    ) -> None:
        self._config = config
        self._calculator = calculator or AvailabilityCalculator(config)

    @property
    def config(self) -> GridConfig:
        return self._config

    def extract(self, body: Any) -> List[Any]:
        """Extract the raw busy list from a request body."""
        return extract_raw_busy(body, calendar_id=self._config.calendar_id)

    def free_slots(self, raw_busy: List[Any]) -> List[Slot]:
        """Parse raw busy entries and resolve the free slots."""
        intervals = parse_busy_intervals(raw_busy, self._config.utc_offset_seconds)
        return self._calculator.free_slots(intervals)

    def render(self, raw_busy: List[Any]) -> str:
        """Render the availability sentence for raw busy entries."""
        return render_message(self.free_slots(raw_busy))

    def compute(self, body: Any) -> str:
        """
        Extract, resolve and render in one go.

        Errors from any step propagate to the caller.
        """
        raw_busy = self.extract(body)
        logger.info("Raw busy slots: %s", json.dumps(raw_busy, default=str))
        return self.render(raw_busy)
