"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .availability import AvailabilityService

__all__ = ["AvailabilityService"]
