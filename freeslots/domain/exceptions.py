"""
Domain-specific exception hierarchy for the freeslots application.
"""


class FreeSlotsError(Exception):
    """Base class for all application-level errors."""


class PayloadError(FreeSlotsError):
    """Raised when the busy-interval payload cannot be parsed."""


class TimestampError(PayloadError):
    """Raised when a busy interval carries an unparsable timestamp."""
