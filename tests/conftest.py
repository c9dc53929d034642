"""
Shared fixtures for the freeslots test suite.
"""

import pytest

from freeslots.config import GridConfig

ALL_SLOTS = [
    "9am to 9:30am",
    "9:30am to 10am",
    "10am to 10:30am",
    "10:30am to 11am",
    "11am to 11:30am",
    "11:30am to 12pm",
    "12pm to 12:30pm",
    "12:30pm to 1pm",
    "1pm to 1:30pm",
    "1:30pm to 2pm",
    "2pm to 2:30pm",
    "2:30pm to 3pm",
    "3pm to 3:30pm",
    "3:30pm to 4pm",
    "4pm to 4:30pm",
    "4:30pm to 5pm",
    "5pm to 5:30pm",
    "5:30pm to 6pm",
]


def sentence(slots):
    """Expected availability sentence for a list of rendered slots."""
    if not slots:
        return "There are no available time slots."
    if len(slots) == 1:
        joined = slots[0]
    else:
        joined = ", ".join(slots[:-1]) + " and " + slots[-1]
    return f"These are the available time slots {joined}."


@pytest.fixture
def config() -> GridConfig:
    """Default grid: 9am-6pm, 30-minute slots, UTC-4."""
    return GridConfig()
