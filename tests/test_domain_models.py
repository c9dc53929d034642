"""
Tests for domain models.
"""

import pendulum

from freeslots.domain.models import BusyInterval, Slot


class TestSlot:
    """Tests for Slot model."""

    def test_end_is_start_plus_length(self):
        """Test the derived end of a slot."""
        slot = Slot(start=540, length=30)

        assert slot.end == 570

    def test_overlaps(self):
        """Test overlap detection against minute ranges."""
        slot = Slot(start=540, length=30)

        assert slot.overlaps(550, 590)
        assert slot.overlaps(500, 541)
        assert not slot.overlaps(570, 600)
        assert not slot.overlaps(500, 540)

    def test_slots_are_hashable_values(self):
        """Equal slots collapse in sets."""
        assert {Slot(540), Slot(540), Slot(570)} == {Slot(540), Slot(570)}


class TestBusyInterval:
    """Tests for BusyInterval model."""

    def test_duration_minutes(self):
        """Test the duration of a busy interval."""
        interval = BusyInterval(
            start=pendulum.parse("2025-01-01T14:00:00Z"),
            end=pendulum.parse("2025-01-01T15:30:00Z"),
        )

        assert interval.duration_minutes() == 90

    def test_inverted_interval_is_allowed(self):
        """Inverted intervals are kept and simply have a negative duration."""
        interval = BusyInterval(
            start=pendulum.parse("2025-01-01T15:00:00Z"),
            end=pendulum.parse("2025-01-01T14:00:00Z"),
        )

        assert interval.duration_minutes() == -60
