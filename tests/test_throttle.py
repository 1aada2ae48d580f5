"""Tests for the notification cooldown gate."""

import sys
import unittest
from datetime import datetime, timedelta, timezone
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from resource_health.health.funding import budget_priority, percent_remaining
from resource_health.models.funding import FundingAllocation
from resource_health.notifications.throttle import hours_since, should_notify

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


def _iso(dt: datetime) -> str:
    return dt.isoformat().replace("+00:00", "Z")


def _hours_ago(hours: float) -> str:
    return _iso(NOW - timedelta(hours=hours))


class TestShouldNotify(unittest.TestCase):
    """Tests for should_notify and hours_since."""

    def test_never_warned(self):
        """No previous warning always allows a send."""
        self.assertTrue(should_notify(None, now=NOW))
        self.assertTrue(should_notify("", now=NOW))
        self.assertTrue(should_notify(None, 0, now=NOW))
        self.assertTrue(should_notify(None, 10_000, now=NOW))

    def test_inside_window(self):
        """A warning inside the window blocks the send."""
        self.assertFalse(should_notify(_hours_ago(1), 24, now=NOW))
        self.assertFalse(should_notify(_hours_ago(23.99), 24, now=NOW))

    def test_window_boundary_is_inclusive(self):
        """Exactly threshold_hours later is allowed."""
        self.assertTrue(should_notify(_hours_ago(24), 24, now=NOW))

    def test_outside_window(self):
        """Older warnings allow a send."""
        self.assertTrue(should_notify(_hours_ago(48), 24, now=NOW))
        self.assertTrue(should_notify(_hours_ago(30), 24, now=NOW))

    def test_custom_threshold(self):
        """A longer window keeps blocking past 24 hours."""
        self.assertFalse(should_notify(_hours_ago(30), 48, now=NOW))

    def test_default_threshold_is_24_hours(self):
        """Default window is 24 hours."""
        self.assertFalse(should_notify(_hours_ago(5), now=NOW))
        self.assertTrue(should_notify(_hours_ago(25), now=NOW))

    def test_unparsable_timestamp_counts_as_never_warned(self):
        """Garbage timestamps allow a send."""
        self.assertTrue(should_notify("not a timestamp", 24, now=NOW))

    def test_out_of_range_timestamp_counts_as_never_warned(self):
        """Timestamps that overflow on UTC conversion allow a send instead of raising."""
        self.assertTrue(should_notify("0001-01-01T00:00:00+05:00", 24, now=NOW))
        self.assertTrue(should_notify("9999-12-31T23:00:00-05:00", 24, now=NOW))
        self.assertIsNone(hours_since("0001-01-01T00:00:00+05:00", now=NOW))

    def test_offset_and_naive_timestamps(self):
        """Offsets convert to UTC and naive values are read as UTC."""
        self.assertFalse(should_notify("2024-06-15T13:00:00+02:00", 24, now=NOW))
        self.assertFalse(should_notify(datetime(2024, 6, 15, 11, 0), 24, now=NOW))
        self.assertEqual(hours_since("2024-06-15T10:00:00Z", now=NOW), 2)
        self.assertIsNone(hours_since("garbage", now=NOW))


def test_severe_budget_is_still_throttled():
    """High priority does not bypass the cooldown."""
    fresh = FundingAllocation(id="a1", allocated_amount=1000, remaining_budget=80)
    assert should_notify(fresh.last_low_balance_warning_at, 24, now=NOW) is True
    assert budget_priority(percent_remaining(fresh)) == "high"

    warned = fresh.model_copy(update={"last_low_balance_warning_at": _hours_ago(5)})
    assert budget_priority(percent_remaining(warned)) == "high"
    assert should_notify(warned.last_low_balance_warning_at, 24, now=NOW) is False
