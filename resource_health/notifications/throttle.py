"""Cooldown gate for repeated notifications.

The "last warned" timestamp lives on the record in the external store, so the
gate is a pure function of that value. It never records a send; callers write
the new timestamp after a successful dispatch.
"""

from datetime import datetime

from resource_health.config import LOW_BUDGET_THROTTLE_HOURS
from resource_health.health.numeric import parse_timestamp, utc_now
from resource_health.utils.logger import get_logger

logger = get_logger("resource_health.notifications.throttle")

_SECONDS_PER_HOUR = 60 * 60


def hours_since(last_warned_at: str | datetime, *, now: datetime | None = None) -> float | None:
    """Elapsed hours since last_warned_at, or None when it cannot be parsed."""
    last = parse_timestamp(last_warned_at)
    if last is None:
        return None
    current = parse_timestamp(now) if now is not None else utc_now()
    return (current - last).total_seconds() / _SECONDS_PER_HOUR


def should_notify(
    last_warned_at: str | datetime | None,
    threshold_hours: float = LOW_BUDGET_THROTTLE_HOURS,
    *,
    now: datetime | None = None,
) -> bool:
    """True when no warning was sent yet or at least threshold_hours have passed (inclusive)."""
    if not last_warned_at:
        return True
    elapsed = hours_since(last_warned_at, now=now)
    if elapsed is None:
        logger.warning("throttle.unparsable_timestamp", last_warned_at=str(last_warned_at))
        return True
    return elapsed >= threshold_hours
