"""Shared numeric and date helpers for the scorers."""

import math
from datetime import date, datetime, timezone


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives (66.5 -> 67)."""
    return int(math.floor(value + 0.5))


def clamp_percent(value: float) -> int:
    """Clamp an integer-ish percentage to [0, 100]."""
    return int(max(0, min(100, value)))


def is_positive(value: float | None) -> bool:
    """True for finite numbers > 0. None and NaN are not positive."""
    return value is not None and math.isfinite(value) and value > 0


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def utc_now_iso() -> str:
    """Current UTC time as ISO 8601 with a trailing Z."""
    return utc_now().isoformat().replace("+00:00", "Z")


def parse_date_safe(value: str | date | None) -> date | None:
    """Parse an ISO date or datetime into a UTC calendar date. Returns None when unparsable."""
    if value is None:
        return None
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    dt = parse_timestamp(value)
    return dt.date() if dt is not None else None


def parse_timestamp(value: str | datetime | None) -> datetime | None:
    """Parse an ISO timestamp (Z or offset suffix) into an aware UTC datetime. Naive values are UTC."""
    if value is None:
        return None
    try:
        if isinstance(value, datetime):
            return _as_utc(value)
        s = str(value).strip()
        if not s:
            return None
        return _as_utc(datetime.fromisoformat(s.replace("Z", "+00:00")))
    except (ValueError, OverflowError):
        # Offsets that push the instant outside datetime's range
        return None


def _as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_iso_date_string(value: date) -> str:
    """Format a date as YYYY-MM-DD."""
    if isinstance(value, datetime):
        value = _as_utc(value).date()
    return value.isoformat()
