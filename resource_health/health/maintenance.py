"""Maintenance freshness scoring for equipment devices.

Health decays linearly from 100 (maintained today) to 0 (maintained one full
interval ago) and stays at 0 while overdue. Bad data fails open: a missing or
unparsable date, or a non-positive interval, scores 100 rather than raising an
alarm.
"""

from datetime import date, timedelta
from typing import Literal

from resource_health.config import HEALTH_CRITICAL_PERCENT, HEALTH_WARNING_PERCENT
from resource_health.health.numeric import (
    clamp_percent,
    is_positive,
    parse_date_safe,
    round_half_up,
    to_iso_date_string,
    utc_today,
)
from resource_health.models.equipment import EquipmentDevice

HealthClass = Literal["critical", "warning", "healthy"]


def calculate_maintenance_health(
    last_maintained: str | date | None,
    maintenance_days: float,
    *,
    today: date | None = None,
) -> int:
    """Return maintenance health as an integer percent in [0, 100].

    Args:
        last_maintained: ISO date (or datetime) of the last maintenance.
        maintenance_days: Interval between maintenances, in days.
        today: Reference date; defaults to the current UTC date.
    """
    if not is_positive(maintenance_days):
        return 100
    last = parse_date_safe(last_maintained)
    if last is None:
        return 100

    days_since = ((today or utc_today()) - last).days
    return clamp_percent(round_half_up(100 * (1 - days_since / maintenance_days)))


def health_class(
    percent: float,
    *,
    critical_at: float = HEALTH_CRITICAL_PERCENT,
    warning_at: float = HEALTH_WARNING_PERCENT,
) -> HealthClass:
    """Bucket a health percent: <= critical_at critical, <= warning_at warning, else healthy."""
    if percent <= critical_at:
        return "critical"
    if percent <= warning_at:
        return "warning"
    return "healthy"


def maintenance_due_date(device: EquipmentDevice) -> date | None:
    """Date the next maintenance falls due, or None when the schedule is unknown."""
    last = parse_date_safe(device.last_maintained)
    if last is None or not is_positive(device.maintenance_days):
        return None
    return last + timedelta(days=device.maintenance_days)


def record_maintenance_completion(device: EquipmentDevice, *, today: date | None = None) -> EquipmentDevice:
    """Return a copy of the device marked as maintained today."""
    return device.model_copy(update={"last_maintained": to_iso_date_string(today or utc_today())})
