"""Consumable runway scoring and stock-level arithmetic."""

import math

from resource_health.config import (
    REORDER_BUFFER_WEEKS,
    SUPPLY_COMFORTABLE_WEEKS,
    SUPPLY_CRITICAL_WEEKS,
)
from resource_health.health.numeric import clamp_percent, is_positive, round_half_up
from resource_health.models.inventory import InventoryLevel

# Runway reported when nothing is being consumed. A display/arithmetic
# convenience that keeps downstream maths finite, not a real upper bound.
EFFECTIVELY_INFINITE_WEEKS = 99


def calculate_weeks_remaining(current_qty: float, burn_per_week: float) -> float:
    """Weeks until the stock runs out at the current burn rate (unrounded).

    Returns EFFECTIVELY_INFINITE_WEEKS when burn_per_week <= 0 and 0 when the
    shelf is already empty.
    """
    if not is_positive(burn_per_week):
        return EFFECTIVELY_INFINITE_WEEKS
    if not is_positive(current_qty):
        return 0
    return current_qty / burn_per_week


def weeks_to_health_percentage(
    weeks: float,
    *,
    critical_weeks: float = SUPPLY_CRITICAL_WEEKS,
    comfortable_weeks: float = SUPPLY_COMFORTABLE_WEEKS,
) -> int:
    """Map runway weeks onto 0-100: 0 at/below critical_weeks, 100 at/above comfortable_weeks."""
    if math.isnan(weeks) or weeks >= comfortable_weeks:
        return 100
    if weeks <= critical_weeks:
        return 0
    span = comfortable_weeks - critical_weeks
    return clamp_percent(round_half_up(100 * (weeks - critical_weeks) / span))


def supply_health_percent(current_qty: float, burn_per_week: float, **scale: float) -> int:
    """Health percent of a single consumable from quantity and burn rate."""
    return weeks_to_health_percentage(calculate_weeks_remaining(current_qty, burn_per_week), **scale)


def calculate_stock_percentage(current_qty: float, min_qty: float) -> float:
    """Fill level for a progress bar, relative to twice the minimum, clamped to [0, 100]."""
    if min_qty <= 0:
        return 100 if current_qty > 0 else 0
    percentage = current_qty / (min_qty * 2) * 100
    return max(0, min(100, percentage))


def calculate_needed_quantity(current_qty: float, min_qty: float) -> float:
    """Units needed to get back up to the minimum (0 when already there)."""
    return max(0, min_qty - current_qty)


def calculate_suggested_order_qty(
    current_qty: float,
    min_qty: float,
    burn_per_week: float,
    *,
    buffer_weeks: float = REORDER_BUFFER_WEEKS,
) -> int:
    """Order enough to reach the minimum plus buffer_weeks of consumption."""
    target_qty = min_qty + burn_per_week * buffer_weeks
    return max(0, math.ceil(target_qty - current_qty))


def classify_inventory_level(quantity: float, min_quantity: float | None) -> InventoryLevel:
    """empty (<= 0), low (<= min), medium (<= 2 * min), else full."""
    minimum = min_quantity or 0
    if quantity <= 0:
        return "empty"
    if quantity <= minimum:
        return "low"
    if quantity <= minimum * 2:
        return "medium"
    return "full"
