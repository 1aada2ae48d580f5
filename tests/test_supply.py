"""Tests for supply runway and stock-level arithmetic."""

import math
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from resource_health.health.supply import (
    EFFECTIVELY_INFINITE_WEEKS,
    calculate_needed_quantity,
    calculate_stock_percentage,
    calculate_suggested_order_qty,
    calculate_weeks_remaining,
    classify_inventory_level,
    supply_health_percent,
    weeks_to_health_percentage,
)


@pytest.mark.parametrize("qty", [0, 1, 17, 1000])
def test_zero_burn_is_effectively_infinite(qty):
    """Zero burn gives the 99-week sentinel."""
    assert calculate_weeks_remaining(qty, 0) == EFFECTIVELY_INFINITE_WEEKS == 99


def test_runway_basics():
    """Runway is quantity over burn."""
    assert calculate_weeks_remaining(0, 5) == 0
    assert calculate_weeks_remaining(17, 5) == pytest.approx(3.4)
    assert calculate_weeks_remaining(15, 10) == 1.5
    assert calculate_weeks_remaining(100, 5) == 20
    assert calculate_weeks_remaining(10, -1) == EFFECTIVELY_INFINITE_WEEKS


def test_weeks_to_health_scale():
    """Four weeks of runway or more is 100."""
    assert weeks_to_health_percentage(0) == 0
    assert weeks_to_health_percentage(-1) == 0
    assert weeks_to_health_percentage(1) == 25
    assert weeks_to_health_percentage(2) == 50
    assert weeks_to_health_percentage(3.4) == 85
    assert weeks_to_health_percentage(4) == 100
    assert weeks_to_health_percentage(EFFECTIVELY_INFINITE_WEEKS) == 100
    assert weeks_to_health_percentage(math.nan) == 100


def test_weeks_to_health_is_monotonic():
    """More runway never lowers health."""
    values = [weeks_to_health_percentage(w / 10) for w in range(0, 60)]
    assert values == sorted(values)


def test_weeks_to_health_custom_thresholds():
    """The scale bounds can be moved."""
    assert weeks_to_health_percentage(1, critical_weeks=1, comfortable_weeks=3) == 0
    assert weeks_to_health_percentage(2, critical_weeks=1, comfortable_weeks=3) == 50
    assert weeks_to_health_percentage(3, critical_weeks=1, comfortable_weeks=3) == 100


def test_supply_health_percent():
    """Supply health comes straight from runway."""
    assert supply_health_percent(0, 5) == 0
    assert supply_health_percent(10, 0) == 100
    assert supply_health_percent(10, 5) == 50


def test_stock_percentage_and_needed_quantity():
    """Stock percent caps at 100 and shortfall floors at 0."""
    assert calculate_stock_percentage(10, 10) == 50
    assert calculate_stock_percentage(50, 10) == 100
    assert calculate_stock_percentage(5, 0) == 100
    assert calculate_stock_percentage(0, 0) == 0
    assert calculate_needed_quantity(3, 10) == 7
    assert calculate_needed_quantity(30, 10) == 0


def test_suggested_order_qty():
    """Order quantity tops up to minimum plus buffer weeks."""
    # min 10 + 2 weeks * 5/week = 20 target, 4 on hand -> 16
    assert calculate_suggested_order_qty(4, 10, 5) == 16
    assert calculate_suggested_order_qty(100, 10, 5) == 0
    assert calculate_suggested_order_qty(0, 1, 0.3, buffer_weeks=1) == 2


@pytest.mark.parametrize(
    "qty,minimum,level",
    [
        (0, 10, "empty"),
        (-2, 10, "empty"),
        (1, 10, "low"),
        (10, 10, "low"),
        (11, 10, "medium"),
        (20, 10, "medium"),
        (21, 10, "full"),
        (5, None, "full"),
    ],
)
def test_classify_inventory_level(qty, minimum, level):
    """Quantity against minimum picks the inventory level."""
    assert classify_inventory_level(qty, minimum) == level
