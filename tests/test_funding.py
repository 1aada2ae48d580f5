"""Tests for funding risk classification and balance arithmetic."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from resource_health.health.funding import (
    budget_priority,
    calculate_available_balance,
    percent_remaining,
    remaining_budget,
)
from resource_health.models.funding import FundingAllocation


@pytest.mark.parametrize(
    "percent,expected",
    [
        (0, "high"),
        (9.9, "high"),
        (10, "medium"),
        (10.1, "medium"),
        (24.9, "medium"),
        (25, "low"),
        (25.1, "low"),
        (50, "low"),
        (100, "low"),
        (-5, "high"),
    ],
)
def test_priority_boundaries(percent, expected):
    """Below 10 is high and below 25 medium."""
    assert budget_priority(percent) == expected


def test_priority_is_monotonic():
    """Less budget never lowers the risk tier."""
    rank = {"high": 2, "medium": 1, "low": 0}
    risks = [rank[budget_priority(p / 10)] for p in range(0, 1001)]
    assert all(a >= b for a, b in zip(risks, risks[1:]))


def test_priority_custom_bounds():
    """Tier bounds can be moved."""
    assert budget_priority(15, high_below=20, medium_below=40) == "high"
    assert budget_priority(30, high_below=20, medium_below=40) == "medium"


def test_percent_remaining_uses_stored_remaining():
    """A stored remaining_budget wins over spend tracking."""
    allocation = FundingAllocation(id="a1", allocated_amount=1000, remaining_budget=80)
    assert percent_remaining(allocation) == pytest.approx(8)
    assert budget_priority(percent_remaining(allocation)) == "high"


def test_remaining_falls_back_to_spend_tracking():
    """Without remaining_budget, spent and committed are subtracted."""
    allocation = FundingAllocation(id="a1", allocated_amount=1000, current_spent=600, current_committed=150)
    assert remaining_budget(allocation) == 250
    assert percent_remaining(allocation) == 25


def test_zero_allocated_amount_stays_finite():
    """Zero or missing allocation never divides by zero."""
    allocation = FundingAllocation(id="a1", allocated_amount=0, remaining_budget=0)
    assert percent_remaining(allocation) == 0
    allocation = FundingAllocation(id="a2", allocated_amount=None, remaining_budget=5)
    assert percent_remaining(allocation) == 500


def test_available_balance():
    """Missing amounts count as zero."""
    assert calculate_available_balance(100, 30, 20) == 50
    assert calculate_available_balance(None, None, None) == 0
    assert calculate_available_balance(100, 90, 20) == -10
