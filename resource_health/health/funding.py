"""Funding allocation risk classification."""

from resource_health.config import (
    BUDGET_HIGH_PRIORITY_BELOW_PERCENT,
    BUDGET_MEDIUM_PRIORITY_BELOW_PERCENT,
)
from resource_health.models.funding import BudgetPriority, FundingAllocation


def budget_priority(
    percent_remaining: float,
    *,
    high_below: float = BUDGET_HIGH_PRIORITY_BELOW_PERCENT,
    medium_below: float = BUDGET_MEDIUM_PRIORITY_BELOW_PERCENT,
) -> BudgetPriority:
    """Priority tier for a budget: < 10% high, 10-25% medium, >= 25% low.

    Lower bounds are inclusive: exactly 10 is medium and exactly 25 is low.
    """
    if percent_remaining < high_below:
        return "high"
    if percent_remaining < medium_below:
        return "medium"
    return "low"


def percent_remaining(allocation: FundingAllocation) -> float:
    """Remaining budget as a percentage of the allocated amount.

    A missing or zero allocated amount is treated as 1 so the result stays finite.
    """
    allocated = allocation.allocated_amount or 1
    return remaining_budget(allocation) / allocated * 100


def remaining_budget(allocation: FundingAllocation) -> float:
    """Stored remaining budget, or allocated - spent - committed when it was never written."""
    if allocation.remaining_budget is not None:
        return allocation.remaining_budget
    return calculate_available_balance(
        allocation.allocated_amount, allocation.current_spent, allocation.current_committed
    )


def calculate_available_balance(total: float | None, spent: float | None, committed: float | None) -> float:
    """Budget left once spent and committed amounts are taken out."""
    return (total or 0) - (spent or 0) - (committed or 0)
