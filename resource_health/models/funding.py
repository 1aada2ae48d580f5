"""Funding allocations (personal or project budget slices of a funding account)."""

from typing import Literal, Optional

from resource_health.models.base import DocumentModel

BudgetPriority = Literal["high", "medium", "low"]


class FundingAllocation(DocumentModel):
    """Budget allocated to a person or project, with spend tracking."""

    id: str
    funding_account_id: Optional[str] = None
    funding_account_name: Optional[str] = None
    allocated_amount: Optional[float] = None
    remaining_budget: Optional[float] = None
    current_spent: float = 0
    current_committed: float = 0
    currency: Optional[str] = None
    status: Literal["active", "exhausted", "suspended", "archived"] = "active"
    low_balance_warning_threshold: Optional[float] = None  # percent; falls back to config
    last_low_balance_warning_at: Optional[str] = None  # ISO timestamp; None = never warned
