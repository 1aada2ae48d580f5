"""Derived results: notifications, reorder suggestions, tasks, orchestration outcomes."""

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel

from resource_health.models.funding import BudgetPriority, FundingAllocation
from resource_health.models.inventory import InventoryItem

StockAlert = Literal["critical", "low_stock"]
ReorderPriority = Literal["urgent", "high", "medium", "low"]


class NotificationPayload(BaseModel):
    """One notification for one recipient, handed to the transport."""

    user_id: str
    type: str  # LOW_STOCK | CRITICAL_STOCK | LOW_BUDGET | BUDGET_EXHAUSTED
    title: str
    message: str
    priority: BudgetPriority
    related_entity_type: Optional[str] = None
    related_entity_id: Optional[str] = None
    action_url: Optional[str] = None


class EntityRef(BaseModel):
    """Id + display name of a device or project."""

    id: str
    name: str


class ChargeSplit(BaseModel):
    """Share of a reorder cost charged to one project."""

    account_id: str
    account_name: str
    project_id: str
    project_name: str
    percentage: int
    amount: float


class ReorderSuggestion(BaseModel):
    """Inventory item projected to run out within the reorder horizon."""

    inventory_item_id: str
    item_name: str
    cat_num: Optional[str] = None
    current_qty: float
    min_qty: float
    total_burn_rate: float
    weeks_till_empty: float
    suggested_order_qty: int
    priority: ReorderPriority
    affected_equipment: list[EntityRef] = []
    affected_projects: list[EntityRef] = []
    estimated_cost: float
    charge_to_accounts: list[ChargeSplit] = []


class EquipmentTask(BaseModel):
    """Day-to-day board task generated from equipment state."""

    id: str
    title: str
    description: str
    status: str = "todo"
    importance: Literal["critical", "high", "medium"]
    assignee_id: str
    due_date: datetime
    task_type: Literal["maintenance", "reorder"]
    equipment_id: Optional[str] = None
    inventory_item_id: Optional[str] = None
    metadata: dict[str, Any] = {}


class SupplyValidation(BaseModel):
    """Result of validating a device's supply links and settings."""

    valid: bool
    errors: list[str] = []


class StockCheckResult(BaseModel):
    """Outcome of recording a stock check."""

    item: InventoryItem
    weeks_remaining: float
    alert: Optional[StockAlert] = None
    recipients: int = 0
    dispatched: int = 0


class BudgetCheckResult(BaseModel):
    """Outcome of checking an allocation's balance."""

    allocation: FundingAllocation
    percent_remaining: float
    priority: BudgetPriority
    notification_type: Optional[str] = None
    throttled: bool = False
    dispatched: bool = False
    warning_recorded: bool = False
