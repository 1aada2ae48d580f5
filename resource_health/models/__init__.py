"""Pydantic models for lab resource health."""

from resource_health.models.equipment import EnrichedSupply, EquipmentDevice, EquipmentSupply
from resource_health.models.funding import BudgetPriority, FundingAllocation
from resource_health.models.inventory import InventoryItem, InventoryLevel
from resource_health.models.outputs import (
    BudgetCheckResult,
    ChargeSplit,
    EntityRef,
    EquipmentTask,
    NotificationPayload,
    ReorderPriority,
    ReorderSuggestion,
    StockAlert,
    StockCheckResult,
    SupplyValidation,
)
from resource_health.models.people import MasterProject, PersonProfile

__all__ = [
    "InventoryItem",
    "InventoryLevel",
    "EquipmentSupply",
    "EnrichedSupply",
    "EquipmentDevice",
    "FundingAllocation",
    "BudgetPriority",
    "PersonProfile",
    "MasterProject",
    "NotificationPayload",
    "EntityRef",
    "ChargeSplit",
    "ReorderSuggestion",
    "ReorderPriority",
    "EquipmentTask",
    "SupplyValidation",
    "StockAlert",
    "StockCheckResult",
    "BudgetCheckResult",
]
