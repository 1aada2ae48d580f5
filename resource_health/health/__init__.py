"""Pure scoring functions: maintenance, supply runway, enrichment, funding risk, reorders."""

from resource_health.health.enrichment import (
    aggregate_supplies_health,
    calculate_total_burn_rate,
    device_inventory_items,
    device_supplies_health,
    devices_using_item,
    enrich_device_supplies,
    enrich_supply,
    update_inventory_quantity,
    validate_device_supplies,
)
from resource_health.health.funding import (
    budget_priority,
    calculate_available_balance,
    percent_remaining,
    remaining_budget,
)
from resource_health.health.maintenance import (
    calculate_maintenance_health,
    health_class,
    maintenance_due_date,
    record_maintenance_completion,
)
from resource_health.health.reorder import calculate_reorder_suggestions, reorder_priority
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
from resource_health.health.tasks import generate_equipment_tasks

__all__ = [
    "EFFECTIVELY_INFINITE_WEEKS",
    "calculate_maintenance_health",
    "health_class",
    "maintenance_due_date",
    "record_maintenance_completion",
    "calculate_weeks_remaining",
    "weeks_to_health_percentage",
    "supply_health_percent",
    "calculate_stock_percentage",
    "calculate_needed_quantity",
    "calculate_suggested_order_qty",
    "classify_inventory_level",
    "enrich_supply",
    "enrich_device_supplies",
    "aggregate_supplies_health",
    "device_supplies_health",
    "update_inventory_quantity",
    "device_inventory_items",
    "devices_using_item",
    "calculate_total_burn_rate",
    "validate_device_supplies",
    "budget_priority",
    "percent_remaining",
    "remaining_budget",
    "calculate_available_balance",
    "calculate_reorder_suggestions",
    "reorder_priority",
    "generate_equipment_tasks",
]
