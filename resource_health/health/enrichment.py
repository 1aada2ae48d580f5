"""Join device supply requirements with master inventory and roll up device health.

InventoryItem is the single source of truth for quantities and prices;
EquipmentSupply only carries device-specific settings (min_qty, burn_per_week).
"""

from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Optional

from resource_health.health.supply import (
    calculate_weeks_remaining,
    classify_inventory_level,
    weeks_to_health_percentage,
)
from resource_health.models.equipment import EnrichedSupply, EquipmentDevice, EquipmentSupply
from resource_health.models.inventory import InventoryItem
from resource_health.models.outputs import SupplyValidation
from resource_health.utils.logger import get_logger

logger = get_logger("resource_health.health.enrichment")


def _find_item(inventory: Iterable[InventoryItem], item_id: str) -> Optional[InventoryItem]:
    return next((i for i in inventory if i.id == item_id), None)


def enrich_supply(supply: EquipmentSupply, inventory: list[InventoryItem]) -> Optional[EnrichedSupply]:
    """Join a supply with its inventory item. Returns None when the item does not exist.

    needs_reorder compares against the supply's own min_qty, not the item's
    global min_quantity.
    """
    item = _find_item(inventory, supply.inventory_item_id)
    if item is None:
        logger.warning(
            "enrichment.missing_inventory_item",
            supply_id=supply.id,
            inventory_item_id=supply.inventory_item_id,
        )
        return None

    weeks_remaining = calculate_weeks_remaining(item.current_quantity, supply.burn_per_week)
    return EnrichedSupply(
        **supply.model_dump(),
        name=item.product_name,
        cat_num=item.cat_num,
        price=item.price_ex_vat,
        currency=item.currency,
        supplier=item.supplier,
        inventory_level=item.inventory_level,
        current_quantity=item.current_quantity,
        weeks_remaining=weeks_remaining,
        health_percent=weeks_to_health_percentage(weeks_remaining),
        needs_reorder=item.current_quantity <= supply.min_qty,
    )


def enrich_device_supplies(device: EquipmentDevice, inventory: list[InventoryItem]) -> list[EnrichedSupply]:
    """Enrich every supply of a device, dropping those whose inventory item is missing."""
    enriched = (enrich_supply(s, inventory) for s in device.supplies)
    return [s for s in enriched if s is not None]


def aggregate_supplies_health(supplies: list[EnrichedSupply]) -> int:
    """Worst-of-N: the lowest supply health, or 100 for a device with no tracked supplies."""
    return min((s.health_percent for s in supplies), default=100)


def device_supplies_health(device: EquipmentDevice, inventory: list[InventoryItem]) -> int:
    return aggregate_supplies_health(enrich_device_supplies(device, inventory))


def update_inventory_quantity(
    inventory_item_id: str,
    new_quantity: float,
    inventory: list[InventoryItem],
) -> Optional[InventoryItem]:
    """Return a copy of the item with the new quantity and a recomputed inventory_level."""
    item = _find_item(inventory, inventory_item_id)
    if item is None:
        logger.warning("enrichment.inventory_item_not_found", inventory_item_id=inventory_item_id)
        return None
    return item.model_copy(
        update={
            "current_quantity": new_quantity,
            "inventory_level": classify_inventory_level(new_quantity, item.min_quantity),
            "updated_at": datetime.now(timezone.utc),
        }
    )


def device_inventory_items(device: EquipmentDevice, inventory: list[InventoryItem]) -> list[InventoryItem]:
    """Inventory items linked to a device."""
    linked = {s.inventory_item_id for s in device.supplies}
    return [item for item in inventory if item.id in linked]


def devices_using_item(inventory_item_id: str, devices: list[EquipmentDevice]) -> list[EquipmentDevice]:
    """Devices with at least one supply pointing at the item."""
    return [d for d in devices if any(s.inventory_item_id == inventory_item_id for s in d.supplies)]


def calculate_total_burn_rate(inventory_item_id: str, devices: list[EquipmentDevice]) -> float:
    """Weekly consumption of an item summed across devices (first matching supply per device)."""
    total = 0.0
    for device in devices:
        supply = next((s for s in device.supplies if s.inventory_item_id == inventory_item_id), None)
        if supply is not None:
            total += supply.burn_per_week or 0
    return total


def validate_device_supplies(device: EquipmentDevice, inventory: list[InventoryItem]) -> SupplyValidation:
    """Check supply links resolve and settings are sane before saving a device."""
    errors: list[str] = []
    for index, supply in enumerate(device.supplies, 1):
        if _find_item(inventory, supply.inventory_item_id) is None:
            errors.append(f"Supply #{index}: Inventory item {supply.inventory_item_id} not found")
        if supply.min_qty <= 0:
            errors.append(f"Supply #{index}: minQty must be greater than 0")
        if supply.burn_per_week < 0:
            errors.append(f"Supply #{index}: burnPerWeek cannot be negative")
    return SupplyValidation(valid=not errors, errors=errors)
