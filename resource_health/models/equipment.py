"""Equipment devices and their consumable supply requirements."""

from typing import Optional

from resource_health.models.base import DocumentModel
from resource_health.models.inventory import InventoryLevel


class EquipmentSupply(DocumentModel):
    """Device-scoped supply requirement. Quantity lives on the linked InventoryItem."""

    id: str
    inventory_item_id: str  # weak reference; may point at nothing
    burn_per_week: float = 0
    min_qty: float = 0  # device-specific reorder threshold
    account_override: Optional[str] = None
    charge_to_project_id: Optional[str] = None


class EnrichedSupply(EquipmentSupply):
    """Supply joined with its inventory item plus computed runway/health. Never persisted."""

    name: str
    cat_num: Optional[str] = None
    price: float = 0
    currency: Optional[str] = None
    supplier: Optional[str] = None
    inventory_level: Optional[InventoryLevel] = None
    current_quantity: float
    weeks_remaining: float
    health_percent: int
    needs_reorder: bool


class EquipmentDevice(DocumentModel):
    """Lab device with a maintenance interval and tracked consumables."""

    id: str
    name: str = ""
    lab_id: Optional[str] = None
    last_maintained: Optional[str] = None  # ISO date; kept raw so bad data can fail open
    maintenance_days: float = 90
    threshold: float = 20  # maintenance health percent at/below which maintenance is due
    supplies: list[EquipmentSupply] = []
