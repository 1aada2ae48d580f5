"""Re-export all ORM models so Base.metadata has all tables."""

from resource_health.db.models.equipment import EquipmentDeviceRow, EquipmentSupplyRow
from resource_health.db.models.funding import FundingAllocationRow
from resource_health.db.models.inventory import InventoryItemRow
from resource_health.db.models.notification import NotificationRow
from resource_health.db.models.people import PersonRow, ProjectRow

__all__ = [
    "InventoryItemRow",
    "EquipmentDeviceRow",
    "EquipmentSupplyRow",
    "FundingAllocationRow",
    "PersonRow",
    "ProjectRow",
    "NotificationRow",
]
