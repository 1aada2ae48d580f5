"""SQL-backed stores for inventory, equipment, funding, people and notifications."""

from resource_health.db.repositories.equipment_repo import SqlEquipmentStore
from resource_health.db.repositories.funding_repo import SqlFundingStore
from resource_health.db.repositories.inventory_repo import SqlInventoryStore
from resource_health.db.repositories.notification_repo import insert_notification, list_notifications
from resource_health.db.repositories.people_repo import SqlRoster

__all__ = [
    "SqlInventoryStore",
    "SqlEquipmentStore",
    "SqlFundingStore",
    "SqlRoster",
    "insert_notification",
    "list_notifications",
]
