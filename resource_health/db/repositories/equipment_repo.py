"""Equipment store: devices with their supply lists."""

from typing import Optional

from sqlalchemy import select

from resource_health.db import get_session
from resource_health.db.models.equipment import EquipmentDeviceRow, EquipmentSupplyRow
from resource_health.db.repositories._convert import to_model
from resource_health.models.equipment import EquipmentDevice


class SqlEquipmentStore:
    """Read EquipmentDevice records and update maintenance dates."""

    def get_device(self, device_id: str) -> Optional[EquipmentDevice]:
        with get_session() as session:
            row = session.get(EquipmentDeviceRow, device_id)
            return to_model(EquipmentDevice, row) if row is not None else None

    def list_devices(self) -> list[EquipmentDevice]:
        with get_session() as session:
            rows = session.scalars(select(EquipmentDeviceRow).order_by(EquipmentDeviceRow.name)).all()
            return [to_model(EquipmentDevice, r) for r in rows]

    def devices_using_item(self, item_id: str) -> list[EquipmentDevice]:
        """Devices with at least one supply pointing at item_id."""
        with get_session() as session:
            q = (
                select(EquipmentDeviceRow)
                .join(EquipmentSupplyRow)
                .where(EquipmentSupplyRow.inventory_item_id == item_id)
                .distinct()
                .order_by(EquipmentDeviceRow.name)
            )
            return [to_model(EquipmentDevice, r) for r in session.scalars(q).all()]

    def set_last_maintained(self, device_id: str, last_maintained: str) -> bool:
        """Record a completed maintenance. Returns True if a row was updated."""
        with get_session() as session:
            row = session.get(EquipmentDeviceRow, device_id)
            if row is None:
                return False
            row.last_maintained = last_maintained
            return True
