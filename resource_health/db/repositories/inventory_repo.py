"""Inventory store backed by the inventory_items table."""

from typing import Optional

from sqlalchemy import select

from resource_health.db import get_session
from resource_health.db.models.inventory import InventoryItemRow
from resource_health.db.repositories._convert import to_model
from resource_health.models.inventory import InventoryItem
from resource_health.utils.logger import get_logger

logger = get_logger("resource_health.db.inventory_repo")

_WRITABLE = (
    "product_name",
    "cat_num",
    "current_quantity",
    "min_quantity",
    "price_ex_vat",
    "currency",
    "supplier",
    "inventory_level",
)


class SqlInventoryStore:
    """Read and write InventoryItem records."""

    def get_item(self, item_id: str) -> Optional[InventoryItem]:
        with get_session() as session:
            row = session.get(InventoryItemRow, item_id)
            return to_model(InventoryItem, row) if row is not None else None

    def list_items(self) -> list[InventoryItem]:
        with get_session() as session:
            rows = session.scalars(select(InventoryItemRow).order_by(InventoryItemRow.product_name)).all()
            return [to_model(InventoryItem, r) for r in rows]

    def save_item(self, item: InventoryItem) -> None:
        """Insert or update the row for item.id."""
        with get_session() as session:
            row = session.get(InventoryItemRow, item.id)
            if row is None:
                row = InventoryItemRow(id=item.id)
                session.add(row)
            for field in _WRITABLE:
                setattr(row, field, getattr(item, field))
        logger.debug(
            "inventory_repo.saved",
            item_id=item.id,
            current_quantity=item.current_quantity,
            inventory_level=item.inventory_level,
        )
