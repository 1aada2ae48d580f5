"""ORM model for inventory items."""

from typing import Optional

from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column

from resource_health.db.base import Base, TimestampMixin


class InventoryItemRow(Base, TimestampMixin):
    """Master inventory record: quantity, reorder threshold and price."""

    __tablename__ = "inventory_items"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    product_name: Mapped[str] = mapped_column(String(256), nullable=False, default="")
    cat_num: Mapped[Optional[str]] = mapped_column(String(64), nullable=True, index=True)
    current_quantity: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    min_quantity: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    price_ex_vat: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    currency: Mapped[Optional[str]] = mapped_column(String(8), nullable=True)
    supplier: Mapped[Optional[str]] = mapped_column(String(256), nullable=True)
    inventory_level: Mapped[Optional[str]] = mapped_column(String(16), nullable=True)
