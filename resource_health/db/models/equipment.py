"""ORM models for equipment devices and their supply requirements."""

from typing import Optional

from sqlalchemy import Float, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from resource_health.db.base import Base, TimestampMixin


class EquipmentDeviceRow(Base, TimestampMixin):
    """Lab device with a maintenance interval."""

    __tablename__ = "equipment_devices"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False, default="")
    lab_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True, index=True)
    # Raw ISO date string; unparsable values are scored as fully healthy
    last_maintained: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    maintenance_days: Mapped[float] = mapped_column(Float, nullable=False, default=90)
    threshold: Mapped[float] = mapped_column(Float, nullable=False, default=20)

    supplies: Mapped[list["EquipmentSupplyRow"]] = relationship(
        back_populates="device",
        cascade="all, delete-orphan",
        order_by="EquipmentSupplyRow.position",
    )


class EquipmentSupplyRow(Base):
    """Device-scoped consumable. inventory_item_id is a weak reference (no FK)."""

    __tablename__ = "equipment_supplies"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    device_id: Mapped[str] = mapped_column(ForeignKey("equipment_devices.id"), nullable=False, index=True)
    position: Mapped[int] = mapped_column(nullable=False, default=0)
    inventory_item_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    burn_per_week: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    min_qty: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    account_override: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    charge_to_project_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    device: Mapped[EquipmentDeviceRow] = relationship(back_populates="supplies")
