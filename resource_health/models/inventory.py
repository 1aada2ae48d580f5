"""Inventory records: consumables on the shelf."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from resource_health.config import DEFAULT_CURRENCY
from resource_health.models.base import DocumentModel

InventoryLevel = Literal["empty", "low", "medium", "full"]


class InventoryItem(DocumentModel):
    """Master inventory record; single source of truth for quantity and price."""

    id: str
    product_name: str = ""
    cat_num: Optional[str] = None
    current_quantity: float = 0
    min_quantity: float = 0
    price_ex_vat: float = Field(0, alias="priceExVAT")
    currency: Optional[str] = DEFAULT_CURRENCY
    supplier: Optional[str] = None
    inventory_level: Optional[InventoryLevel] = None  # derived from quantity vs min_quantity
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
