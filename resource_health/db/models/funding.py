"""ORM model for funding allocations."""

from typing import Optional

from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column

from resource_health.db.base import Base, TimestampMixin


class FundingAllocationRow(Base, TimestampMixin):
    """Budget slice of a funding account with spend tracking and the low-balance throttle marker."""

    __tablename__ = "funding_allocations"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    funding_account_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True, index=True)
    funding_account_name: Mapped[Optional[str]] = mapped_column(String(256), nullable=True)
    allocated_amount: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    remaining_budget: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    current_spent: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    current_committed: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    currency: Mapped[Optional[str]] = mapped_column(String(8), nullable=True)
    status: Mapped[str] = mapped_column(String(16), nullable=False, default="active")
    low_balance_warning_threshold: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    # ISO timestamp string with Z suffix; NULL = never warned
    last_low_balance_warning_at: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
