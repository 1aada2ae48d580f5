"""Funding store: allocations and the low-balance warning marker."""

from typing import Optional

from sqlalchemy import select, update

from resource_health.db import get_session
from resource_health.db.models.funding import FundingAllocationRow
from resource_health.db.repositories._convert import to_model
from resource_health.models.funding import FundingAllocation
from resource_health.utils.logger import get_logger

logger = get_logger("resource_health.db.funding_repo")


class SqlFundingStore:
    """Read FundingAllocation records; conditionally write last_low_balance_warning_at."""

    def get_allocation(self, allocation_id: str) -> Optional[FundingAllocation]:
        with get_session() as session:
            row = session.get(FundingAllocationRow, allocation_id)
            return to_model(FundingAllocation, row) if row is not None else None

    def list_allocations(self) -> list[FundingAllocation]:
        with get_session() as session:
            rows = session.scalars(select(FundingAllocationRow).order_by(FundingAllocationRow.id)).all()
            return [to_model(FundingAllocation, r) for r in rows]

    def mark_low_balance_warned(
        self,
        allocation_id: str,
        warned_at: str,
        *,
        expected: Optional[str],
    ) -> bool:
        """Set last_low_balance_warning_at only if it still equals expected (compare-and-swap).

        Returns True when this call won the write; False when another writer got there first
        or the allocation does not exist.
        """
        column = FundingAllocationRow.last_low_balance_warning_at
        stmt = update(FundingAllocationRow).where(FundingAllocationRow.id == allocation_id)
        if expected is None:
            stmt = stmt.where(column.is_(None))
        else:
            stmt = stmt.where(column == expected)
        with get_session() as session:
            result = session.execute(stmt.values(last_low_balance_warning_at=warned_at))
            won = result.rowcount == 1
        logger.debug(
            "funding_repo.mark_low_balance_warned",
            allocation_id=allocation_id,
            expected=expected,
            warned_at=warned_at,
            won=won,
        )
        return won
