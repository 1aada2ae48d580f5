"""Build notification payloads for stock and budget events."""

from resource_health.config import DEFAULT_CURRENCY
from resource_health.health.funding import budget_priority, remaining_budget
from resource_health.models.funding import FundingAllocation
from resource_health.models.inventory import InventoryItem
from resource_health.models.outputs import NotificationPayload
from resource_health.models.people import PersonProfile

INVENTORY_URL = "/equipment-management?tab=inventory"
LEDGER_URL = "/personal-ledger"


def _quantity(value: float) -> str:
    return f"{value:g}"


def low_stock_notifications(
    item: InventoryItem,
    managers: list[PersonProfile],
    weeks_remaining: float,
) -> list[NotificationPayload]:
    """One LOW_STOCK payload per manager; high priority under a week of runway."""
    priority = "high" if weeks_remaining < 1 else "medium"
    return [
        NotificationPayload(
            user_id=manager.id,
            type="LOW_STOCK",
            title=f"Low Stock Alert: {item.product_name}",
            message=(
                f"Only {weeks_remaining:.1f} weeks of {item.product_name} remaining "
                f"({_quantity(item.current_quantity)} units). Reorder recommended."
            ),
            priority=priority,
            related_entity_type="inventory",
            related_entity_id=item.id,
            action_url=INVENTORY_URL,
        )
        for manager in managers
    ]


def critical_stock_notifications(item: InventoryItem, managers: list[PersonProfile]) -> list[NotificationPayload]:
    """One CRITICAL_STOCK payload per manager."""
    state = "completely out of stock" if item.current_quantity == 0 else "critically low"
    return [
        NotificationPayload(
            user_id=manager.id,
            type="CRITICAL_STOCK",
            title=f"URGENT: {item.product_name} Out of Stock",
            message=f"{item.product_name} is {state}. Immediate reorder required.",
            priority="high",
            related_entity_type="inventory",
            related_entity_id=item.id,
            action_url=INVENTORY_URL,
        )
        for manager in managers
    ]


def low_budget_notification(
    allocation: FundingAllocation,
    user: PersonProfile,
    percent_remaining: float,
) -> NotificationPayload:
    """LOW_BUDGET payload whose priority follows the funding risk tier."""
    name = allocation.funding_account_name or "funding allocation"
    currency = allocation.currency or DEFAULT_CURRENCY
    return NotificationPayload(
        user_id=user.id,
        type="LOW_BUDGET",
        title="Budget Running Low",
        message=(
            f"Your {name} budget has {percent_remaining:.0f}% remaining "
            f"({remaining_budget(allocation):.2f} {currency})."
        ),
        priority=budget_priority(percent_remaining),
        related_entity_type="fundingAllocation",
        related_entity_id=allocation.id,
        action_url=LEDGER_URL,
    )


def budget_exhausted_notification(allocation: FundingAllocation, user: PersonProfile) -> NotificationPayload:
    name = allocation.funding_account_name or "funding allocation"
    return NotificationPayload(
        user_id=user.id,
        type="BUDGET_EXHAUSTED",
        title="Budget Exhausted",
        message=f"Your {name} budget has been fully spent. Contact your PI to request additional funding.",
        priority="high",
        related_entity_type="fundingAllocation",
        related_entity_id=allocation.id,
        action_url=LEDGER_URL,
    )
