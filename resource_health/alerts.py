"""Stock and budget alert flows: read state, decide, notify, record.

Scoring stays in resource_health.health; this module wires it to the stores
and the notification transport. Delivery failures never undo a stock update
and never propagate to the caller.
"""

from datetime import datetime
from typing import Optional, Protocol

from opentelemetry.trace import SpanKind, Status, StatusCode

from resource_health.config import (
    LOW_BALANCE_WARNING_PERCENT,
    LOW_BUDGET_THROTTLE_HOURS,
    LOW_STOCK_ALERT_WEEKS,
)
from resource_health.health.enrichment import calculate_total_burn_rate, update_inventory_quantity
from resource_health.health.funding import budget_priority, percent_remaining, remaining_budget
from resource_health.health.numeric import parse_timestamp, utc_now
from resource_health.health.supply import calculate_weeks_remaining, classify_inventory_level
from resource_health.models.equipment import EquipmentDevice
from resource_health.models.funding import FundingAllocation
from resource_health.models.inventory import InventoryItem
from resource_health.models.outputs import (
    BudgetCheckResult,
    NotificationPayload,
    StockAlert,
    StockCheckResult,
)
from resource_health.models.people import PersonProfile
from resource_health.notifications.payloads import (
    budget_exhausted_notification,
    critical_stock_notifications,
    low_budget_notification,
    low_stock_notifications,
)
from resource_health.notifications.recipients import lab_managers
from resource_health.notifications.throttle import should_notify
from resource_health.notifications.transport import NotificationTransport
from resource_health.utils.logger import get_logger
from resource_health.utils.tracing import get_tracer

logger = get_logger("resource_health.alerts")


class RecordNotFoundError(LookupError):
    """A record the caller asked to act on does not exist in its store."""


class InventoryStore(Protocol):
    def get_item(self, item_id: str) -> Optional[InventoryItem]: ...

    def save_item(self, item: InventoryItem) -> None: ...


class EquipmentStore(Protocol):
    def devices_using_item(self, item_id: str) -> list[EquipmentDevice]: ...


class FundingStore(Protocol):
    def get_allocation(self, allocation_id: str) -> Optional[FundingAllocation]: ...

    def mark_low_balance_warned(self, allocation_id: str, warned_at: str, *, expected: Optional[str]) -> bool:
        """Write warned_at only if the stored value still equals expected. True if written."""
        ...


class Roster(Protocol):
    def list_profiles(self) -> list[PersonProfile]: ...


def evaluate_stock_alert(
    item: InventoryItem,
    weeks_remaining: float,
    *,
    low_stock_weeks: float = LOW_STOCK_ALERT_WEEKS,
) -> Optional[StockAlert]:
    """critical when the shelf is empty; low_stock when runway is short or the level is low."""
    level = item.inventory_level or classify_inventory_level(item.current_quantity, item.min_quantity)
    if item.current_quantity == 0 or level == "empty":
        return "critical"
    if weeks_remaining < low_stock_weeks or level == "low":
        return "low_stock"
    return None


def _deliver(transport: NotificationTransport, payloads: list[NotificationPayload], span) -> int:
    """Send each payload; failures are logged and counted out. Returns the number delivered."""
    delivered = 0
    for payload in payloads:
        try:
            transport.send(payload)
        except Exception:
            logger.exception(
                "alerts.dispatch_failed",
                user_id=payload.user_id,
                type=payload.type,
                related_entity_id=payload.related_entity_id,
            )
            span.set_status(Status(StatusCode.ERROR, "notification dispatch failed"))
            continue
        delivered += 1
    return delivered


class StockAlertService:
    """Record a stock count and alert lab managers when stock is low or gone."""

    def __init__(
        self,
        inventory: InventoryStore,
        equipment: EquipmentStore,
        roster: Roster,
        transport: NotificationTransport,
        *,
        low_stock_weeks: float = LOW_STOCK_ALERT_WEEKS,
    ):
        self._inventory = inventory
        self._equipment = equipment
        self._roster = roster
        self._transport = transport
        self._low_stock_weeks = low_stock_weeks

    def record_stock_check(
        self,
        item_id: str,
        new_quantity: float,
        burn_per_week: Optional[float] = None,
    ) -> StockCheckResult:
        """Save the new quantity, then notify managers if the item is low or out.

        burn_per_week is the consumption of the supply being checked; when omitted the
        runway uses the total burn across every device that consumes the item.
        """
        tracer = get_tracer()
        attrs = {"inventory.item_id": item_id, "inventory.new_quantity": float(new_quantity)}
        with tracer.start_as_current_span("stock_check", kind=SpanKind.INTERNAL, attributes=attrs) as span:
            item = self._inventory.get_item(item_id)
            if item is None:
                raise RecordNotFoundError(f"Inventory item {item_id} not found")

            updated = update_inventory_quantity(item_id, new_quantity, [item])
            self._inventory.save_item(updated)
            logger.info(
                "stock_alert.quantity_saved",
                item_id=item_id,
                previous_quantity=item.current_quantity,
                current_quantity=updated.current_quantity,
                inventory_level=updated.inventory_level,
            )

            if burn_per_week is None:
                burn_per_week = calculate_total_burn_rate(item_id, self._equipment.devices_using_item(item_id))
            weeks = calculate_weeks_remaining(updated.current_quantity, burn_per_week)
            alert = evaluate_stock_alert(updated, weeks, low_stock_weeks=self._low_stock_weeks)
            span.set_attribute("inventory.weeks_remaining", float(weeks))
            span.set_attribute("alert.type", alert or "none")

            result = StockCheckResult(item=updated, weeks_remaining=weeks, alert=alert)
            if alert is None:
                logger.debug("stock_alert.no_alert", item_id=item_id, weeks_remaining=weeks)
                return result

            managers = lab_managers(self._roster.list_profiles())
            if alert == "critical":
                payloads = critical_stock_notifications(updated, managers)
            else:
                payloads = low_stock_notifications(updated, managers, weeks)
            result.recipients = len(payloads)
            result.dispatched = _deliver(self._transport, payloads, span)
            logger.info(
                "stock_alert.dispatched",
                item_id=item_id,
                alert=alert,
                recipients=result.recipients,
                dispatched=result.dispatched,
            )
            return result


class BudgetAlertService:
    """Warn a user when an allocation runs low (throttled) or is exhausted (always)."""

    def __init__(
        self,
        funding: FundingStore,
        transport: NotificationTransport,
        *,
        throttle_hours: float = LOW_BUDGET_THROTTLE_HOURS,
        default_warning_percent: float = LOW_BALANCE_WARNING_PERCENT,
    ):
        self._funding = funding
        self._transport = transport
        self._throttle_hours = throttle_hours
        self._default_warning_percent = default_warning_percent

    def check_allocation(
        self,
        allocation_id: str,
        user: PersonProfile,
        *,
        now: Optional[datetime] = None,
    ) -> BudgetCheckResult:
        """Check one allocation and notify user if needed.

        The low-balance marker is written only after a successful send, and only if
        nobody else wrote it since we read it. Losing that race means a concurrent
        check already sent the same warning.
        """
        tracer = get_tracer()
        attrs = {"funding.allocation_id": allocation_id, "user.id": user.id}
        with tracer.start_as_current_span("allocation_check", kind=SpanKind.INTERNAL, attributes=attrs) as span:
            allocation = self._funding.get_allocation(allocation_id)
            if allocation is None:
                raise RecordNotFoundError(f"Funding allocation {allocation_id} not found")

            percent = percent_remaining(allocation)
            result = BudgetCheckResult(
                allocation=allocation,
                percent_remaining=percent,
                priority=budget_priority(percent),
            )
            span.set_attribute("funding.percent_remaining", float(percent))

            if remaining_budget(allocation) <= 0:
                result.notification_type = "BUDGET_EXHAUSTED"
                payload = budget_exhausted_notification(allocation, user)
                result.dispatched = _deliver(self._transport, [payload], span) == 1
                logger.info(
                    "budget_alert.exhausted",
                    allocation_id=allocation_id,
                    user_id=user.id,
                    dispatched=result.dispatched,
                )
                return result

            threshold = allocation.low_balance_warning_threshold or self._default_warning_percent
            if percent >= threshold:
                logger.debug("budget_alert.healthy", allocation_id=allocation_id, percent_remaining=percent)
                return result

            previous = allocation.last_low_balance_warning_at
            if not should_notify(previous, self._throttle_hours, now=now):
                result.throttled = True
                logger.info(
                    "budget_alert.throttled",
                    allocation_id=allocation_id,
                    last_low_balance_warning_at=previous,
                )
                return result

            result.notification_type = "LOW_BUDGET"
            payload = low_budget_notification(allocation, user, percent)
            result.dispatched = _deliver(self._transport, [payload], span) == 1
            if not result.dispatched:
                return result

            sent_at = parse_timestamp(now) if now is not None else utc_now()
            warned_at = sent_at.isoformat().replace("+00:00", "Z")
            result.warning_recorded = self._funding.mark_low_balance_warned(
                allocation_id, warned_at, expected=previous
            )
            if result.warning_recorded:
                result.allocation = allocation.model_copy(update={"last_low_balance_warning_at": warned_at})
            else:
                logger.warning(
                    "budget_alert.warning_marker_lost",
                    allocation_id=allocation_id,
                    expected=previous,
                )
            logger.info(
                "budget_alert.low_balance",
                allocation_id=allocation_id,
                user_id=user.id,
                percent_remaining=percent,
                priority=result.priority,
                warning_recorded=result.warning_recorded,
            )
            return result
