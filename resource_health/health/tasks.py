"""Day-to-day board tasks generated from equipment maintenance and reorder state."""

from datetime import datetime, time, timedelta, timezone

from resource_health.health.maintenance import (
    calculate_maintenance_health,
    health_class,
    maintenance_due_date,
)
from resource_health.health.numeric import utc_now
from resource_health.models.equipment import EquipmentDevice
from resource_health.models.outputs import EquipmentTask, ReorderSuggestion
from resource_health.models.people import PersonProfile

_IMPORTANCE_BY_CLASS = {"critical": "critical", "warning": "high", "healthy": "medium"}


def _has_task(existing: list[EquipmentTask], task_type: str, **match: str) -> bool:
    return any(
        t.task_type == task_type and all(getattr(t, k) == v for k, v in match.items())
        for t in existing
    )


def _maintenance_task(device: EquipmentDevice, health: int, assignee: PersonProfile, now: datetime) -> EquipmentTask:
    due = maintenance_due_date(device)
    due_date = datetime.combine(due, time.min, tzinfo=timezone.utc) if due else now
    return EquipmentTask(
        id=f"equip-maint-{device.id}-{int(now.timestamp() * 1000)}",
        title=f"Perform maintenance on {device.name}",
        description=(
            f"Maintenance health at {health}%. Last maintained: {device.last_maintained}. "
            f"Due: {due_date.date().isoformat()}"
        ),
        importance=_IMPORTANCE_BY_CLASS[health_class(health)],
        assignee_id=assignee.id,
        due_date=due_date,
        task_type="maintenance",
        equipment_id=device.id,
        metadata={"maintenance_health": health},
    )


def _reorder_task(suggestion: ReorderSuggestion, assignee: PersonProfile, now: datetime) -> EquipmentTask:
    used_by = ", ".join(e.name for e in suggestion.affected_equipment)
    return EquipmentTask(
        id=f"equip-reorder-{suggestion.inventory_item_id}-{int(now.timestamp() * 1000)}",
        title=f"Reorder {suggestion.item_name}",
        description=(
            f"{suggestion.weeks_till_empty} weeks remaining. Order {suggestion.suggested_order_qty} units "
            f"({suggestion.estimated_cost:.2f}). Used by: {used_by}"
        ),
        importance="critical" if suggestion.priority == "urgent" else "high",
        assignee_id=assignee.id,
        due_date=now + timedelta(weeks=suggestion.weeks_till_empty),
        task_type="reorder",
        inventory_item_id=suggestion.inventory_item_id,
        metadata={
            "weeks_remaining": suggestion.weeks_till_empty,
            "suggested_qty": suggestion.suggested_order_qty,
            "estimated_cost": suggestion.estimated_cost,
        },
    )


def generate_equipment_tasks(
    equipment: list[EquipmentDevice],
    suggestions: list[ReorderSuggestion],
    assignee: PersonProfile,
    existing_tasks: list[EquipmentTask],
    *,
    now: datetime | None = None,
) -> list[EquipmentTask]:
    """Create maintenance tasks for devices at/below their threshold and reorder tasks for
    urgent/high suggestions, skipping anything that already has an open task."""
    now = now or utc_now()
    today = now.date()
    tasks: list[EquipmentTask] = []

    for device in equipment:
        health = calculate_maintenance_health(device.last_maintained, device.maintenance_days, today=today)
        if health > device.threshold:
            continue
        if _has_task(existing_tasks, "maintenance", equipment_id=device.id):
            continue
        tasks.append(_maintenance_task(device, health, assignee, now))

    for suggestion in suggestions:
        if suggestion.priority not in ("urgent", "high"):
            continue
        if _has_task(existing_tasks, "reorder", inventory_item_id=suggestion.inventory_item_id):
            continue
        tasks.append(_reorder_task(suggestion, assignee, now))

    return tasks
