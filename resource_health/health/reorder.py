"""Reorder suggestions from inventory levels and device burn rates."""

import math

from resource_health.config import REORDER_HORIZON_WEEKS
from resource_health.health.enrichment import devices_using_item
from resource_health.health.numeric import round_half_up
from resource_health.models.equipment import EquipmentDevice
from resource_health.models.inventory import InventoryItem
from resource_health.models.outputs import ChargeSplit, EntityRef, ReorderPriority, ReorderSuggestion
from resource_health.models.people import MasterProject

_PRIORITY_ORDER: dict[str, int] = {"urgent": 0, "high": 1, "medium": 2, "low": 3}


def _round_to(value: float, places: int) -> float:
    factor = 10**places
    return round_half_up(value * factor) / factor


def reorder_priority(weeks_till_empty: float) -> ReorderPriority:
    """< 1 week urgent, < 2 high, < 3 medium, otherwise low."""
    if weeks_till_empty < 1:
        return "urgent"
    if weeks_till_empty < 2:
        return "high"
    if weeks_till_empty < 3:
        return "medium"
    return "low"


def _charge_splits(
    usage: list[tuple[str | None, float]],
    projects: list[MasterProject],
    total_burn_rate: float,
    estimated_cost: float,
) -> list[ChargeSplit]:
    """Split estimated_cost across charged projects in proportion to their burn rate."""
    by_id = {p.id: p for p in projects}
    burn_by_project: dict[str, float] = {}
    for project_id, burn in usage:
        if project_id and project_id in by_id:
            burn_by_project[project_id] = burn_by_project.get(project_id, 0) + burn

    splits = []
    for project_id, burn in burn_by_project.items():
        project = by_id[project_id]
        account_id = project.account_ids[0] if project.account_ids else None
        percentage = burn / total_burn_rate * 100
        splits.append(
            ChargeSplit(
                account_id=account_id or "",
                account_name=f"Account {account_id}" if account_id else "Unknown Account",
                project_id=project_id,
                project_name=project.name,
                percentage=round_half_up(percentage),
                amount=_round_to(estimated_cost * percentage / 100, 2),
            )
        )
    return splits


def calculate_reorder_suggestions(
    inventory: list[InventoryItem],
    equipment: list[EquipmentDevice],
    projects: list[MasterProject],
    *,
    horizon_weeks: float = REORDER_HORIZON_WEEKS,
) -> list[ReorderSuggestion]:
    """Suggest reorders for linked items that will run out within horizon_weeks.

    Order quantity covers horizon_weeks of the combined burn rate. Results are
    sorted by priority (urgent first), then by weeks remaining.
    """
    suggestions: list[ReorderSuggestion] = []

    for item in inventory:
        devices = devices_using_item(item.id, equipment)
        if not devices:
            continue

        usage: list[tuple[str | None, float]] = []
        for device in devices:
            supply = next(s for s in device.supplies if s.inventory_item_id == item.id)
            usage.append((supply.charge_to_project_id, supply.burn_per_week))
        total_burn_rate = sum(burn for _, burn in usage)
        # Nothing consumed means no runway to run out of, whatever the horizon
        if not total_burn_rate > 0:
            continue

        weeks_till_empty = item.current_quantity / total_burn_rate
        if weeks_till_empty >= horizon_weeks:
            continue

        suggested_order_qty = math.ceil(total_burn_rate * horizon_weeks)
        estimated_cost = (item.price_ex_vat or 0) * suggested_order_qty
        splits = _charge_splits(usage, projects, total_burn_rate, estimated_cost)

        suggestions.append(
            ReorderSuggestion(
                inventory_item_id=item.id,
                item_name=item.product_name,
                cat_num=item.cat_num,
                current_qty=item.current_quantity,
                min_qty=item.min_quantity,
                total_burn_rate=total_burn_rate,
                weeks_till_empty=_round_to(weeks_till_empty, 1),
                suggested_order_qty=suggested_order_qty,
                priority=reorder_priority(weeks_till_empty),
                affected_equipment=[EntityRef(id=d.id, name=d.name) for d in devices],
                affected_projects=[EntityRef(id=s.project_id, name=s.project_name) for s in splits],
                estimated_cost=_round_to(estimated_cost, 2),
                charge_to_accounts=splits,
            )
        )

    suggestions.sort(key=lambda s: (_PRIORITY_ORDER[s.priority], s.weeks_till_empty))
    return suggestions
