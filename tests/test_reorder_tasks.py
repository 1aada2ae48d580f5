"""Tests for reorder suggestions and generated equipment tasks."""

import sys
import unittest
from datetime import date, datetime, timedelta, timezone
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from resource_health.health.reorder import calculate_reorder_suggestions, reorder_priority
from resource_health.health.tasks import generate_equipment_tasks
from resource_health.models.equipment import EquipmentDevice, EquipmentSupply
from resource_health.models.inventory import InventoryItem
from resource_health.models.outputs import EquipmentTask
from resource_health.models.people import MasterProject, PersonProfile

NOW = datetime(2024, 6, 15, 9, 0, tzinfo=timezone.utc)


def _inventory() -> list[InventoryItem]:
    return [
        InventoryItem(id="tips", product_name="Tips", current_quantity=6, min_quantity=5, price_ex_vat=2.5),
        InventoryItem(id="plates", product_name="Plates", current_quantity=100, min_quantity=10, price_ex_vat=1),
        InventoryItem(id="lamp", product_name="Lamp", current_quantity=0, min_quantity=1, price_ex_vat=420),
        InventoryItem(id="idle", product_name="Idle", current_quantity=0, min_quantity=1, price_ex_vat=1),
        InventoryItem(id="orphan", product_name="Orphan", current_quantity=0, min_quantity=1, price_ex_vat=1),
    ]


def _devices(last_maintained: str = "2024-06-01") -> list[EquipmentDevice]:
    return [
        EquipmentDevice(
            id="eq-1",
            name="PCR",
            last_maintained=last_maintained,
            maintenance_days=90,
            supplies=[
                EquipmentSupply(id="s1", inventory_item_id="tips", burn_per_week=3, charge_to_project_id="p1"),
                EquipmentSupply(id="s2", inventory_item_id="plates", burn_per_week=5),
            ],
        ),
        EquipmentDevice(
            id="eq-2",
            name="Scope",
            last_maintained="2024-06-10",
            maintenance_days=90,
            supplies=[
                EquipmentSupply(id="s3", inventory_item_id="tips", burn_per_week=1, charge_to_project_id="p2"),
                EquipmentSupply(id="s4", inventory_item_id="lamp", burn_per_week=0.25),
                EquipmentSupply(id="s5", inventory_item_id="idle", burn_per_week=0),
            ],
        ),
    ]


PROJECTS = [
    MasterProject(id="p1", name="CRISPR", account_ids=["acc-1"]),
    MasterProject(id="p2", name="Imaging", account_ids=[]),
]


class TestReorderSuggestions(unittest.TestCase):
    """Tests for calculate_reorder_suggestions."""

    def test_priority_tiers(self):
        """Weeks till empty map onto the four priority tiers."""
        self.assertEqual(reorder_priority(0), "urgent")
        self.assertEqual(reorder_priority(0.99), "urgent")
        self.assertEqual(reorder_priority(1), "high")
        self.assertEqual(reorder_priority(2.5), "medium")
        self.assertEqual(reorder_priority(3), "low")

    def test_only_linked_items_inside_horizon_sorted_by_priority(self):
        """Unlinked and idle items are skipped; urgent sorts first."""
        suggestions = calculate_reorder_suggestions(_inventory(), _devices(), PROJECTS)
        self.assertEqual([s.inventory_item_id for s in suggestions], ["lamp", "tips"])
        self.assertEqual([s.priority for s in suggestions], ["urgent", "high"])

    def test_combined_burn_and_cost_split(self):
        """Burn adds up across devices and cost splits by project burn share."""
        tips = calculate_reorder_suggestions(_inventory(), _devices(), PROJECTS)[1]
        self.assertEqual(tips.total_burn_rate, 4)
        self.assertEqual(tips.weeks_till_empty, 1.5)
        self.assertEqual(tips.suggested_order_qty, 16)
        self.assertEqual(tips.estimated_cost, 40.0)
        self.assertEqual([e.id for e in tips.affected_equipment], ["eq-1", "eq-2"])
        splits = {s.project_id: s for s in tips.charge_to_accounts}
        self.assertEqual(splits["p1"].percentage, 75)
        self.assertEqual(splits["p1"].amount, 30.0)
        self.assertEqual(splits["p1"].account_id, "acc-1")
        self.assertEqual(splits["p2"].percentage, 25)
        self.assertEqual(splits["p2"].account_name, "Unknown Account")

    def test_custom_horizon(self):
        """A shorter horizon drops items and shrinks order quantity."""
        suggestions = calculate_reorder_suggestions(_inventory(), _devices(), PROJECTS, horizon_weeks=1)
        self.assertEqual([s.inventory_item_id for s in suggestions], ["lamp"])
        self.assertEqual(suggestions[0].suggested_order_qty, 1)

    def test_zero_burn_items_skipped_for_any_horizon(self):
        """Items nobody consumes are never suggested, even with a huge horizon."""
        devices = _devices()
        devices[1].supplies.append(
            EquipmentSupply(id="s6", inventory_item_id="orphan", burn_per_week=0, charge_to_project_id="p1")
        )
        suggestions = calculate_reorder_suggestions(_inventory(), devices, PROJECTS, horizon_weeks=5000)
        ids = [s.inventory_item_id for s in suggestions]
        self.assertNotIn("idle", ids)
        self.assertNotIn("orphan", ids)
        self.assertIn("plates", ids)


class TestEquipmentTasks(unittest.TestCase):
    """Tests for generate_equipment_tasks."""

    def setUp(self):
        """Manager assignee and the default suggestions."""
        self.assignee = PersonProfile(id="u-mgr", first_name="Jo", last_name="K", role="Lab Manager")
        self.suggestions = calculate_reorder_suggestions(_inventory(), _devices(), PROJECTS)

    def test_overdue_device_and_urgent_reorders_create_tasks(self):
        """Overdue devices and urgent or high reorders become tasks."""
        overdue = (NOW.date() - timedelta(days=100)).isoformat()
        tasks = generate_equipment_tasks(_devices(overdue), self.suggestions, self.assignee, [], now=NOW)
        maintenance = [t for t in tasks if t.task_type == "maintenance"]
        reorder = [t for t in tasks if t.task_type == "reorder"]

        self.assertEqual([t.equipment_id for t in maintenance], ["eq-1"])
        self.assertEqual(maintenance[0].importance, "critical")
        self.assertEqual(maintenance[0].metadata["maintenance_health"], 0)
        self.assertEqual(maintenance[0].due_date.date(), date.fromisoformat(overdue) + timedelta(days=90))

        self.assertEqual([t.inventory_item_id for t in reorder], ["lamp", "tips"])
        self.assertEqual([t.importance for t in reorder], ["critical", "high"])
        self.assertTrue(all(t.assignee_id == "u-mgr" for t in tasks))

    def test_existing_tasks_are_not_duplicated(self):
        """Open tasks for the same device or item are not created again."""
        overdue = (NOW.date() - timedelta(days=100)).isoformat()
        existing = [
            EquipmentTask(
                id="t1",
                title="Reorder Tips",
                description="",
                importance="high",
                assignee_id="u-mgr",
                due_date=NOW,
                task_type="reorder",
                inventory_item_id="tips",
            ),
            EquipmentTask(
                id="t2",
                title="Maintain PCR",
                description="",
                importance="critical",
                assignee_id="u-mgr",
                due_date=NOW,
                task_type="maintenance",
                equipment_id="eq-1",
            ),
        ]
        tasks = generate_equipment_tasks(_devices(overdue), self.suggestions, self.assignee, existing, now=NOW)
        self.assertEqual([(t.task_type, t.inventory_item_id) for t in tasks], [("reorder", "lamp")])

    def test_healthy_devices_make_no_maintenance_tasks(self):
        """Healthy devices with no suggestions produce nothing."""
        tasks = generate_equipment_tasks(_devices(), [], self.assignee, [], now=NOW)
        self.assertEqual(tasks, [])
