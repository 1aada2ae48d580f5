"""Tests for the SQL stores against a temporary SQLite database."""

import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from resource_health.db import get_session, reset_db
from resource_health.db.models import EquipmentDeviceRow, EquipmentSupplyRow, FundingAllocationRow
from resource_health.db.repositories import (
    SqlEquipmentStore,
    SqlFundingStore,
    SqlInventoryStore,
    SqlRoster,
)
from resource_health.db.seed_data import seed_demo_data
from resource_health.health.enrichment import update_inventory_quantity


class TestSqlStores(unittest.TestCase):
    """Tests for the SQL stores over seeded demo data."""

    def setUp(self):
        reset_db()
        with get_session() as session:
            seed_demo_data(session)

    def test_inventory_round_trip(self):
        """Saved quantity and level read back unchanged."""
        store = SqlInventoryStore()
        item = store.get_item("inv-tips")
        self.assertEqual(item.product_name, "Filter tips 200 uL")
        self.assertEqual(item.inventory_level, "medium")
        self.assertIsNone(store.get_item("missing"))

        store.save_item(update_inventory_quantity("inv-tips", 3, [item]))
        saved = store.get_item("inv-tips")
        self.assertEqual(saved.current_quantity, 3)
        self.assertEqual(saved.inventory_level, "low")
        self.assertEqual(len(store.list_items()), 5)

    def test_equipment_keeps_supply_order_and_dangling_links(self):
        """Supplies keep their order and dangling links survive."""
        store = SqlEquipmentStore()
        scope = store.get_device("eq-scope")
        self.assertEqual([s.id for s in scope.supplies], ["s-scope-lamp", "s-scope-oil", "s-scope-ghost"])
        self.assertEqual(scope.supplies[2].inventory_item_id, "inv-retired")
        self.assertEqual(sorted(d.id for d in store.devices_using_item("inv-tips")), ["eq-hood", "eq-pcr"])
        self.assertEqual(store.devices_using_item("inv-nothing"), [])

    def test_set_last_maintained(self):
        """Maintenance date updates only existing devices."""
        store = SqlEquipmentStore()
        self.assertTrue(store.set_last_maintained("eq-pcr", "2024-06-15"))
        self.assertEqual(store.get_device("eq-pcr").last_maintained, "2024-06-15")
        self.assertFalse(store.set_last_maintained("missing", "2024-06-15"))

    def test_roster(self):
        """Profiles and projects load from the seed."""
        roster = SqlRoster()
        self.assertEqual(len(roster.list_profiles()), 4)
        self.assertEqual(roster.get_profile("u-mgr").role, "Lab Manager")
        self.assertEqual(roster.list_projects()[0].account_ids, ["acc-erc"])

    def test_mark_low_balance_warned_is_compare_and_swap(self):
        """The marker is written only when the expected value matches."""
        store = SqlFundingStore()
        self.assertIsNone(store.get_allocation("alloc-dfg").last_low_balance_warning_at)

        self.assertTrue(store.mark_low_balance_warned("alloc-dfg", "2024-06-15T12:00:00Z", expected=None))
        # A second writer that read the old (None) value loses
        self.assertFalse(store.mark_low_balance_warned("alloc-dfg", "2024-06-15T12:00:01Z", expected=None))
        self.assertEqual(store.get_allocation("alloc-dfg").last_low_balance_warning_at, "2024-06-15T12:00:00Z")

        self.assertTrue(
            store.mark_low_balance_warned(
                "alloc-dfg", "2024-06-16T12:00:00Z", expected="2024-06-15T12:00:00Z"
            )
        )
        self.assertFalse(store.mark_low_balance_warned("missing", "2024-06-16T12:00:00Z", expected=None))


class TestSchema(unittest.TestCase):
    """Tests for table relationships."""

    def test_supply_rows_cascade_with_device(self):
        """Deleting a device deletes its supply rows."""
        reset_db()
        with get_session() as session:
            device = EquipmentDeviceRow(id="eq-x", name="X")
            device.supplies.append(EquipmentSupplyRow(id="s-x", inventory_item_id="inv-x"))
            session.add(device)
            session.add(FundingAllocationRow(id="a-x"))
        with get_session() as session:
            session.delete(session.get(EquipmentDeviceRow, "eq-x"))
        with get_session() as session:
            self.assertIsNone(session.get(EquipmentSupplyRow, "s-x"))
            self.assertEqual(session.get(FundingAllocationRow, "a-x").status, "active")
