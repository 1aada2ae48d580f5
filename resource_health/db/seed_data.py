"""Demo lab data: a few devices, their consumables, budgets and staff."""

from datetime import timedelta

from sqlalchemy.orm import Session

from resource_health.db.models.equipment import EquipmentDeviceRow, EquipmentSupplyRow
from resource_health.db.models.funding import FundingAllocationRow
from resource_health.db.models.inventory import InventoryItemRow
from resource_health.db.models.people import PersonRow, ProjectRow
from resource_health.health.numeric import utc_today
from resource_health.health.supply import classify_inventory_level
from resource_health.utils.logger import get_logger

logger = get_logger("resource_health.db.seed_data")

PEOPLE = [
    ("u-pi", "Ada", "Moreau", "ada.moreau@lab.example", "PI"),
    ("u-mgr", "Jonas", "Keller", "jonas.keller@lab.example", "Lab Manager"),
    ("u-admin", "Rui", "Santos", "rui.santos@lab.example", "Administrator"),
    ("u-res", "Mina", "Okafor", "mina.okafor@lab.example", "Researcher"),
]

PROJECTS = [
    ("p-crispr", "CRISPR screen", ["acc-erc"]),
    ("p-imaging", "Live-cell imaging", ["acc-dfg", "acc-core"]),
]

# id, name, cat_num, quantity, min, price, supplier
ITEMS = [
    ("inv-tips", "Filter tips 200 uL", "TF-200", 12, 10, 45.0, "LabSupply Co"),
    ("inv-fbs", "Fetal bovine serum 500 mL", "FBS-500", 2, 2, 310.0, "BioReagents"),
    ("inv-plates", "96-well PCR plates", "PCR-96", 40, 15, 3.2, "LabSupply Co"),
    ("inv-lamp", "Mercury lamp HBO 100", "HBO-100", 0, 1, 420.0, "OptiParts"),
    ("inv-oil", "Immersion oil 20 mL", "IMM-20", 6, 2, 28.5, "OptiParts"),
]

# id, name, days since maintenance, interval, threshold, supplies[(supply_id, item, burn/week, min, project)]
DEVICES = [
    ("eq-pcr", "Thermocycler A", 20, 90, 20, [
        ("s-pcr-tips", "inv-tips", 4, 5, "p-crispr"),
        ("s-pcr-plates", "inv-plates", 10, 10, "p-crispr"),
    ]),
    ("eq-hood", "Tissue culture hood", 170, 180, 20, [
        ("s-hood-fbs", "inv-fbs", 1, 1, "p-crispr"),
        ("s-hood-tips", "inv-tips", 3, 5, None),
    ]),
    ("eq-scope", "Widefield microscope", 60, 60, 20, [
        ("s-scope-lamp", "inv-lamp", 0.25, 1, "p-imaging"),
        ("s-scope-oil", "inv-oil", 0.5, 1, "p-imaging"),
        ("s-scope-ghost", "inv-retired", 1, 1, None),
    ]),
]

# id, account id, account name, allocated, spent, committed, warning threshold
ALLOCATIONS = [
    ("alloc-erc", "acc-erc", "ERC Starting Grant", 20000, 14500, 1200, 25),
    ("alloc-dfg", "acc-dfg", "DFG Sachbeihilfe", 8000, 7500, 300, 25),
    ("alloc-core", "acc-core", "Core facility", 5000, 5000, 0, None),
]


def seed_demo_data(session: Session) -> None:
    """Insert the demo records. Maintenance dates are relative to today so health varies."""
    today = utc_today()
    for pid, first, last, email, role in PEOPLE:
        session.add(PersonRow(id=pid, first_name=first, last_name=last, email=email, role=role))
    for pid, name, accounts in PROJECTS:
        session.add(ProjectRow(id=pid, name=name, account_ids=accounts))
    for iid, name, cat, qty, min_qty, price, supplier in ITEMS:
        session.add(
            InventoryItemRow(
                id=iid,
                product_name=name,
                cat_num=cat,
                current_quantity=qty,
                min_quantity=min_qty,
                price_ex_vat=price,
                currency="EUR",
                supplier=supplier,
                inventory_level=classify_inventory_level(qty, min_qty),
            )
        )
    for did, name, days_ago, interval, threshold, supplies in DEVICES:
        device = EquipmentDeviceRow(
            id=did,
            name=name,
            lab_id="lab-1",
            last_maintained=(today - timedelta(days=days_ago)).isoformat(),
            maintenance_days=interval,
            threshold=threshold,
        )
        for position, (sid, item_id, burn, min_qty, project) in enumerate(supplies):
            device.supplies.append(
                EquipmentSupplyRow(
                    id=sid,
                    position=position,
                    inventory_item_id=item_id,
                    burn_per_week=burn,
                    min_qty=min_qty,
                    charge_to_project_id=project,
                )
            )
        session.add(device)
    for aid, account_id, account_name, allocated, spent, committed, threshold in ALLOCATIONS:
        session.add(
            FundingAllocationRow(
                id=aid,
                funding_account_id=account_id,
                funding_account_name=account_name,
                allocated_amount=allocated,
                current_spent=spent,
                current_committed=committed,
                remaining_budget=allocated - spent - committed,
                currency="EUR",
                status="active" if allocated - spent - committed > 0 else "exhausted",
                low_balance_warning_threshold=threshold,
            )
        )
    logger.info(
        "seed_data.done",
        people=len(PEOPLE),
        projects=len(PROJECTS),
        items=len(ITEMS),
        devices=len(DEVICES),
        allocations=len(ALLOCATIONS),
    )
