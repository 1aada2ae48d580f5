"""Report command: device maintenance/supply health and reorder suggestions."""

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from resource_health.db.repositories import SqlEquipmentStore, SqlInventoryStore, SqlRoster
from resource_health.health import (
    aggregate_supplies_health,
    calculate_maintenance_health,
    calculate_reorder_suggestions,
    enrich_device_supplies,
    health_class,
)

from .shared import console, health_style, logger, write_json_result


def build_report(devices, inventory, projects) -> dict:
    """Per-device health rows (worst of maintenance and supplies decides the class) plus reorders."""
    rows = []
    for device in devices:
        maintenance = calculate_maintenance_health(device.last_maintained, device.maintenance_days)
        supplies = enrich_device_supplies(device, inventory)
        supply_health = aggregate_supplies_health(supplies)
        rows.append(
            {
                "equipment_id": device.id,
                "name": device.name,
                "maintenance_health": maintenance,
                "supplies_health": supply_health,
                "health_class": health_class(min(maintenance, supply_health)),
                "tracked_supplies": len(supplies),
                "untracked_supplies": len(device.supplies) - len(supplies),
            }
        )
    suggestions = calculate_reorder_suggestions(inventory, devices, projects)
    return {"equipment": rows, "reorder_suggestions": [s.model_dump() for s in suggestions]}


def report(
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write the report as JSON"),
) -> None:
    """Print equipment health and reorder suggestions."""
    log = logger.bind(command="report")
    log.info("report.start")
    devices = SqlEquipmentStore().list_devices()
    if not devices:
        console.print("[red]No equipment found. Run `seed` first.[/red]")
        log.info("report.no_equipment")
        raise typer.Exit(1)
    data = build_report(devices, SqlInventoryStore().list_items(), SqlRoster().list_projects())

    table = Table(title="Equipment health")
    table.add_column("Device", style="cyan")
    table.add_column("Maintenance %", justify="right")
    table.add_column("Supplies %", justify="right")
    table.add_column("Class", justify="center")
    table.add_column("Untracked", justify="right")
    for row in data["equipment"]:
        style = health_style(row["health_class"])
        table.add_row(
            row["name"],
            str(row["maintenance_health"]),
            str(row["supplies_health"]),
            f"[{style}]{row['health_class']}[/{style}]",
            str(row["untracked_supplies"]),
        )
    console.print(table)

    suggestions = data["reorder_suggestions"]
    if suggestions:
        reorder = Table(title="Reorder suggestions")
        reorder.add_column("Item", style="cyan")
        reorder.add_column("Weeks left", justify="right")
        reorder.add_column("Order qty", justify="right")
        reorder.add_column("Priority", justify="center")
        reorder.add_column("Est. cost", justify="right")
        for s in suggestions:
            reorder.add_row(
                s["item_name"],
                f"{s['weeks_till_empty']:.1f}",
                str(s["suggested_order_qty"]),
                s["priority"],
                f"{s['estimated_cost']:.2f}",
            )
        console.print(reorder)
    else:
        console.print("[green]Nothing to reorder.[/green]")

    if output is not None:
        path = write_json_result(data, output)
        console.print(f"[green]Wrote {path}[/green]")
    log.info("report.done", devices=len(data["equipment"]), reorder_suggestions=len(suggestions))
