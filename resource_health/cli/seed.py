"""Seed command: load the demo lab into the database."""

import typer
from sqlalchemy import select

from resource_health.config import DATABASE_URL
from resource_health.db import get_session, reset_db
from resource_health.db.models.inventory import InventoryItemRow
from resource_health.db.seed_data import seed_demo_data

from .shared import console, logger


def seed(
    reset: bool = typer.Option(False, "--reset", help="Drop and recreate all tables first"),
) -> None:
    """Load demo devices, consumables, budgets and staff."""
    log = logger.bind(command="seed", reset=reset)
    log.info("seed.start", database_url=DATABASE_URL)
    if reset:
        reset_db()
    with get_session() as session:
        if session.scalars(select(InventoryItemRow.id)).first() is not None:
            console.print("[yellow]Database already has data. Use --reset to reseed.[/yellow]")
            log.info("seed.skipped_not_empty")
            raise typer.Exit(1)
        seed_demo_data(session)
    console.print(f"[green]Seeded demo data into {DATABASE_URL}[/green]")
    log.info("seed.done")
