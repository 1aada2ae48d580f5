"""check-stock command: record a stock count and alert managers."""

from typing import Optional

import typer

from resource_health.alerts import RecordNotFoundError
from resource_health.utils.logger import bind_context, clear_context

from .shared import console, get_transport, logger, stock_service


def check_stock(
    item_id: str = typer.Argument(..., help="Inventory item id"),
    quantity: float = typer.Argument(..., help="Counted quantity on the shelf"),
    burn: Optional[float] = typer.Option(None, "--burn", help="Weekly burn of the supply being checked"),
    transport: str = typer.Option("json", "--transport", "-t", help="Notification transport: json or db"),
) -> None:
    """Record a stock count for ITEM_ID and notify lab managers if stock is low."""
    log = logger.bind(command="check-stock", item_id=item_id)
    bind_context(command="check-stock", item_id=item_id)
    try:
        result = stock_service(get_transport(transport)).record_stock_check(item_id, quantity, burn)
    except RecordNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        log.error("check_stock.not_found")
        raise typer.Exit(1) from e
    finally:
        clear_context()

    item = result.item
    console.print(f"[bold]{item.product_name}[/bold]: {item.current_quantity:g} units ({item.inventory_level})")
    console.print(f"  Weeks remaining: {result.weeks_remaining:.1f}")
    if result.alert is None:
        console.print("[green]  Stock OK, no alert.[/green]")
    else:
        colour = "red" if result.alert == "critical" else "yellow"
        console.print(
            f"[{colour}]  {result.alert} alert: {result.dispatched}/{result.recipients} notifications sent[/{colour}]"
        )
    log.info("check_stock.done", alert=result.alert, dispatched=result.dispatched)
