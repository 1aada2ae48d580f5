"""check-budget command: low-balance and exhausted-budget warnings."""

import typer

from resource_health.alerts import RecordNotFoundError
from resource_health.db.repositories import SqlRoster
from resource_health.utils.logger import bind_context, clear_context

from .shared import budget_service, console, get_transport, logger


def check_budget(
    allocation_id: str = typer.Argument(..., help="Funding allocation id"),
    user_id: str = typer.Argument(..., help="User to notify"),
    transport: str = typer.Option("json", "--transport", "-t", help="Notification transport: json or db"),
) -> None:
    """Check ALLOCATION_ID and warn USER_ID if the budget is low or exhausted."""
    log = logger.bind(command="check-budget", allocation_id=allocation_id, user_id=user_id)
    user = SqlRoster().get_profile(user_id)
    if user is None:
        console.print(f"[red]User {user_id} not found[/red]")
        log.error("check_budget.user_not_found")
        raise typer.Exit(1)
    bind_context(command="check-budget", allocation_id=allocation_id)
    try:
        result = budget_service(get_transport(transport)).check_allocation(allocation_id, user)
    except RecordNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        log.error("check_budget.not_found")
        raise typer.Exit(1) from e
    finally:
        clear_context()

    name = result.allocation.funding_account_name or allocation_id
    console.print(f"[bold]{name}[/bold]: {result.percent_remaining:.1f}% remaining (priority {result.priority})")
    if result.throttled:
        console.print("[dim]  Low balance already reported recently, skipped.[/dim]")
    elif result.notification_type is None:
        console.print("[green]  Budget OK, no warning.[/green]")
    elif result.dispatched:
        console.print(f"[yellow]  Sent {result.notification_type} to {user.first_name} {user.last_name}[/yellow]")
    else:
        console.print(f"[red]  {result.notification_type} could not be delivered[/red]")
    log.info(
        "check_budget.done",
        notification_type=result.notification_type,
        throttled=result.throttled,
        dispatched=result.dispatched,
    )
