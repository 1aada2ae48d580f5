"""Validate threshold config: check consistency, print summary table."""

import typer
from rich.table import Table

from resource_health import config

from .shared import console, logger

_SHOWN = (
    "DATABASE_URL",
    "SUPPLY_CRITICAL_WEEKS",
    "SUPPLY_COMFORTABLE_WEEKS",
    "LOW_STOCK_ALERT_WEEKS",
    "REORDER_HORIZON_WEEKS",
    "REORDER_BUFFER_WEEKS",
    "HEALTH_CRITICAL_PERCENT",
    "HEALTH_WARNING_PERCENT",
    "BUDGET_HIGH_PRIORITY_BELOW_PERCENT",
    "BUDGET_MEDIUM_PRIORITY_BELOW_PERCENT",
    "LOW_BALANCE_WARNING_PERCENT",
    "LOW_BUDGET_THROTTLE_HOURS",
    "NOTIFICATIONS_PATH",
    "OTEL_ENABLED",
)


def config_errors() -> list[str]:
    """Inconsistent threshold combinations in the loaded config."""
    errors = []
    if config.SUPPLY_COMFORTABLE_WEEKS <= config.SUPPLY_CRITICAL_WEEKS:
        errors.append("SUPPLY_COMFORTABLE_WEEKS must be greater than SUPPLY_CRITICAL_WEEKS")
    if config.HEALTH_WARNING_PERCENT <= config.HEALTH_CRITICAL_PERCENT:
        errors.append("HEALTH_WARNING_PERCENT must be greater than HEALTH_CRITICAL_PERCENT")
    if config.BUDGET_MEDIUM_PRIORITY_BELOW_PERCENT <= config.BUDGET_HIGH_PRIORITY_BELOW_PERCENT:
        errors.append("BUDGET_MEDIUM_PRIORITY_BELOW_PERCENT must be greater than BUDGET_HIGH_PRIORITY_BELOW_PERCENT")
    if config.LOW_BUDGET_THROTTLE_HOURS < 0:
        errors.append("LOW_BUDGET_THROTTLE_HOURS cannot be negative")
    if config.REORDER_HORIZON_WEEKS <= 0:
        errors.append("REORDER_HORIZON_WEEKS must be positive")
    return errors


def validate_config() -> None:
    """Check threshold config and print the effective values."""
    log = logger.bind(command="validate-config")
    log.info("validate_config.start")

    errors = config_errors()
    if errors:
        for msg in errors:
            console.print(f"[red]{msg}[/red]")
        log.error("validate_config.validation_failed", errors=errors)
        raise typer.Exit(1)

    table = Table(title="Effective configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    for name in _SHOWN:
        table.add_row(name, str(getattr(config, name)))
    console.print(table)
    console.print("[green]Config valid.[/green]")
    log.info("validate_config.ok")
