"""Shared CLI helpers: console, logger, store and transport factories, result formatting."""

import json
from pathlib import Path

import typer
from rich.console import Console

from resource_health.alerts import BudgetAlertService, StockAlertService
from resource_health.config import NOTIFICATIONS_PATH, OUTPUT_DIR
from resource_health.db.repositories import (
    SqlEquipmentStore,
    SqlFundingStore,
    SqlInventoryStore,
    SqlRoster,
)
from resource_health.notifications.transport import (
    DbNotificationTransport,
    JsonFileTransport,
    NotificationTransport,
)
from resource_health.utils.logger import get_logger

console = Console()
logger = get_logger("resource_health.cli")

TRANSPORTS = ("json", "db")


def get_transport(kind: str, path: Path | None = None) -> NotificationTransport:
    """Return the notification transport for --transport (json file or notifications table)."""
    if kind == "db":
        return DbNotificationTransport()
    if kind == "json":
        return JsonFileTransport(path or NOTIFICATIONS_PATH)
    console.print(f"[red]Unknown transport {kind!r}. Use one of: {', '.join(TRANSPORTS)}[/red]")
    raise typer.Exit(1)


def stock_service(transport: NotificationTransport) -> StockAlertService:
    return StockAlertService(SqlInventoryStore(), SqlEquipmentStore(), SqlRoster(), transport)


def budget_service(transport: NotificationTransport) -> BudgetAlertService:
    return BudgetAlertService(SqlFundingStore(), transport)


def write_json_result(result_dict: dict, path: Path | None = None) -> Path:
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    path = path or OUTPUT_DIR / "report.json"
    with path.open("w", encoding="utf-8") as f:
        json.dump(result_dict, f, indent=2, default=str)
    logger.info("results.write_json", path=str(path))
    return path


def health_style(health_class: str) -> str:
    """Rich colour for a health class."""
    return {"critical": "red", "warning": "yellow"}.get(health_class, "green")
