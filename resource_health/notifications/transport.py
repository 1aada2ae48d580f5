"""Notification delivery: protocol plus a JSON-file mock and a database-backed transport."""

import json
from pathlib import Path
from typing import Any, Protocol

from resource_health.config import NOTIFICATIONS_PATH
from resource_health.db.repositories.notification_repo import insert_notification
from resource_health.health.numeric import utc_now_iso
from resource_health.models.outputs import NotificationPayload
from resource_health.utils.logger import get_logger

logger = get_logger("resource_health.notifications.transport")


class NotificationTransport(Protocol):
    """Abstract interface for delivering one notification to one user."""

    def send(self, payload: NotificationPayload) -> None:
        """Deliver the payload. Raises on failure; callers decide whether to suppress."""
        ...


class JsonFileTransport:
    """Mock delivery: payloads appended to a JSON list on disk."""

    def __init__(self, path: Path = NOTIFICATIONS_PATH):
        self._path = Path(path)
        logger.debug("transport.json.init", path=str(self._path))

    def _load(self) -> list[dict[str, Any]]:
        if not self._path.exists():
            return []
        with self._path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        return data if isinstance(data, list) else data.get("value", [])

    def _save(self, items: list[dict[str, Any]]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", encoding="utf-8") as f:
            json.dump(items, f, indent=2, default=str)

    def sent(self) -> list[NotificationPayload]:
        """Everything delivered so far, oldest first."""
        return [NotificationPayload.model_validate(item) for item in self._load()]

    def send(self, payload: NotificationPayload) -> None:
        items = self._load()
        record = payload.model_dump()
        record["read"] = False
        record["created_at"] = utc_now_iso()
        items.append(record)
        self._save(items)
        logger.info(
            "transport.json.sent",
            user_id=payload.user_id,
            type=payload.type,
            count=len(items),
            path=str(self._path),
        )


class DbNotificationTransport:
    """Delivery into the notifications table (unread)."""

    def send(self, payload: NotificationPayload) -> None:
        row_id = insert_notification(payload)
        logger.info("transport.db.sent", user_id=payload.user_id, type=payload.type, notification_id=row_id)
