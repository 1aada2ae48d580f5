"""Notification rows: insert (unread) and list."""

from typing import Optional

from sqlalchemy import select

from resource_health.db import get_session
from resource_health.db.models.notification import NotificationRow
from resource_health.models.outputs import NotificationPayload


def insert_notification(payload: NotificationPayload) -> int:
    """Insert one unread notification; returns its row id."""
    with get_session() as session:
        row = NotificationRow(**payload.model_dump(), read=False)
        session.add(row)
        session.flush()
        return row.id


def list_notifications(user_id: Optional[str] = None, unread_only: bool = False) -> list[NotificationPayload]:
    """Notifications oldest first, optionally for one user."""
    with get_session() as session:
        q = select(NotificationRow).order_by(NotificationRow.id)
        if user_id:
            q = q.where(NotificationRow.user_id == user_id)
        if unread_only:
            q = q.where(NotificationRow.read.is_(False))
        return [NotificationPayload.model_validate(r, from_attributes=True) for r in session.scalars(q).all()]
