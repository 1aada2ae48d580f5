"""Notification gating, recipients, payloads and delivery."""

from resource_health.notifications.payloads import (
    budget_exhausted_notification,
    critical_stock_notifications,
    low_budget_notification,
    low_stock_notifications,
)
from resource_health.notifications.recipients import MANAGER_ROLES, lab_managers
from resource_health.notifications.throttle import hours_since, should_notify
from resource_health.notifications.transport import (
    DbNotificationTransport,
    JsonFileTransport,
    NotificationTransport,
)

__all__ = [
    "should_notify",
    "hours_since",
    "lab_managers",
    "MANAGER_ROLES",
    "low_stock_notifications",
    "critical_stock_notifications",
    "low_budget_notification",
    "budget_exhausted_notification",
    "NotificationTransport",
    "JsonFileTransport",
    "DbNotificationTransport",
]
