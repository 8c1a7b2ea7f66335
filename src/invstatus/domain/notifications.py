from __future__ import annotations

from typing import Iterable

from invstatus.domain.enums import NotificationCategory
from invstatus.domain.models import Notification, NotificationSection

STOCK_TYPES = {"low_stock", "restock_request", "out_of_stock"}

SECTION_TITLES: dict[NotificationCategory, str] = {
    NotificationCategory.ORDERS: "Order Related",
    NotificationCategory.PRODUCTION: "Production Related",
    NotificationCategory.STOCK: "Stock Notifications",
    NotificationCategory.ACTIVITY_LOGS: "Activity Logs",
    NotificationCategory.OTHER: "Other Notifications",
}


def count_unread(notifications: Iterable[Notification]) -> int:
    return sum(1 for n in notifications if n.is_unread)


def get_notification_category(notification: Notification) -> NotificationCategory:
    if notification.is_activity_log:
        return NotificationCategory.ACTIVITY_LOGS
    if notification.module == "orders" or notification.type == "order_alert":
        return NotificationCategory.ORDERS
    if notification.module == "production" or notification.type == "production_request":
        return NotificationCategory.PRODUCTION
    if notification.type in STOCK_TYPES:
        return NotificationCategory.STOCK
    return NotificationCategory.OTHER


def categorize_notifications(notifications: Iterable[Notification]) -> list[NotificationSection]:
    """Group notifications into sections in the fixed category order.

    Input order is kept inside each section and categories with no
    notifications are left out.
    """
    buckets: dict[NotificationCategory, list[Notification]] = {c: [] for c in NotificationCategory}
    for notification in notifications:
        buckets[get_notification_category(notification)].append(notification)

    return [
        NotificationSection(
            category=category.value,
            title=SECTION_TITLES[category],
            notifications=tuple(items),
            unread_count=count_unread(items),
        )
        for category, items in buckets.items()
        if items
    ]
