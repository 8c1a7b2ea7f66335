from __future__ import annotations

from typing import Iterable

from invstatus.domain.enums import ActivityCategory
from invstatus.domain.models import Notification, NotificationSection
from invstatus.domain.notifications import count_unread

SECTION_TITLES: dict[ActivityCategory, str] = {
    ActivityCategory.MATERIAL: "Material",
    ActivityCategory.PRODUCT: "Product",
    ActivityCategory.ORDER: "Order",
    ActivityCategory.CUSTOMER: "Customer",
    ActivityCategory.SUPPLIER: "Supplier",
    ActivityCategory.PRODUCTION: "Production",
    ActivityCategory.OTHER: "Other Activities",
}


def get_activity_category(notification: Notification) -> ActivityCategory:
    """Map an activity-log notification to the domain it touched.

    Keywords may appear anywhere in the action name. The material check
    must run before the order check: purchase orders are material activity
    even when logged under the ``orders`` module.
    """
    action = notification.related_data.action
    action_category = notification.related_data.action_category
    module = notification.module

    if (
        action_category in ("MATERIAL", "PURCHASE_ORDER")
        or "MATERIAL_" in action or "PURCHASE_ORDER_" in action
        or module == "materials"
    ):
        return ActivityCategory.MATERIAL
    if action_category == "PRODUCT" or "PRODUCT_" in action or module == "products":
        return ActivityCategory.PRODUCT
    if (
        action_category == "ORDER"
        or "ORDER_" in action
        or (module == "orders" and "PURCHASE_ORDER" not in action)
    ):
        return ActivityCategory.ORDER
    if action_category == "CLIENT" or "CLIENT_" in action or "CUSTOMER_" in action:
        return ActivityCategory.CUSTOMER
    if "SUPPLIER_" in action:
        return ActivityCategory.SUPPLIER
    if (
        action_category in ("RECIPE", "PRODUCTION")
        or "RECIPE_" in action or "PRODUCTION_" in action
        or module == "production"
    ):
        return ActivityCategory.PRODUCTION
    return ActivityCategory.OTHER


def categorize_activity_logs(notifications: Iterable[Notification]) -> list[NotificationSection]:
    """Group activity logs by domain, busiest sections first.

    Unlike ``categorize_notifications`` the sections are sorted by unread
    count, then by size. Ties keep the declared category order.
    """
    buckets: dict[ActivityCategory, list[Notification]] = {c: [] for c in ActivityCategory}
    for notification in notifications:
        buckets[get_activity_category(notification)].append(notification)

    sections = [
        NotificationSection(
            category=category.value,
            title=SECTION_TITLES[category],
            notifications=tuple(items),
            unread_count=count_unread(items),
        )
        for category, items in buckets.items()
        if items
    ]
    return sorted(sections, key=lambda s: (-s.unread_count, -len(s.notifications)))
