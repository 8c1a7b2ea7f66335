"""
Readable one-line messages for activity-log notifications.

Material and purchase-order actions get tailored wording. Anything else
falls back to the logged description, or to a generic
"<resource> <verb>" line when the description is only request noise.
"""

from __future__ import annotations

import re
from typing import Any, Mapping

from invstatus.domain.models import Notification

_STATUS_NAMES = {
    "pending": "pending",
    "approved": "approved",
    "shipped": "shipped",
    "delivered": "delivered",
    "cancelled": "cancelled",
    "canceled": "cancelled",
}

_STATUS_VERBS = {
    "approved": "approved",
    "shipped": "shipped",
    "delivered": "delivered",
    "cancelled": "cancelled",
    "pending": "set to pending",
}


def _new_value(change: Any) -> Any:
    if isinstance(change, Mapping):
        return change.get("new") or change
    return change


def _material_message(user: str, action: str, name: str, changes: Mapping[str, Any]) -> str | None:
    if action == "MATERIAL_CREATE":
        return f'{user} added new material "{name}" to inventory'
    if action == "MATERIAL_UPDATE":
        key_changes = []
        if changes.get("name"):
            key_changes.append(f'name to "{_new_value(changes["name"])}"')
        if changes.get("current_stock"):
            key_changes.append(f"stock to {_new_value(changes['current_stock'])}")
        if changes.get("unit_price"):
            key_changes.append(f"price to ₹{_new_value(changes['unit_price'])}")
        if key_changes:
            return f'{user} updated material "{name}": {", ".join(key_changes)}'
        return f'{user} updated material "{name}"'
    if action == "MATERIAL_DELETE":
        return f'{user} removed material "{name}" from inventory'
    return None


def _order_number(metadata: Mapping[str, Any], target: str, description: str) -> str:
    number = metadata.get("order_number") or metadata.get("orderNumber") or target
    if number:
        return str(number)
    match = re.search(r"ON-\d+-\d+", description)
    if match:
        return match.group(0)
    match = re.search(r"order\s+([A-Z0-9-]+)", description, re.IGNORECASE)
    if match:
        return match.group(1)
    return "Order"


def _new_status(metadata: Mapping[str, Any], changes: Mapping[str, Any], description: str) -> str:
    status = (
        metadata.get("new_status")
        or metadata.get("status")
        or _new_value(changes.get("status"))
        or _new_value(changes.get("new_status"))
    )
    if status:
        return str(status)
    match = re.search(r'from\s+"?(\w+)"?\s+to\s+"?(\w+)"?', description, re.IGNORECASE)
    if match:
        return match.group(2)
    match = (
        re.search(r'status.*?to\s+"?(\w+)"?', description, re.IGNORECASE)
        or re.search(r'to\s+"?(\w+)"?', description, re.IGNORECASE)
    )
    return match.group(1) if match else ""


def _purchase_order_message(user: str, action: str, related) -> str | None:
    description = related.description
    metadata = related.metadata
    order_number = _order_number(metadata, related.target_resource, description)
    material = metadata.get("material_name") or metadata.get("materialName") or "Material"

    if action == "PURCHASE_ORDER_CREATE" or "CREATE" in action:
        return f"{user} created purchase order {order_number} for {material}"

    lowered = description.lower()
    status_change = (
        "STATUS_CHANGE" in action
        or ("status" in lowered and ("from" in lowered or "to" in lowered))
    )
    if status_change:
        new_status = _new_status(metadata, related.changes, description)
        friendly = _STATUS_NAMES.get(new_status.lower(), new_status) if new_status else "updated"
        verb = _STATUS_VERBS.get(friendly, f"updated status to {friendly}")
        return f"{user} {verb} purchase order {order_number}"

    if action == "PURCHASE_ORDER_UPDATE":
        return f"{user} updated purchase order {order_number}"
    if action == "PURCHASE_ORDER_DELETE":
        return f"{user} cancelled purchase order {order_number}"
    return None


def format_activity_message(notification: Notification) -> str:
    related = notification.related_data
    action = related.action
    category = related.action_category
    user = related.user_name or "User"

    if category == "MATERIAL" or "MATERIAL_" in action:
        name = related.metadata.get("material_name") or related.target_resource or "Material"
        message = _material_message(user, action, str(name), related.changes)
        if message:
            return message

    is_purchase_order = (
        category == "PURCHASE_ORDER"
        or "PURCHASE_ORDER" in action
        or action == "PurchaseOrder"
        or "purchase order" in related.description.lower()
    )
    if is_purchase_order:
        message = _purchase_order_message(user, action, related)
        if message:
            return message

    description = related.description
    if description and description != "Action" and "POST /" not in description and "GET /" not in description:
        return description

    if "CREATE" in action:
        verb = "created"
    elif "UPDATE" in action:
        verb = "updated"
    elif "DELETE" in action:
        verb = "deleted"
    else:
        verb = "modified"

    if category == "MATERIAL":
        resource = "material"
    elif category == "PURCHASE_ORDER":
        resource = "purchase order"
    else:
        resource = category.lower() or "item"
    return f"{resource} {verb}"
