import copy

from invstatus.domain.activity_logs import categorize_activity_logs, get_activity_category
from invstatus.domain.enums import ActivityCategory, NotificationCategory
from invstatus.domain.models import Notification
from invstatus.domain.notifications import categorize_notifications, count_unread, get_notification_category


def _n(id, type="info", module="activity", status="read", **related):
    return Notification.from_record(
        {"id": id, "type": type, "module": module, "status": status, "related_data": related or None}
    )


def test_notification_category_precedence():
    assert get_notification_category(_n("a", module="orders", activity_log_id="L1")) is NotificationCategory.ACTIVITY_LOGS
    assert get_notification_category(_n("b", type="order_alert")) is NotificationCategory.ORDERS
    assert get_notification_category(_n("c", module="orders", type="low_stock")) is NotificationCategory.ORDERS
    assert get_notification_category(_n("d", type="production_request")) is NotificationCategory.PRODUCTION
    assert get_notification_category(_n("e", type="out_of_stock")) is NotificationCategory.STOCK
    assert get_notification_category(_n("f", type="restock_request")) is NotificationCategory.STOCK
    assert get_notification_category(_n("g")) is NotificationCategory.OTHER


def test_sections_follow_fixed_order_and_drop_empty():
    items = [
        _n("1"),
        _n("2", type="low_stock", status="unread"),
        _n("3", module="orders", status="unread"),
        _n("4", type="low_stock"),
    ]
    sections = categorize_notifications(items)

    assert [s.category for s in sections] == ["orders", "stock", "other"]
    assert [s.title for s in sections] == ["Order Related", "Stock Notifications", "Other Notifications"]
    assert all(s.notifications for s in sections)
    stock = sections[1]
    assert [n.id for n in stock.notifications] == ["2", "4"]
    assert stock.unread_count == 1


def test_sections_partition_the_input():
    items = [
        _n("1", module="orders"),
        _n("2", module="production", status="unread"),
        _n("3", type="low_stock"),
        _n("4", activity_log_id="L1"),
        _n("5"),
        _n("6", type="order_alert", status="unread"),
    ]
    sections = categorize_notifications(items)
    ids = [n.id for s in sections for n in s.notifications]
    assert sorted(ids) == sorted(n.id for n in items)
    assert len(ids) == len(set(ids))
    assert sum(s.unread_count for s in sections) == count_unread(items) == 2


def test_empty_input_gives_no_sections():
    assert categorize_notifications([]) == []
    assert categorize_activity_logs([]) == []


def test_purchase_order_logged_under_orders_is_material():
    log = _n("po", module="orders", activity_log_id="L9", action="PURCHASE_ORDER_CREATE")
    assert get_activity_category(log) is ActivityCategory.MATERIAL


def test_activity_category_rules():
    assert get_activity_category(_n("a", module="orders", action="SHIPMENT")) is ActivityCategory.ORDER
    assert get_activity_category(_n("b", action="ORDER_CREATE")) is ActivityCategory.ORDER
    assert get_activity_category(_n("c", action_category="PRODUCT")) is ActivityCategory.PRODUCT
    assert get_activity_category(_n("d", module="products")) is ActivityCategory.PRODUCT
    assert get_activity_category(_n("e", action="CUSTOMER_UPDATE")) is ActivityCategory.CUSTOMER
    assert get_activity_category(_n("f", action_category="CLIENT")) is ActivityCategory.CUSTOMER
    assert get_activity_category(_n("g", action="SUPPLIER_DELETE")) is ActivityCategory.SUPPLIER
    assert get_activity_category(_n("h", action="RECIPE_CREATE")) is ActivityCategory.PRODUCTION
    assert get_activity_category(_n("i", module="production")) is ActivityCategory.PRODUCTION
    assert get_activity_category(_n("j", module="materials")) is ActivityCategory.MATERIAL
    assert get_activity_category(_n("k", action="LOGIN")) is ActivityCategory.OTHER
    assert get_activity_category(_n("l")) is ActivityCategory.OTHER


def test_activity_keywords_match_anywhere_in_the_action():
    recipe_material = _n("a", action="RECIPE_MATERIAL_ADD", action_category="RECIPE")
    assert get_activity_category(recipe_material) is ActivityCategory.MATERIAL
    assert get_activity_category(_n("b", action="BULK_MATERIAL_UPDATE")) is ActivityCategory.MATERIAL
    assert get_activity_category(_n("c", action="CUSTOMER_ORDER_CREATE")) is ActivityCategory.ORDER
    assert get_activity_category(_n("d", action="BATCH_PRODUCTION_START")) is ActivityCategory.PRODUCTION
    assert get_activity_category(_n("e", action="BULK_PURCHASE_ORDER_APPROVE", module="orders")) is ActivityCategory.MATERIAL


def test_activity_sections_sorted_by_unread_then_size():
    items = [
        _n("1", action="PRODUCT_UPDATE"),
        _n("2", action="PRODUCT_CREATE"),
        _n("3", action="PRODUCT_DELETE"),
        _n("4", action="SUPPLIER_CREATE", status="unread"),
        _n("5", action="MATERIAL_CREATE"),
        _n("6", action="LOGIN"),
        _n("7", action="LOGOUT"),
    ]
    sections = categorize_activity_logs(items)

    assert [s.category for s in sections] == ["supplier", "product", "other", "material"]
    assert sections[0].unread_count == 1
    assert sections[2].title == "Other Activities"


def test_activity_sections_ties_keep_declared_order():
    items = [_n("1", action="SUPPLIER_CREATE"), _n("2", action="MATERIAL_CREATE")]
    assert [s.category for s in categorize_activity_logs(items)] == ["material", "supplier"]


def test_categorizers_are_repeatable_and_leave_input_untouched():
    items = [
        _n("1", module="orders", status="unread"),
        _n("2", activity_log_id="L1", action="ORDER_CREATE"),
        _n("3", activity_log_id="L2", action="MATERIAL_UPDATE", status="unread"),
    ]
    before = copy.deepcopy(items)

    assert categorize_notifications(items) == categorize_notifications(items)
    assert categorize_activity_logs(items) == categorize_activity_logs(items)
    assert items == before
