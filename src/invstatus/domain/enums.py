"""
String enums for every status and category value derived in this package.

Members compare equal to their raw API strings, so a ``StockStatus`` can be
matched against ``"low-stock"`` directly.
"""

from enum import Enum


class StockStatus(str, Enum):
    IN_STOCK = "in-stock"
    LOW_STOCK = "low-stock"
    OUT_OF_STOCK = "out-of-stock"
    ACTIVE = "active"
    INACTIVE = "inactive"
    DISCONTINUED = "discontinued"


class Severity(str, Enum):
    """Colour band used for material stock health."""

    CRITICAL = "critical"
    WARNING = "warning"
    OK = "ok"
    INFO = "info"
    NEUTRAL = "neutral"


class ProductionStage(str, Enum):
    """Navigational stage of a production batch, in pipeline order."""

    PLANNING = "planning"
    MACHINE = "machine"
    WASTAGE = "wastage"
    INDIVIDUAL = "individual"


class StageStatus(str, Enum):
    COMPLETED = "completed"
    ACTIVE = "active"
    PENDING = "pending"


class NotificationCategory(str, Enum):
    ORDERS = "orders"
    PRODUCTION = "production"
    STOCK = "stock"
    ACTIVITY_LOGS = "activity_logs"
    OTHER = "other"


class ActivityCategory(str, Enum):
    MATERIAL = "material"
    PRODUCT = "product"
    ORDER = "order"
    CUSTOMER = "customer"
    SUPPLIER = "supplier"
    PRODUCTION = "production"
    OTHER = "other"
