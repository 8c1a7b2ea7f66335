from .access_service import AccessService
from .inventory_service import InventoryService
from .notification_service import NotificationService
from .production_service import ProductionService
from .reporting_service import ReportingService

__all__ = [
    "AccessService",
    "InventoryService",
    "NotificationService",
    "ProductionService",
    "ReportingService",
]
