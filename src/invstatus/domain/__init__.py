from .models import (
    AccessContext,
    MaterialHealth,
    Notification,
    NotificationSection,
    Product,
    ProductionBatch,
    RawMaterial,
    RelatedData,
    Stage,
    StageProgress,
)
from .errors import AppError, ValidationError, NotFoundError, AuthorizationError, SnapshotError
from .stock import resolve_stock_status, resolve_material_health, format_stock_rolls
from .production import resolve_stage_progress
from .notifications import categorize_notifications, count_unread
from .activity_logs import categorize_activity_logs
from .activity_messages import format_activity_message

__all__ = [
    "AccessContext",
    "MaterialHealth",
    "Notification",
    "NotificationSection",
    "Product",
    "ProductionBatch",
    "RawMaterial",
    "RelatedData",
    "Stage",
    "StageProgress",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "AuthorizationError",
    "SnapshotError",
    "resolve_stock_status",
    "resolve_material_health",
    "format_stock_rolls",
    "resolve_stage_progress",
    "categorize_notifications",
    "count_unread",
    "categorize_activity_logs",
    "format_activity_message",
]
