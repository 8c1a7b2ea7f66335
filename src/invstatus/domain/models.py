from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from invstatus.domain.enums import (
    ProductionStage,
    Severity,
    StageStatus,
)


def _num(value: Any) -> float:
    """Coerce an API number to float; missing or malformed values become 0."""
    if value is None or value == "" or isinstance(value, bool):
        return 0.0
    try:
        result = float(value)
    except (TypeError, ValueError):
        return 0.0
    return result if math.isfinite(result) else 0.0


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _record(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    current_stock: float
    min_stock_level: float
    status: str = ""

    @classmethod
    def from_record(cls, data: Mapping[str, Any]) -> "Product":
        return cls(
            id=_text(data.get("id") or data.get("_id")),
            name=_text(data.get("name")),
            current_stock=_num(data.get("current_stock")),
            min_stock_level=_num(data.get("min_stock_level")),
            status=_text(data.get("status")),
        )


@dataclass(frozen=True)
class RawMaterial:
    id: str
    name: str
    current_stock: float
    min_threshold: float
    reorder_point: float
    max_capacity: float
    unit: str = ""

    @classmethod
    def from_record(cls, data: Mapping[str, Any]) -> "RawMaterial":
        return cls(
            id=_text(data.get("id") or data.get("_id")),
            name=_text(data.get("name")),
            current_stock=_num(data.get("current_stock")),
            min_threshold=_num(data.get("min_threshold")),
            reorder_point=_num(data.get("reorder_point")),
            max_capacity=_num(data.get("max_capacity")),
            unit=_text(data.get("unit")),
        )


@dataclass(frozen=True)
class ProductionBatch:
    id: str
    batch_number: str
    status: str

    @classmethod
    def from_record(cls, data: Mapping[str, Any]) -> "ProductionBatch":
        return cls(
            id=_text(data.get("id") or data.get("_id")),
            batch_number=_text(data.get("batch_number")),
            status=_text(data.get("status")),
        )


@dataclass(frozen=True)
class RelatedData:
    activity_log_id: Optional[str] = None
    action: str = ""
    action_category: str = ""
    description: str = ""
    user_name: str = ""
    target_resource: str = ""
    metadata: Mapping[str, Any] = field(default_factory=dict)
    changes: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_record(cls, data: Any) -> "RelatedData":
        data = _record(data)
        log_id = data.get("activity_log_id")
        return cls(
            activity_log_id=_text(log_id) if log_id else None,
            action=_text(data.get("action")),
            action_category=_text(data.get("action_category")),
            description=_text(data.get("description")),
            user_name=_text(data.get("user_name")),
            target_resource=_text(data.get("target_resource")),
            metadata=dict(_record(data.get("metadata"))),
            changes=dict(_record(data.get("changes"))),
        )


@dataclass(frozen=True)
class Notification:
    id: str
    type: str
    module: str
    status: str
    title: str = ""
    message: str = ""
    created_at: str = ""
    related_data: RelatedData = field(default_factory=RelatedData)

    @property
    def is_activity_log(self) -> bool:
        return bool(self.related_data.activity_log_id)

    @property
    def is_unread(self) -> bool:
        return self.status == "unread"

    @classmethod
    def from_record(cls, data: Mapping[str, Any]) -> "Notification":
        return cls(
            id=_text(data.get("id") or data.get("_id")),
            type=_text(data.get("type")),
            module=_text(data.get("module")),
            status=_text(data.get("status")),
            title=_text(data.get("title")),
            message=_text(data.get("message")),
            created_at=_text(data.get("created_at")),
            related_data=RelatedData.from_record(data.get("related_data")),
        )


@dataclass(frozen=True)
class AccessContext:
    """Signed-in user's role and per-module permission flags."""

    role: str = ""
    permissions: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_records(cls, user: Any, permissions: Any) -> "AccessContext":
        user = _record(user)
        perms = {
            str(module): dict(flags)
            for module, flags in _record(permissions).items()
            if isinstance(flags, Mapping)
        }
        return cls(role=_text(user.get("role")), permissions=perms)


@dataclass(frozen=True)
class MaterialHealth:
    severity: Severity
    message: str
    icon: str


@dataclass(frozen=True)
class Stage:
    id: ProductionStage
    name: str
    status: StageStatus


@dataclass(frozen=True)
class StageProgress:
    stages: tuple[Stage, ...]
    overall_percent: int
    current_name: str


@dataclass(frozen=True)
class NotificationSection:
    category: str
    title: str
    notifications: tuple[Notification, ...]
    unread_count: int
