import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


SNAPSHOT = {
    "user": {"id": "u1", "name": "Asha", "role": "operator"},
    "permissions": {
        "products": {"view": True, "create": True, "edit": True, "delete": False},
        "materials": {"view": True, "delete": "yes"},
    },
    "products": {
        "data": [
            {"id": "P1", "name": "Carpet Roll A", "current_stock": 12, "min_stock_level": 5, "status": "active"},
            {"id": "P2", "name": "Carpet Roll B", "current_stock": 3, "min_stock_level": 5, "status": "active"},
            {"id": "P3", "name": "Carpet Roll C", "current_stock": 0, "min_stock_level": 5, "status": "in-stock"},
            {"id": "P4", "name": "Old Roll", "current_stock": 0, "min_stock_level": 5, "status": "discontinued"},
        ],
        "total": 4,
    },
    "raw_materials": [
        {"id": "M1", "name": "Latex", "unit": "kg", "current_stock": 0,
         "min_threshold": 10, "reorder_point": 50, "max_capacity": 1000},
        {"id": "M2", "name": "Jute", "unit": "m", "current_stock": 5,
         "min_threshold": 10, "reorder_point": 50, "max_capacity": 1000},
        {"id": "M3", "name": "Wool", "unit": "kg", "current_stock": 300,
         "min_threshold": 10, "reorder_point": 50, "max_capacity": 1000},
        {"id": "M4", "name": "Dye", "unit": "l", "current_stock": 1200,
         "min_threshold": 10, "reorder_point": 50, "max_capacity": 1000},
        {"id": "M5", "name": "Thread", "unit": "m", "current_stock": 20,
         "min_threshold": 10, "reorder_point": 50, "max_capacity": 1000},
    ],
    "production": [
        {"id": "B1", "batch_number": "BATCH-001", "status": "in_production"},
        {"id": "B2", "batch_number": "BATCH-002", "status": "planned"},
    ],
    "notifications": [
        {"id": "N1", "type": "order_alert", "module": "orders", "status": "unread", "title": "New order"},
        {"id": "N2", "type": "low_stock", "module": "materials", "status": "unread", "title": "Latex low"},
        {"id": "N3", "type": "production_request", "module": "production", "status": "read"},
        {"id": "N4", "type": "activity_log", "module": "orders", "status": "unread",
         "related_data": {"activity_log_id": "A1", "action": "PURCHASE_ORDER_CREATE",
                          "action_category": "PURCHASE_ORDER"}},
        {"id": "N5", "type": "activity_log", "module": "products", "status": "read",
         "related_data": {"activity_log_id": "A2", "action": "PRODUCT_UPDATE", "action_category": "PRODUCT"}},
        {"id": "N6", "type": "activity_log", "module": "activity", "status": "unread",
         "related_data": {"activity_log_id": "A3", "action": "MATERIAL_CREATE", "action_category": "MATERIAL"}},
        {"id": "N7", "type": "info", "module": "activity", "status": "dismissed", "title": "Welcome"},
    ],
}


@pytest.fixture
def snapshot_path(tmp_path: Path) -> Path:
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(SNAPSHOT), encoding="utf-8")
    return path
