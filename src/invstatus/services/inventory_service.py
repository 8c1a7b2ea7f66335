from __future__ import annotations

import logging

from invstatus.domain.enums import Severity, StockStatus
from invstatus.domain.models import MaterialHealth, Product, RawMaterial
from invstatus.domain.stock import resolve_material_health, resolve_stock_status

log = logging.getLogger(__name__)


class InventoryService:
    def __init__(self, repo):
        self.repo = repo

    def list_products(self) -> list[Product]:
        return self.repo.list_products()

    def list_raw_materials(self) -> list[RawMaterial]:
        return self.repo.list_raw_materials()

    def product_statuses(self) -> list[tuple[Product, StockStatus]]:
        return [(p, resolve_stock_status(p)) for p in self.list_products()]

    def material_health(self) -> list[tuple[RawMaterial, MaterialHealth]]:
        return [(m, resolve_material_health(m)) for m in self.list_raw_materials()]

    def materials_needing_attention(self) -> list[tuple[RawMaterial, MaterialHealth]]:
        flagged = [
            (m, h) for m, h in self.material_health()
            if h.severity in (Severity.CRITICAL, Severity.WARNING)
        ]
        # critical first, then lowest stock
        flagged.sort(key=lambda mh: (mh[1].severity is not Severity.CRITICAL, mh[0].current_stock))
        return flagged

    def product_summary(self) -> dict[str, int]:
        statuses = [s for _p, s in self.product_statuses()]
        summary = {
            "total": len(statuses),
            "in_stock": statuses.count(StockStatus.IN_STOCK),
            "low_stock": statuses.count(StockStatus.LOW_STOCK),
            "out_of_stock": statuses.count(StockStatus.OUT_OF_STOCK),
            "inactive": sum(1 for s in statuses if s in (StockStatus.INACTIVE, StockStatus.DISCONTINUED)),
        }
        log.info(
            "product_summary total=%s low_stock=%s out_of_stock=%s",
            summary["total"], summary["low_stock"], summary["out_of_stock"],
        )
        return summary

    def material_summary(self) -> dict[str, int]:
        severities = [h.severity for _m, h in self.material_health()]
        summary = {
            "total": len(severities),
            "low_stock": severities.count(Severity.WARNING),
            "out_of_stock": severities.count(Severity.CRITICAL),
            "overstock": severities.count(Severity.INFO),
        }
        log.info(
            "material_summary total=%s low_stock=%s out_of_stock=%s",
            summary["total"], summary["low_stock"], summary["out_of_stock"],
        )
        return summary
