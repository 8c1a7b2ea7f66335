from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from invstatus.domain.models import AccessContext
from invstatus.repositories.snapshot_repo import SnapshotRepository
from invstatus.services.access_service import AccessService
from invstatus.services.inventory_service import InventoryService
from invstatus.services.notification_service import NotificationService
from invstatus.services.production_service import ProductionService
from invstatus.services.reporting_service import ReportingService


@dataclass(frozen=True)
class AppContainer:
    repo: SnapshotRepository
    inventory: InventoryService
    production: ProductionService
    notifications: NotificationService
    reporting: ReportingService
    access: AccessService


def build_container(snapshot_path: Path | str, access: AccessContext | None = None) -> AppContainer:
    repo = SnapshotRepository(snapshot_path)

    inventory = InventoryService(repo)
    production = ProductionService(repo)
    notifications = NotificationService(repo)
    reporting = ReportingService(inventory, notifications)
    access_service = AccessService(access if access is not None else repo.load_access_context())

    return AppContainer(
        repo=repo,
        inventory=inventory,
        production=production,
        notifications=notifications,
        reporting=reporting,
        access=access_service,
    )
