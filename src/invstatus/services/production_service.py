from __future__ import annotations

import logging

from invstatus.domain.enums import ProductionStage
from invstatus.domain.errors import NotFoundError
from invstatus.domain.models import ProductionBatch, StageProgress
from invstatus.domain.production import resolve_stage_progress

log = logging.getLogger(__name__)


class ProductionService:
    def __init__(self, repo):
        self.repo = repo

    def list_batches(self) -> list[ProductionBatch]:
        return self.repo.list_batches()

    def get_batch(self, batch_id: str) -> ProductionBatch:
        batch = self.repo.get_batch(str(batch_id).strip())
        if not batch:
            raise NotFoundError(f"Production batch '{batch_id}' not found.")
        return batch

    def stage_progress(self, batch_id: str, stage: ProductionStage | str) -> tuple[ProductionBatch, StageProgress]:
        """Progress for a batch at the stage the calling view says it is in."""
        batch = self.get_batch(batch_id)
        progress = resolve_stage_progress(stage)
        log.info(
            "stage_progress batch=%s status=%s stage=%r percent=%s",
            batch.batch_number or batch.id, batch.status, progress.current_name, progress.overall_percent,
        )
        return batch, progress
