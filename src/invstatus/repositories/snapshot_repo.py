from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from invstatus.domain.errors import SnapshotError
from invstatus.domain.models import AccessContext, Notification, Product, ProductionBatch, RawMaterial

log = logging.getLogger(__name__)


class SnapshotRepository:
    """Read-only access to a JSON export of the backend API.

    The document is a single object. List keys (``products``,
    ``raw_materials``, ``production``, ``notifications``) hold either a bare
    list of records or the API envelope ``{"data": [...]}``. ``user`` and
    ``permissions`` carry the signed-in user's access.
    """

    def __init__(self, snapshot_path: Path | str):
        self.snapshot_path = Path(snapshot_path)
        self._doc: Optional[dict] = None

    def _load(self) -> dict:
        if self._doc is not None:
            return self._doc
        try:
            doc = json.loads(self.snapshot_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise SnapshotError(f"Could not read snapshot '{self.snapshot_path}': {exc}") from exc
        if not isinstance(doc, dict):
            raise SnapshotError(f"Snapshot '{self.snapshot_path}' must contain a JSON object.")
        log.info("snapshot_loaded path=%s keys=%s", self.snapshot_path, ",".join(sorted(doc)))
        self._doc = doc
        return doc

    def _records(self, key: str) -> list[dict[str, Any]]:
        value = self._load().get(key)
        if isinstance(value, dict):
            value = value.get("data")
        if not isinstance(value, list):
            return []
        rows = [r for r in value if isinstance(r, dict)]
        if len(rows) != len(value):
            log.warning("snapshot_skipped_rows key=%s skipped=%s", key, len(value) - len(rows))
        return rows

    def list_products(self) -> list[Product]:
        return [Product.from_record(r) for r in self._records("products")]

    def list_raw_materials(self) -> list[RawMaterial]:
        return [RawMaterial.from_record(r) for r in self._records("raw_materials")]

    def list_batches(self) -> list[ProductionBatch]:
        return [ProductionBatch.from_record(r) for r in self._records("production")]

    def get_batch(self, batch_id: str) -> Optional[ProductionBatch]:
        for batch in self.list_batches():
            if batch.id == batch_id or batch.batch_number == batch_id:
                return batch
        return None

    def list_notifications(self) -> list[Notification]:
        return [Notification.from_record(r) for r in self._records("notifications")]

    def load_access_context(self) -> AccessContext:
        doc = self._load()
        return AccessContext.from_records(doc.get("user"), doc.get("permissions"))
