import json
import logging
import sys
from pathlib import Path

import pytest

from invstatus.config import get_app_paths
from invstatus.logging_config import JsonFormatter


@pytest.mark.skipif(sys.platform.startswith("win") or sys.platform == "darwin", reason="home-dir layout")
def test_app_paths_are_created_under_home(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    paths = get_app_paths("StatusTest")

    assert paths.base_dir == tmp_path / ".statustest"
    assert paths.logs_dir.is_dir()
    assert paths.exports_dir.is_dir()


def test_json_formatter_emits_one_object_per_record():
    record = logging.LogRecord(
        name="invstatus.notifications", level=logging.INFO, pathname=__file__, lineno=1,
        msg="notification_sections %s", args=("orders=1/1",), exc_info=None,
    )
    payload = json.loads(JsonFormatter(datefmt="%Y-%m-%d %H:%M:%S").format(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "invstatus.notifications"
    assert payload["message"] == "notification_sections orders=1/1"
    assert "exception" not in payload
