import os
import time

from services import logger as app_logger
from services.path import PROJECT_ROOT, prj, resolve


def test_prj_is_anchored_at_project_root():
    assert prj("data.json") == PROJECT_ROOT / "data.json"
    assert (PROJECT_ROOT / "main.py").exists()


def test_resolve_defaults_and_relative_and_absolute(tmp_path):
    assert resolve(None, "data.json") == PROJECT_ROOT / "data.json"
    assert resolve("", "data.json") == PROJECT_ROOT / "data.json"
    assert resolve("sub/notes.json", "data.json") == PROJECT_ROOT / "sub" / "notes.json"
    absolute = tmp_path / "notes.json"
    assert resolve(str(absolute), "data.json") == absolute


def test_cleanup_old_logs_removes_only_stale_rotated_files(tmp_path):
    old = tmp_path / "log_textdesk.log.2026-01-01"
    fresh = tmp_path / "log_textdesk.log"
    other = tmp_path / "unrelated.log"
    for p in (old, fresh, other):
        p.write_text("x", encoding="utf-8")
    stale = time.time() - 100 * 3600
    os.utime(old, (stale, stale))
    os.utime(other, (stale, stale))

    assert app_logger.cleanup_old_logs(str(tmp_path), keep_hours=72) == 1
    assert sorted(os.listdir(tmp_path)) == ["log_textdesk.log", "unrelated.log"]
