"""configure_logging tests."""

import logging
from pathlib import Path

import pytest

from jps_packager.logging_utils import configure_logging


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    for attr in ("_jps_configured", "_jps_log_path"):
        if hasattr(root, attr):
            delattr(root, attr)
    yield root
    for h in root.handlers:
        if h not in saved_handlers:
            h.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)
    for attr in ("_jps_configured", "_jps_log_path"):
        if hasattr(root, attr):
            delattr(root, attr)


class TestConfigureLogging:
    def test_writes_to_requested_file(self, clean_root_logger, tmp_path):
        path = tmp_path / "logs" / "diag.log"
        actual = configure_logging(log_path=str(path))

        logging.getLogger("jps_packager.test").info("hello diag")
        for h in clean_root_logger.handlers:
            h.flush()

        assert actual == str(path)
        assert "hello diag" in path.read_text(encoding="utf-8")

    def test_second_call_is_a_no_op(self, clean_root_logger, tmp_path):
        first = configure_logging(log_path=str(tmp_path / "a.log"))
        count = len(clean_root_logger.handlers)
        second = configure_logging(log_path=str(tmp_path / "b.log"))

        assert first == second
        assert len(clean_root_logger.handlers) == count

    def test_falls_back_to_cwd(self, clean_root_logger, tmp_path, monkeypatch):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        actual = configure_logging(log_path=str(blocker / "diag.log"))

        assert actual == str(Path.cwd() / "jps-packager.log")

    def test_console_off_by_default(self, clean_root_logger, tmp_path):
        configure_logging(log_path=str(tmp_path / "diag.log"))

        added = [h for h in clean_root_logger.handlers if type(h) is logging.StreamHandler]
        assert added == []

    def test_console_on_request(self, clean_root_logger, tmp_path):
        configure_logging(log_path=str(tmp_path / "diag.log"), also_console=True)

        assert any(type(h) is logging.StreamHandler for h in clean_root_logger.handlers)
