# tests/test_logging_setup.py
import logging

from scenecam.utils.logging_setup import configure_logging


def test_configure_logging_file_sink(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    before = list(root.handlers)
    old_level = root.level
    try:
        configure_logging(logging.DEBUG, log_to_file=True)
        logging.getLogger("scenecam.test").info("hello from test")
        logs = list((tmp_path / "logs").glob("scenecam-*.log"))
        assert len(logs) == 1
        for h in root.handlers:
            h.flush()
        assert "hello from test" in logs[0].read_text(encoding="utf-8")
        assert root.level == logging.DEBUG
        assert logging.getLogger("PIL").level == logging.WARNING
    finally:
        for h in list(root.handlers):
            if h not in before:
                root.removeHandler(h)
                h.close()
        root.setLevel(old_level)


def test_configure_logging_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    old_level = root.level
    try:
        configure_logging(logging.WARNING)
        assert not (tmp_path / "logs").exists()
        assert root.level == logging.WARNING
    finally:
        root.setLevel(old_level)
