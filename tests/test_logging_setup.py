import logging
import logging.handlers

from core.logging_setup import setup_logging


def test_rotating_file_handler_added(tmp_path, monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging("debug", tmp_path / "logs")
    try:
        assert root.level == logging.DEBUG
        file_handlers = [
            h for h in root.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].maxBytes == 5 * 1024 * 1024
        assert (tmp_path / "logs" / "leaderboard.log").exists()
    finally:
        for h in root.handlers:
            h.close()


def test_existing_configuration_is_kept(monkeypatch):
    root = logging.getLogger()
    sentinel = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [sentinel])
    setup_logging("INFO")
    assert root.handlers == [sentinel]
