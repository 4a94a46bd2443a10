import logging

from shortener.config import settings
from shortener.logging_config import setup_logging


def test_lowercase_log_level_accepted(monkeypatch):
    monkeypatch.setattr(settings, "LOG_LEVEL", "debug")
    try:
        logger = setup_logging()
        assert logger.level == logging.DEBUG
    finally:
        monkeypatch.undo()
        setup_logging()


def test_no_duplicate_handlers():
    first = setup_logging()
    handler_count = len(first.handlers)

    second = setup_logging()

    assert second is first
    assert len(second.handlers) == handler_count == 1
