import logging

from portal.core.config import settings
from portal.core.logger import configure_logging, logger


def test_configure_logging_defaults_to_settings_level(monkeypatch):
    monkeypatch.setattr(settings, "LOG_LEVEL", "warning")

    configure_logging()
    assert logger.level == logging.WARNING

    configure_logging("debug")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1

    configure_logging("info")
