"""Tests for settings and logging setup."""

import logging

from uihelpers.config import Settings, configure_logging


def test_defaults():
    config = Settings()
    assert config.max_file_size == 10 * 1024 * 1024
    assert config.max_file_size_mb == 10
    assert "image/png" in config.allowed_file_types
    assert config.currency == "INR"
    assert config.currency_locale == "en_IN"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("UIHELPERS_MAX_FILE_SIZE", str(5 * 1024 * 1024))
    monkeypatch.setenv("UIHELPERS_ALLOWED_FILE_TYPES", '["image/webp"]')
    monkeypatch.setenv("UIHELPERS_CURRENCY", "USD")

    config = Settings()

    assert config.max_file_size_mb == 5
    assert config.allowed_file_types == ["image/webp"]
    assert config.currency == "USD"


def test_configure_logging_adds_single_handler():
    logger = logging.getLogger("uihelpers")
    before = list(logger.handlers)
    level = logger.level
    try:
        configure_logging("DEBUG")
        configure_logging("DEBUG")
        added = [h for h in logger.handlers if h not in before]
        assert len(added) == 1
        assert logger.level == logging.DEBUG
    finally:
        for handler in logger.handlers[:]:
            if handler not in before:
                logger.removeHandler(handler)
        logger.setLevel(level)


def test_configure_logging_honours_notset_and_file_handlers(tmp_path):
    """An explicit NOTSET level is kept and a FileHandler is not mistaken for stderr."""
    logger = logging.getLogger("uihelpers")
    before = list(logger.handlers)
    level = logger.level
    file_handler = logging.FileHandler(tmp_path / "app.log")
    logger.addHandler(file_handler)
    try:
        logger.setLevel(logging.ERROR)
        configure_logging(logging.NOTSET)
        assert logger.level == logging.NOTSET
        stream_handlers = [
            h for h in logger.handlers if type(h) is logging.StreamHandler
        ]
        assert len(stream_handlers) == 1
    finally:
        for handler in logger.handlers[:]:
            if handler not in before:
                logger.removeHandler(handler)
        file_handler.close()
        logger.setLevel(level)
