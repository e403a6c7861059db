import logging

from numclass_app.utils.logging_config import configure_logging


def test_configure_logging_returns_package_logger():
    logger = configure_logging()
    assert logger.name == "numclass_app"


def test_configure_logging_reads_environment(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    monkeypatch.setenv("NUMCLASS_LOG_LEVEL", "debug")
    configure_logging()
    assert captured["level"] == logging.DEBUG
    assert captured["format"] == "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def test_explicit_level_wins_and_unknown_falls_back(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    monkeypatch.setenv("NUMCLASS_LOG_LEVEL", "debug")
    configure_logging("warning")
    assert captured["level"] == logging.WARNING
    configure_logging("chatty")
    assert captured["level"] == logging.INFO
