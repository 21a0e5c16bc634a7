import logging

from utils.logger import LOG_LEVEL_ENV_VAR, get_logger


def test_get_logger_defaults_to_info(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    logger = get_logger("tests.logger.default")
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_get_logger_does_not_duplicate_handlers():
    name = "tests.logger.handlers"
    get_logger(name)
    logger = get_logger(name)
    assert len(logger.handlers) == 1


def test_get_logger_reads_level_from_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "debug")
    assert get_logger("tests.logger.env").level == logging.DEBUG


def test_get_logger_ignores_unknown_level_names(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "chatty")
    assert get_logger("tests.logger.unknown").level == logging.INFO


def test_explicit_level_wins(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "DEBUG")
    assert get_logger("tests.logger.explicit", level=logging.ERROR).level == logging.ERROR
    assert get_logger("tests.logger.explicit_name", level="warning").level == logging.WARNING
