"""
Tests for the logger factory
"""
import logging
from uuid import uuid4

import pytest

from bip85.core.logging import LOG_LEVEL_ENV, get_logger, resolve_level


def unique_name() -> str:
    return f"bip85.test.{uuid4().hex}"


@pytest.mark.parametrize("level, expected", [
    ("DEBUG", logging.DEBUG),
    ("info", logging.INFO),
    (" error ", logging.ERROR),
    ("NOT_A_LEVEL", logging.WARNING),
])
def test_explicit_level(level, expected):
    assert resolve_level(level) == expected


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
    assert resolve_level() == logging.DEBUG
    assert resolve_level("ERROR") == logging.ERROR, "An explicit level wins over the environment"

    monkeypatch.delenv(LOG_LEVEL_ENV)
    assert resolve_level() == logging.WARNING


def test_handlers_added_once():
    name = unique_name()
    logger = get_logger(name, "INFO")
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1

    again = get_logger(name, "DEBUG")
    assert again is logger
    assert len(again.handlers) == 1
    assert again.level == logging.INFO


def test_file_handler(tmp_path):
    log_file = tmp_path / "logs" / "bip85.log"
    logger = get_logger(unique_name(), "INFO", log_file=log_file)
    logger.info("derived m/83696968'/39'/0'/12'/0'")

    for handler in logger.handlers:
        handler.flush()
    assert len(logger.handlers) == 2
    assert "[INFO]: derived m/83696968'/39'/0'/12'/0'" in log_file.read_text()

    for handler in logger.handlers:
        handler.close()
