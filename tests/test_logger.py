"""Tests for lessonsync logging setup."""
import logging

import pytest

from lessonsync.utils.logger import LOGGER_NAME, ColouredFormatter, get_logger, setup_logging


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved_handlers, saved_level = list(logger.handlers), logger.level
    logger.handlers = []
    yield logger
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)


def test_get_logger_does_not_configure_handlers(clean_logger):
    log = get_logger("services.sync_engine")

    assert log.name == "lessonsync.services.sync_engine"
    assert get_logger("lessonsync.utils.file_utils").name == "lessonsync.utils.file_utils"
    assert clean_logger.handlers == []


def test_setup_logging_adds_one_console_handler(clean_logger):
    setup_logging()
    setup_logging(quiet=True)

    [handler] = clean_logger.handlers
    assert isinstance(handler.formatter, ColouredFormatter)
    assert clean_logger.level == logging.WARNING
    assert handler.level == logging.WARNING


def test_verbose_selects_debug(clean_logger):
    setup_logging(verbose=True)
    assert clean_logger.level == logging.DEBUG


def test_formatter_tags_level():
    record = logging.LogRecord(LOGGER_NAME, logging.ERROR, __file__, 1, "Failed: %s", ("a.json",), None)
    assert "[ERROR]" in ColouredFormatter("%(message)s").format(record)
    assert "Failed: a.json" in ColouredFormatter("%(message)s").format(record)
