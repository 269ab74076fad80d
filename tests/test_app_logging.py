"""Tests for logging configuration."""

import logging

from recipe_generator.app_logging import LOG_FORMAT, configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("recipe_generator")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert logger.propagate is False


def test_configure_logging_applies_level_name() -> None:
    logger = logging.getLogger("recipe_generator")
    logger.handlers.clear()

    configure_logging("debug")

    assert logger.level == logging.DEBUG
    assert logger.handlers[0].formatter._fmt == LOG_FORMAT

    configure_logging(logging.WARNING)
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    configure_logging()
