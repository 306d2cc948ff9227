"""Tests for logging configuration."""

import logging

from nutrition_hub.app_logging import configure_logging


def test_configure_logging_installs_single_handler() -> None:
    logger = logging.getLogger("nutrition_hub")
    logger.handlers.clear()

    configure_logging()
    configure_logging()

    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
    assert logger.propagate is False


def test_configure_logging_applies_level_to_module_loggers() -> None:
    logger = logging.getLogger("nutrition_hub")
    logger.handlers.clear()

    configure_logging(logging.WARNING)

    child = logging.getLogger("nutrition_hub.services.retry")
    assert not child.isEnabledFor(logging.INFO)
    assert child.isEnabledFor(logging.WARNING)
    configure_logging(logging.INFO)
