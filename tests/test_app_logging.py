"""Tests for logging configuration."""

import logging

import pytest

from webplayer_client.app_logging import PACKAGE_LOGGER, configure_logging


def test_package_logger_is_parent_of_module_loggers() -> None:
    assert PACKAGE_LOGGER == "webplayer_client"
    child = logging.getLogger("webplayer_client.services.webplayer")
    assert child.parent is logging.getLogger(PACKAGE_LOGGER)


def test_configure_logging_installs_one_handler(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    logger = logging.getLogger(PACKAGE_LOGGER)
    monkeypatch.setattr(logger, "handlers", [])
    monkeypatch.setattr(logger, "propagate", True)

    configure_logging()
    configure_logging()

    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
    assert logger.propagate is False
