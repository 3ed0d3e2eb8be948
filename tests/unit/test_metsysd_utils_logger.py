"""Unit tests for metsysd.utils.logger."""

import logging

from metsysd.utils import configure_logging, get_logger


def test_get_logger_is_namespaced():
    assert get_logger("manager").name == "metsysd.manager"


def test_configure_logging_twice_only_adjusts_level():
    root_logger = logging.getLogger("metsysd")
    configure_logging()
    handler_count = len(root_logger.handlers)

    configure_logging(logging.DEBUG)
    try:
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == handler_count
    finally:
        configure_logging(logging.WARNING)
