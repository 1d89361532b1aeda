"""Tests for custdesk logger setup: stderr output, format, and config-driven level."""

import logging
import sys

from custdesk.core.logging import LOG_FORMAT, get_logger


def test_same_name_returns_same_logger():
    assert get_logger("custdesk.test.cached") is get_logger("custdesk.test.cached")


def test_single_stderr_handler_with_custdesk_format():
    logger = get_logger("custdesk.test.handler")
    assert len(logger.handlers) == 1
    handler = logger.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.formatter._fmt == LOG_FORMAT


def test_record_written_to_stderr(capsys):
    logger = get_logger("custdesk.test.stderr")
    # capsys replaces sys.stderr per test
    logger.handlers[0].setStream(sys.stderr)
    logger.warning("Export to %s failed", "out.csv")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[custdesk.test.stderr] WARNING: Export to out.csv failed" in captured.err


def test_default_level_from_config():
    assert get_logger("custdesk.test.level").level == logging.INFO


def test_level_from_custom_config(custom_config):
    custom_config.write_text("logging:\n  level: debug\n", encoding="utf-8")
    from custdesk.core.config import get_config

    get_config(reload=True)
    assert get_logger("custdesk.test.configured").level == logging.DEBUG


def test_unknown_level_falls_back_to_info(custom_config):
    custom_config.write_text("logging:\n  level: chatty\n", encoding="utf-8")
    from custdesk.core.config import get_config

    get_config(reload=True)
    assert get_logger("custdesk.test.unknown").level == logging.INFO


def test_explicit_level():
    assert get_logger("custdesk.test.debug", level=logging.DEBUG).level == logging.DEBUG
