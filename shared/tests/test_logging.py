"""
Unit tests for shared logging configuration.
"""

import logging
import sys

from shared.logging import MaxLevelFilter, add_service_context, configure_logging, get_logger


def _record(level: int) -> logging.LogRecord:
    return logging.LogRecord("fx_rate.test", level, __file__, 1, "message", None, None)


def test_max_level_filter():
    """Only records below the threshold pass."""
    level_filter = MaxLevelFilter(logging.WARNING)

    assert level_filter.filter(_record(logging.INFO)) is True
    assert level_filter.filter(_record(logging.WARNING)) is False
    assert level_filter.filter(_record(logging.ERROR)) is False


def test_add_service_context():
    event_dict = add_service_context(None, "info", {"logger": "fx_rate.fetcher", "event": "x"})
    assert event_dict["service"] == "fx_rate"

    event_dict = add_service_context(None, "info", {"logger": "root", "event": "x"})
    assert "service" not in event_dict


def test_configure_logging_splits_streams():
    """Info goes to stdout, warnings and errors to stderr."""
    configure_logging("fx_rate", "debug")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    streams = {handler.stream: handler for handler in root.handlers}
    assert set(streams) == {sys.stdout, sys.stderr}
    assert streams[sys.stderr].level == logging.WARNING
    assert any(isinstance(f, MaxLevelFilter) for f in streams[sys.stdout].filters)


def test_console_output(capsys):
    """Log lines are human readable and land on the right stream."""
    configure_logging("fx_rate", "info")
    logger = get_logger("fx_rate.test")

    logger.info("Refreshed exchange rate", euro_usd_rate=1.0875)
    logger.error("Failed to fetch exchange rate from API")

    captured = capsys.readouterr()
    assert "Refreshed exchange rate" in captured.out
    assert "euro_usd_rate=1.0875" in captured.out
    assert "Failed to fetch" not in captured.out
    assert "Failed to fetch exchange rate from API" in captured.err


def test_json_output(capsys):
    configure_logging("fx_rate", "info", "json")

    get_logger("fx_rate.test").info("Starting server")

    captured = capsys.readouterr()
    assert '"event": "Starting server"' in captured.out
    assert '"service": "fx_rate"' in captured.out
