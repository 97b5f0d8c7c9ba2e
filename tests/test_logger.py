"""
Test logging setup. Run: python -m pytest tests/test_logger.py -v
"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging

import pytest

from static_pool.logger import configure_logging, get_logger, log


@pytest.fixture(autouse=True)
def _detach_handlers():
    yield
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()


def test_child_loggers_live_under_package():
    assert get_logger("pool").name == "static_pool.pool"
    assert log.name == "static_pool"


def test_configure_console_only():
    assert configure_logging() is None
    assert len(log.handlers) == 1


def test_configure_with_file(tmp_path):
    log_file = configure_logging(tmp_path / "logs", console_level=logging.WARNING)
    get_logger("test").debug("written to file only")
    for handler in log.handlers:
        handler.flush()
    assert log_file.parent == tmp_path / "logs"
    assert log_file.suffix == ".log"
    assert "written to file only" in log_file.read_text(encoding="utf-8")
    # reconfiguring replaces, not duplicates
    configure_logging()
    assert len(log.handlers) == 1
