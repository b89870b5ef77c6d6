"""
tests/test_error_handling.py

Тесты иерархии исключений, декоратора handle_errors и логгера.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging

import pytest

from utils.error_handling import (
    HanoiError, EmptyPegError, UnknownPegError, InvalidPegError, handle_errors
)
from utils.logging import get_logger


def test_hierarchy():
    for exc in (EmptyPegError, UnknownPegError, InvalidPegError):
        assert issubclass(exc, HanoiError)
    assert issubclass(UnknownPegError, LookupError)
    assert UnknownPegError("x").name == "x"


def test_handle_errors_returns_default():
    """HanoiError превращается в значение по умолчанию."""
    @handle_errors(default_return="fallback", log_error=False)
    def fails():
        raise EmptyPegError()

    assert fails() == "fallback"


def test_handle_errors_passes_result():
    @handle_errors(default_return=False)
    def ok(x):
        return x * 2

    assert ok(21) == 42
    assert ok.__name__ == "ok"


def test_handle_errors_propagates_other_exceptions():
    """Чужие исключения не перехватываются."""
    @handle_errors(default_return=None)
    def broken():
        raise ZeroDivisionError()

    with pytest.raises(ZeroDivisionError):
        broken()


def test_handle_errors_logs_warning(caplog):
    @handle_errors(default_return=None)
    def unknown():
        raise UnknownPegError("q")

    with caplog.at_level(logging.WARNING, logger="hanoi"):
        unknown()
    assert "Неизвестный стержень: 'q'" in caplog.text


def test_get_logger_is_shared():
    assert get_logger() is get_logger()
    assert get_logger().logger.name == "hanoi"
