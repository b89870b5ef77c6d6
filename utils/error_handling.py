"""
utils/error_handling.py

Исключения и обработка ошибок.

Недопустимый ход — не исключение: push()/move() просто возвращают False.
Исключения поднимаются только при нарушении контракта (пустой стержень,
неизвестное имя, некорректное заполнение).
"""

from typing import Any, Callable, Tuple, Type
from functools import wraps

from .logging import get_logger


class HanoiError(Exception):
    """Базовое исключение игры."""
    pass


class EmptyPegError(HanoiError):
    """Обращение к вершине пустого стержня."""

    def __init__(self, message: str = "Стержень пуст"):
        super().__init__(message)


class UnknownPegError(HanoiError, LookupError):
    """Стержня с таким именем нет на доске."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Неизвестный стержень: {name!r}")


class InvalidPegError(HanoiError):
    """Последовательность дисков нарушает порядок размеров."""
    pass


def handle_errors(default_return: Any = None, log_error: bool = True,
                  exceptions: Tuple[Type[BaseException], ...] = (HanoiError,)):
    """
    Декоратор для обработки ошибок.

    Перехватывает только перечисленные исключения, остальные пробрасываются.

    Args:
        default_return: значение по умолчанию при ошибке
        log_error: логировать ли ошибку
        exceptions: перехватываемые типы исключений
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except exceptions as e:
                if log_error:
                    get_logger().warning(f"{func.__name__}: {e}")
                return default_return
        return wrapper
    return decorator
