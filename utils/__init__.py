"""
utils - Логирование и обработка ошибок.
"""

from .logging import HanoiLogger, get_logger, setup_file_logging
from .error_handling import (
    HanoiError, EmptyPegError, UnknownPegError, InvalidPegError,
    handle_errors
)

__all__ = [
    'HanoiLogger', 'get_logger', 'setup_file_logging',
    'HanoiError', 'EmptyPegError', 'UnknownPegError', 'InvalidPegError',
    'handle_errors',
]
