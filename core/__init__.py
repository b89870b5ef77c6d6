"""
core - Ядро Ханойской башни

Стержень с проверкой порядка дисков и доска с атомарным ходом.
"""

from .peg import Peg
from .board import Board, CreateResult
from .utils import (
    DEFAULT_PEG_NAMES, DEFAULT_DISK_COUNT, NAME_SEPARATOR,
    disks_to_str, stack_initializer
)

__all__ = [
    'Peg', 'Board', 'CreateResult',
    'DEFAULT_PEG_NAMES', 'DEFAULT_DISK_COUNT', 'NAME_SEPARATOR',
    'disks_to_str', 'stack_initializer',
]
