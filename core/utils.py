"""
core/utils.py

Общие константы и утилиты Ханойской башни.
"""

from typing import Callable, Iterable, Tuple

# Начальная конфигурация: три стержня, девять дисков на первом
DEFAULT_PEG_NAMES: Tuple[str, ...] = ('a', 'b', 'c')
DEFAULT_DISK_COUNT = 9

# Разделитель имени стержня и дисков в текстовом представлении
NAME_SEPARATOR = '#'


def disks_to_str(disks: Iterable) -> str:
    """Склеивает диски без разделителей: [9, 8, 1] → '981'."""
    return ''.join(str(d) for d in disks)


def stack_initializer(disk_count: int) -> Callable:
    """
    Инициализатор стержня для Board.create().

    Кладёт диски disk_count, disk_count-1, ..., 1 (от основания к вершине).
    Возвращает False, если какой-то диск не удалось положить.
    """
    def initialize(peg) -> bool:
        for disk in range(disk_count, 0, -1):
            if not peg.push(disk):
                return False
        return True
    return initialize
