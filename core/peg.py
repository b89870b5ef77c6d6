"""
core/peg.py

Стержень — упорядоченный стек дисков.

Инвариант: диски строго убывают от основания к вершине,
т.е. верхний диск всегда самый маленький.
"""

from typing import Any, Iterable, Iterator, List, Optional

from utils.error_handling import EmptyPegError, InvalidPegError
from .utils import disks_to_str


class Peg:
    """
    Стек дисков с проверкой порядка размеров.

    Диски хранятся списком от основания к вершине. Подходит любой
    сравнимый тип диска (int, str, ...), но на одном стержне — один тип.
    """
    __slots__ = ('_disks',)

    def __init__(self, disks: Optional[Iterable[Any]] = None):
        """
        Args:
            disks: начальные диски от основания к вершине

        Raises:
            InvalidPegError: если последовательность нарушает инвариант
        """
        self._disks: List[Any] = []
        if disks is not None:
            for disk in disks:
                if not self.push(disk):
                    raise InvalidPegError(
                        f"Диск {disk!r} нельзя положить на {self._disks[-1]!r}"
                    )

    def top(self) -> Any:
        """Верхний диск. EmptyPegError, если стержень пуст."""
        if not self._disks:
            raise EmptyPegError()
        return self._disks[-1]

    def empty(self) -> bool:
        return not self._disks

    def size(self) -> int:
        return len(self._disks)

    def placeable(self, disk: Any) -> bool:
        """Можно ли положить disk на этот стержень — единственная проверка инварианта."""
        return self.empty() or self.top() > disk

    def push(self, disk: Any) -> bool:
        """
        Кладёт диск на вершину.

        Returns:
            True, если диск положен; False — стержень не изменился
        """
        if self.placeable(disk):
            self._disks.append(disk)
            return True
        return False

    def pop(self) -> Any:
        """Снимает и возвращает верхний диск. EmptyPegError, если стержень пуст."""
        if not self._disks:
            raise EmptyPegError()
        return self._disks.pop()

    @property
    def disks(self) -> tuple:
        """Копия дисков от основания к вершине."""
        return tuple(self._disks)

    def __iter__(self) -> Iterator[Any]:
        return iter(tuple(self._disks))

    def __len__(self) -> int:
        return len(self._disks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Peg):
            return NotImplemented
        return self._disks == other._disks

    def __str__(self) -> str:
        return disks_to_str(self._disks)

    def __repr__(self) -> str:
        return f"Peg({self._disks!r})"
