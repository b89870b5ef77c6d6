"""
core/board.py

Доска — именованный набор стержней и атомарный ход между ними.
"""

from typing import Callable, Dict, Iterator, List, NamedTuple, Optional, Sequence, Tuple

from utils.error_handling import UnknownPegError
from .peg import Peg
from .utils import DEFAULT_DISK_COUNT, DEFAULT_PEG_NAMES, NAME_SEPARATOR, stack_initializer

Initializer = Callable[[Peg], bool]


class CreateResult(NamedTuple):
    """Результат Board.create(): стержень (или None) и признак успеха."""
    peg: Optional[Peg]
    ok: bool

    def __bool__(self) -> bool:
        return self.ok


class Board:
    """
    Набор стержней по именам.

    Порядок добавления стержней сохраняется и определяет порядок вывода.
    Изменяется только через move(): за успешный ход ровно один диск
    переходит с одного стержня на другой, иначе доска не меняется.
    """
    __slots__ = ('_pegs',)

    def __init__(self):
        self._pegs: Dict[str, Peg] = {}

    @classmethod
    def standard(cls, disk_count: int = DEFAULT_DISK_COUNT,
                 names: Sequence[str] = DEFAULT_PEG_NAMES) -> 'Board':
        """
        Начальная позиция: все диски на первом стержне, остальные пусты.

        Raises:
            ValueError: если имён нет или они повторяются
        """
        if not names:
            raise ValueError("Нужен хотя бы один стержень")
        if len(set(names)) != len(names):
            raise ValueError(f"Имена стержней повторяются: {', '.join(names)}")

        board = cls()
        board.create(names[0], stack_initializer(disk_count))
        for name in names[1:]:
            board.create(name)
        return board

    def has(self, name: str) -> bool:
        return name in self._pegs

    def create(self, name: str, initializer: Optional[Initializer] = None) -> CreateResult:
        """
        Добавляет пустой стержень.

        Если имя занято — ничего не меняет и возвращает неуспех.
        Инициализатор получает только что добавленный стержень; если он
        вернул False (или бросил исключение), добавление откатывается.

        Args:
            name: имя стержня
            initializer: функция заполнения стержня

        Returns:
            CreateResult(peg, ok)
        """
        if name in self._pegs:
            return CreateResult(None, False)

        peg = Peg()
        self._pegs[name] = peg
        if initializer is None:
            return CreateResult(peg, True)

        try:
            ok = bool(initializer(peg))
        except Exception:
            del self._pegs[name]
            raise

        if not ok:
            del self._pegs[name]
            return CreateResult(None, False)
        return CreateResult(peg, True)

    def select(self, name: str) -> Peg:
        """Стержень по имени. UnknownPegError, если его нет."""
        try:
            return self._pegs[name]
        except KeyError:
            raise UnknownPegError(name) from None

    def move(self, from_name: str, to_name: str) -> bool:
        """
        Переносит верхний диск с from_name на to_name.

        Ход на тот же стержень всегда успешен и ничего не меняет.

        Returns:
            True, если диск перенесён (или ход на себя); False — доска не изменилась

        Raises:
            UnknownPegError: если одного из стержней нет
        """
        if from_name == to_name:
            return True

        source = self.select(from_name)
        target = self.select(to_name)
        if source.empty():
            return False

        if target.push(source.top()):
            source.pop()
            return True
        return False

    def names(self) -> List[str]:
        return list(self._pegs)

    def disk_count(self) -> int:
        """Общее число дисков на всех стержнях."""
        return sum(peg.size() for peg in self._pegs.values())

    def copy(self) -> 'Board':
        """Независимая копия доски."""
        clone = Board()
        for name, peg in self._pegs.items():
            clone._pegs[name] = Peg(peg.disks)
        return clone

    def items(self) -> Iterator[Tuple[str, Peg]]:
        return iter(list(self._pegs.items()))

    def __contains__(self, name: object) -> bool:
        return name in self._pegs

    def __iter__(self) -> Iterator[Tuple[str, Peg]]:
        return self.items()

    def __len__(self) -> int:
        return len(self._pegs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._pegs == other._pegs

    def __str__(self) -> str:
        return ''.join(f"{name}{NAME_SEPARATOR}{peg}\n" for name, peg in self._pegs.items())

    def __repr__(self) -> str:
        return f"Board({len(self._pegs)} pegs, {self.disk_count()} disks)"
