"""
session.py

Интерактивная сессия: чтение команд, ходы, одноуровневая отмена.
"""

import sys
from dataclasses import dataclass
from typing import Optional, TextIO, Tuple

from core.board import Board
from peg_io.parser import Command, CommandType, parse_command
from peg_io.visualizer import render_frame
from utils.error_handling import handle_errors
from utils.logging import get_logger


@dataclass
class SessionStats:
    """Статистика сессии."""
    moves: int = 0
    rejected: int = 0
    undos: int = 0
    ignored: int = 0

    def __str__(self) -> str:
        return (
            f"Moves: {self.moves}, "
            f"Rejected: {self.rejected}, "
            f"Undos: {self.undos}, "
            f"Ignored: {self.ignored}"
        )


class Session:
    """
    Сессия игры.

    Владеет доской и записью о последнем успешном ходе (откуда, куда).
    Отмена применяет обратный ход и, если он удался, сама становится
    последним ходом — повторная отмена повторяет исходный ход.
    """

    def __init__(self, board: Board, clear_screen: bool = True):
        self.board = board
        self.clear_screen = clear_screen
        self.last_move: Optional[Tuple[str, str]] = None
        self.running = True
        self.stats = SessionStats()
        self.logger = get_logger()

    def move(self, source: str, target: str) -> bool:
        """
        Ход по именам из ввода. Неизвестные имена игнорируются.

        Returns:
            True, если ход выполнен
        """
        if not (self.board.has(source) and self.board.has(target)):
            self.stats.ignored += 1
            self.logger.debug(f"Ход {source},{target} пропущен: нет такого стержня")
            return False

        if self.board.move(source, target):
            self.last_move = (source, target)
            self.stats.moves += 1
            self.logger.debug(f"Ход {source} → {target}")
            return True

        self.stats.rejected += 1
        self.logger.debug(f"Ход {source} → {target} отклонён")
        return False

    def undo(self) -> bool:
        """Отменяет последний успешный ход обратным ходом."""
        if self.last_move is None:
            self.logger.debug("Отменять нечего")
            return False

        source, target = self.last_move
        if self.board.move(target, source):
            self.last_move = (target, source)
            self.stats.undos += 1
            self.logger.debug(f"Отмена: {target} → {source}")
            return True

        self.logger.debug(f"Отмена {target} → {source} не удалась")
        return False

    @handle_errors(default_return=False)
    def execute(self, command: Command) -> bool:
        """
        Выполняет команду.

        Returns:
            True, если доска изменилась (или команда выполнена)
        """
        if command.type is CommandType.QUIT:
            self.running = False
            return True
        if command.type is CommandType.MOVE:
            return self.move(command.source, command.target)
        if command.type is CommandType.UNDO:
            return self.undo()

        self.stats.ignored += 1
        return False

    def handle(self, line: str) -> bool:
        """
        Разбирает и выполняет строку ввода.

        Returns:
            продолжается ли сессия
        """
        self.execute(parse_command(line))
        return self.running

    def render(self) -> str:
        return render_frame(self.board, clear=self.clear_screen)

    def run(self, stdin: TextIO = None, stdout: TextIO = None) -> int:
        """
        Основной цикл: вывести доску, прочитать строку, выполнить.

        Конец ввода (EOF) завершает сессию как /quit.

        Returns:
            код возврата (0)
        """
        stdin = stdin if stdin is not None else sys.stdin
        stdout = stdout if stdout is not None else sys.stdout

        self.logger.info(f"Сессия начата: {self.board!r}")
        while self.running:
            stdout.write(self.render())
            stdout.flush()

            line = stdin.readline()
            if not line:
                self.logger.debug("Конец ввода")
                self.running = False
                break

            self.handle(line)

        self.logger.info(f"Сессия завершена. {self.stats}")
        return 0
