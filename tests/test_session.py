"""
tests/test_session.py

Тесты игровой сессии: ходы из ввода, отмена/повтор, выход, цикл чтения.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import io

from core.board import Board
from peg_io.parser import Command, CommandType
from peg_io.visualizer import CLEAR_SCREEN
from session import Session


def make_session(disks: int = 3) -> Session:
    return Session(Board.standard(disks), clear_screen=False)


def test_move_and_last_move():
    """Успешный ход запоминается."""
    session = make_session()
    assert session.handle("a,c") is True
    assert session.board.select("c").disks == (1,)
    assert session.last_move == ("a", "c")
    assert session.stats.moves == 1


def test_rejected_move_keeps_last_move():
    """Недопустимый ход не меняет доску и запись о последнем ходе."""
    session = make_session()
    session.handle("a,c")
    session.handle("a,c")  # 2 на 1 — нельзя
    assert session.board.select("a").disks == (3, 2)
    assert session.last_move == ("a", "c")
    assert session.stats.rejected == 1


def test_unknown_pegs_ignored():
    """Ход с неизвестным стержнем игнорируется и не завершает сессию."""
    session = make_session()
    before = str(session.board)
    assert session.handle("a,x") is True
    assert session.handle("q,c") is True
    assert str(session.board) == before
    assert session.last_move is None
    assert session.stats.ignored == 2


def test_undo_and_redo():
    """/undo отменяет ход, повторный /undo возвращает его."""
    session = make_session()
    session.handle("a,b")
    session.handle("/undo")
    assert str(session.board) == "a#321\nb#\nc#\n"
    assert session.last_move == ("b", "a")

    session.handle("/undo")
    assert str(session.board) == "a#32\nb#1\nc#\n"
    assert session.last_move == ("a", "b")
    assert session.stats.undos == 2


def test_undo_without_moves():
    """Без ходов отмена ничего не делает."""
    session = make_session()
    assert session.undo() is False
    assert str(session.board) == "a#321\nb#\nc#\n"


def test_undo_after_intervening_move_can_fail():
    """Отмена не удаётся, если обратный ход стал недопустимым."""
    session = make_session()
    session.handle("a,c")   # 1 → c
    session.handle("a,b")   # 2 → b
    session.board.move("c", "a")  # 1 → a, в обход сессии
    before = str(session.board)

    # обратный ход b→a: 2 на 1 — недопустим
    assert session.undo() is False
    assert str(session.board) == before
    assert session.last_move == ("a", "b")


def test_self_move_recorded():
    """Ход на тот же стержень успешен и становится последним ходом."""
    session = make_session()
    assert session.move("a", "a") is True
    assert session.last_move == ("a", "a")
    assert session.undo() is True


def test_quit():
    session = make_session()
    assert session.handle("/quit") is False
    assert session.running is False


def test_nop_lines():
    """Прочие строки ничего не меняют."""
    session = make_session()
    before = str(session.board)
    for line in ["", "hello", "/help", "\n"]:
        assert session.handle(line) is True
    assert str(session.board) == before


def test_execute_swallows_contract_errors():
    """Нарушение контракта в команде не роняет сессию."""
    session = make_session()
    session.last_move = ("a", "nope")
    assert session.execute(Command(CommandType.UNDO)) is False
    assert session.running is True


def test_run_loop_renders_and_quits():
    """Цикл выводит доску перед каждым вводом и завершается по /quit."""
    session = Session(Board.standard(2), clear_screen=True)
    stdin = io.StringIO("a,b\na,c\n/quit\nb,c\n")
    stdout = io.StringIO()

    assert session.run(stdin, stdout) == 0

    output = stdout.getvalue()
    assert output.count(CLEAR_SCREEN) == 3
    assert output.endswith("a#\nb#1\nc#2\n\n")
    # строка после /quit не выполнена
    assert session.board.select("b").disks == (1,)


def test_run_loop_stops_on_eof():
    """Конец ввода завершает сессию."""
    session = make_session(2)
    stdout = io.StringIO()
    assert session.run(io.StringIO("a,c"), stdout) == 0
    assert session.running is False
    assert session.board.select("c").disks == (1,)
    assert stdout.getvalue() == "a#21\nb#\nc#\n\n" + "a#2\nb#\nc#1\n\n"


def test_leading_space_is_not_a_command():
    """Строка ' /quit' не завершает сессию."""
    session = make_session()
    assert session.handle(" /quit\n") is True
    assert session.running is True


def test_move_names_are_not_trimmed():
    """Пробелы входят в имена: 'a , c' ссылается на несуществующие стержни."""
    session = make_session()
    assert session.handle("a , c\n") is True
    assert str(session.board) == "a#321\nb#\nc#\n"
    assert session.last_move is None
    assert session.stats.ignored == 1
