"""
solutions/verify.py

Проверка последовательности ходов на копии доски.
"""

from typing import List, Tuple

from core.board import Board


Move = Tuple[str, str]


def verify_moves(board: Board, moves: List[Move]) -> bool:
    """
    Проигрывает ходы на копии доски.

    Правила:
    - оба стержня каждого хода существуют;
    - каждый ход успешен (непустой источник, диск меньше верхнего на цели).

    Исходная доска не изменяется. Конечная позиция не проверяется.
    """
    replay = board.copy()
    for source, target in moves:
        if not (replay.has(source) and replay.has(target)):
            return False
        if not replay.move(source, target):
            return False
    return True
