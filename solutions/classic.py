"""
solutions/classic.py

Каноническое рекурсивное решение Ханойской башни.
"""

from typing import List, Tuple

Move = Tuple[str, str]


def classic_solution(disk_count: int, source: str = 'a', target: str = 'c',
                     spare: str = 'b') -> List[Move]:
    """
    Строит последовательность из 2**n - 1 ходов, переносящую башню
    из disk_count дисков с source на target через spare.

    Для n = 3, a → c: a,c a,b c,b a,c b,a b,c a,c

    Raises:
        ValueError: disk_count < 0 или имена стержней совпадают
    """
    if disk_count < 0:
        raise ValueError(f"Число дисков не может быть отрицательным: {disk_count}")
    if len({source, target, spare}) != 3:
        raise ValueError("Нужны три разных стержня")

    moves: List[Move] = []

    def solve(n: int, frm: str, to: str, via: str) -> None:
        if n == 0:
            return
        solve(n - 1, frm, via, to)
        moves.append((frm, to))
        solve(n - 1, via, to, frm)

    solve(disk_count, source, target, spare)
    return moves
