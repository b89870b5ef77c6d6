"""
solutions - Каноническое решение и проверка ходов.
"""

from .classic import classic_solution
from .verify import verify_moves

__all__ = [
    'classic_solution',
    'verify_moves',
]
