"""
peg_io - Ввод/вывод для Ханойской башни

Экспортирует:
- Разбор команд и конфигурации
- Вывод доски и ходов
"""

from .parser import Command, CommandType, parse_command, parse_peg_names
from .visualizer import CLEAR_SCREEN, render_frame, format_move

__all__ = [
    'Command',
    'CommandType',
    'parse_command',
    'parse_peg_names',
    'CLEAR_SCREEN',
    'render_frame',
    'format_move',
]
