"""
peg_io/parser.py

Разбор строк ввода в команды.

Формат:
    /quit        — завершить сессию
    /undo        — отменить последний успешный ход
    from,to      — ход, например: a,c
Прочие строки игнорируются.
"""

import re
from enum import Enum
from typing import List, NamedTuple, Optional

from core.utils import NAME_SEPARATOR


class CommandType(Enum):
    NOP = 'nop'
    MOVE = 'move'
    UNDO = 'undo'
    QUIT = 'quit'


class Command(NamedTuple):
    type: CommandType = CommandType.NOP
    source: Optional[str] = None
    target: Optional[str] = None


CONTROL_PREFIX = '/'
MOVE_SEPARATOR = ','

CONTROL_COMMANDS = {
    'quit': CommandType.QUIT,
    'undo': CommandType.UNDO,
}

# Допустимое имя стержня: непустое, без разделителей
PEG_NAME_RE = re.compile(r'^[^\s,#/][^,#]*$')


def parse_command(line: str) -> Command:
    """
    Разбирает одну строку ввода.

    Управляющая команда распознаётся раньше хода: '/a,b' — это не ход.
    Ход делится по первой запятой. Отбрасывается только перевод строки:
    " /quit" не команда, а "a , c" — ход между стержнями "a " и " c".

    Args:
        line: строка ввода (с переводом строки или без)

    Returns:
        Command; для нераспознанных строк — Command(CommandType.NOP)
    """
    text = line.rstrip("\r\n")

    if text.startswith(CONTROL_PREFIX):
        name = text[len(CONTROL_PREFIX):]
        return Command(CONTROL_COMMANDS.get(name, CommandType.NOP))

    source, sep, target = text.partition(MOVE_SEPARATOR)
    if sep:
        return Command(CommandType.MOVE, source, target)

    return Command()


def parse_peg_names(text: str) -> List[str]:
    """
    Парсит список имён стержней для конфигурации: 'a,b,c' → ['a', 'b', 'c'].

    Raises:
        ValueError: пустой список, некорректное или повторяющееся имя
    """
    names = [part.strip() for part in text.split(MOVE_SEPARATOR)]

    if not names or names == ['']:
        raise ValueError("Нужен хотя бы один стержень")

    for name in names:
        if not PEG_NAME_RE.match(name):
            raise ValueError(
                f"Неверное имя стержня: {name!r} "
                f"(не пустое, без '{MOVE_SEPARATOR}', '{NAME_SEPARATOR}' и '{CONTROL_PREFIX}' в начале)"
            )

    if len(set(names)) != len(names):
        raise ValueError(f"Имена стержней повторяются: {text}")

    return names
