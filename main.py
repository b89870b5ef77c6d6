#!/usr/bin/env python3
"""
main.py

Точка входа для Ханойской башни.

Использование:
    python main.py                    # 9 дисков на стержнях a, b, c
    python main.py --disks 4          # 4 диска
    python main.py --pegs x,y,z       # свои имена стержней
    python main.py --demo -n 3        # показать каноническое решение
"""

import sys
import argparse
import logging

from core.board import Board
from core.utils import DEFAULT_DISK_COUNT, DEFAULT_PEG_NAMES
from peg_io.parser import parse_peg_names
from peg_io.visualizer import format_move, render_frame
from session import Session
from solutions import classic_solution, verify_moves
from utils.logging import get_logger, setup_file_logging


def non_negative_int(text: str) -> int:
    """Тип аргумента argparse: целое >= 0."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"ожидается целое число: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"число дисков не может быть отрицательным: {value}")
    return value


def peg_names(text: str):
    """Тип аргумента argparse: список имён стержней через запятую."""
    try:
        return parse_peg_names(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hanoi',
        description='Ханойская башня в терминале',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Команды в игре:
  a,c      перенести верхний диск со стержня a на стержень c
  /undo    отменить последний ход (повторный /undo вернёт его)
  /quit    выйти

Примеры:
  python main.py                 # 9 дисков, стержни a, b, c
  python main.py -n 4 -p l,m,r   # 4 диска, стержни l, m, r
  python main.py --demo -n 3     # каноническое решение
        """
    )
    parser.add_argument(
        '--disks', '-n', type=non_negative_int, default=DEFAULT_DISK_COUNT,
        help=f'Число дисков (default: {DEFAULT_DISK_COUNT})'
    )
    parser.add_argument(
        '--pegs', '-p', type=peg_names, default=list(DEFAULT_PEG_NAMES),
        help=f'Имена стержней через запятую (default: {",".join(DEFAULT_PEG_NAMES)})'
    )
    parser.add_argument(
        '--no-clear', action='store_true',
        help='Не очищать экран перед выводом доски'
    )
    parser.add_argument(
        '--demo', action='store_true',
        help='Показать каноническое решение вместо игры'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Отладочный лог в stderr'
    )
    parser.add_argument(
        '--log-file', metavar='PATH',
        help='Дополнительно писать лог в файл'
    )
    return parser


def run_demo(board: Board, clear: bool, stdout=None) -> int:
    """Проигрывает каноническое решение, выводя доску после каждого хода."""
    stdout = stdout if stdout is not None else sys.stdout
    logger = get_logger()

    source, spare, target = board.names()[:3]
    moves = classic_solution(board.select(source).size(), source, target, spare)
    if not verify_moves(board, moves):
        logger.error("Каноническое решение не проходит проверку")
        return 1

    stdout.write(render_frame(board, clear=clear))
    for i, (frm, to) in enumerate(moves, 1):
        board.move(frm, to)
        stdout.write(f"{i}. {format_move(frm, to)}\n")
        stdout.write(render_frame(board, clear=False))
    stdout.flush()

    logger.info(f"Решение за {len(moves)} ходов")
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.demo and len(args.pegs) < 3:
        parser.error("для --demo нужно минимум три стержня")

    logger = get_logger()
    logger.set_level(logging.DEBUG if args.verbose else logging.WARNING)
    if args.log_file:
        setup_file_logging(args.log_file)

    board = Board.standard(args.disks, args.pegs)
    logger.debug(f"Доска: {board!r}, стержни: {', '.join(board.names())}")

    if args.demo:
        return run_demo(board, clear=not args.no_clear)

    session = Session(board, clear_screen=not args.no_clear)
    try:
        return session.run()
    except KeyboardInterrupt:
        logger.info(f"Прервано. {session.stats}")
        return 130


if __name__ == "__main__":
    sys.exit(main())
