"""
peg_io/visualizer.py

Вывод доски и ходов на экран.
"""

# ANSI: очистить экран и поставить курсор в левый верхний угол
CLEAR_SCREEN = "\033[2J\033[1;1H"


def render_frame(board, clear: bool = True) -> str:
    """
    Кадр экрана перед запросом ввода.

    Args:
        board: доска (str(board) — по строке 'имя#диски' на стержень)
        clear: добавить ли очистку экрана

    Returns:
        Строка для вывода
    """
    prefix = CLEAR_SCREEN if clear else ""
    return f"{prefix}{board}\n"


def format_move(source: str, target: str) -> str:
    return f"{source} → {target}"
