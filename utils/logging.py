"""
utils/logging.py

Централизованная система логирования.

Экран игры занят доской (stdout), поэтому консольный handler пишет в stderr.
"""

import logging
import os
import sys
from typing import Optional


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class HanoiLogger:
    """Логгер для игровой сессии и ядра."""

    def __init__(self, name: str = "hanoi", level: int = logging.WARNING):
        """
        Инициализирует логгер.

        Args:
            name: имя логгера
            level: уровень логирования
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        # Избегаем дублирования handlers
        if not self.logger.handlers:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(level)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            self.logger.addHandler(console_handler)

    def set_level(self, level: int):
        """Меняет уровень логгера и всех его handlers."""
        self.logger.setLevel(level)
        for handler in self.logger.handlers:
            handler.setLevel(level)

    def debug(self, message: str):
        """Логирует отладочное сообщение."""
        self.logger.debug(message)

    def info(self, message: str):
        """Логирует информационное сообщение."""
        self.logger.info(message)

    def warning(self, message: str):
        """Логирует предупреждение."""
        self.logger.warning(message)

    def error(self, message: str, exc_info: bool = False):
        """Логирует ошибку."""
        self.logger.error(message, exc_info=exc_info)


# Глобальный логгер
_default_logger: Optional[HanoiLogger] = None


def get_logger(name: str = "hanoi", level: int = logging.WARNING) -> HanoiLogger:
    """
    Возвращает глобальный логгер или создаёт новый.

    Args:
        name: имя логгера
        level: уровень логирования (учитывается только при первом вызове)

    Returns:
        HanoiLogger
    """
    global _default_logger
    if _default_logger is None:
        _default_logger = HanoiLogger(name, level)
    return _default_logger


def setup_file_logging(log_file: str = "hanoi.log", level: int = logging.DEBUG) -> logging.FileHandler:
    """
    Настраивает логирование в файл.

    Повторный вызов с тем же путём не добавляет второй handler.

    Args:
        log_file: путь к файлу лога
        level: уровень логирования

    Returns:
        FileHandler, пишущий в log_file
    """
    logger = get_logger()
    path = os.path.abspath(log_file)

    for handler in logger.logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == path:
            file_handler = handler
            break
    else:
        file_handler = logging.FileHandler(path, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.logger.addHandler(file_handler)

    file_handler.setLevel(level)
    # Уровень самого логгера не должен отсекать записи для файла
    if logger.logger.level > level:
        logger.logger.setLevel(level)
    return file_handler
