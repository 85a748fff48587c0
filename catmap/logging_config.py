"""Настройка логирования для пространства имён `catmap`."""
import logging
import sys
from typing import List, Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'


def _build_handlers(level: int, log_file: Optional[str]) -> List[logging.Handler]:
    """Консольный обработчик (stdout) и, если задан путь, файловый."""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Настраивает логгер пакета `catmap` и возвращает его.

    Повторный вызов заменяет обработчики, а не добавляет новые. Отладочный
    вывод Pillow (разбор PNG-чанков) не поднимается ниже INFO даже при DEBUG.

    Args:
        level: Уровень логирования (logging.DEBUG, logging.INFO, ...).
        log_file: Необязательный путь к файлу лога.
    """
    logger = logging.getLogger("catmap")
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in _build_handlers(level, log_file):
        logger.addHandler(handler)

    logging.getLogger("PIL").setLevel(max(level, logging.INFO))

    logger.debug("Logging initialized (level=%s, file=%s)", logging.getLevelName(level), log_file)
    return logger
