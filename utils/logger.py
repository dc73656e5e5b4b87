# utils/logger.py

import logging
from typing import Dict

from config import get_settings


class AppLogger:
    _loggers: Dict[str, logging.Logger] = {}

    @staticmethod
    def get_logger(name: str = "recruiting") -> logging.Logger:
        if name in AppLogger._loggers:
            return AppLogger._loggers[name]

        level = logging.getLevelName(get_settings().log_level.upper())
        if not isinstance(level, int):
            level = logging.INFO

        logger = logging.getLogger(name)
        logger.setLevel(level)

        formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(formatter)
        logger.addHandler(ch)

        logger.propagate = False
        AppLogger._loggers[name] = logger
        return logger
