import logging
from typing import Optional

from .exceptions import CampfireConfigError


def setup_logger(name: str = "campfire", level: int = logging.INFO,
                 log_file: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(message)s')

    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file and not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        try:
            file_handler = logging.FileHandler(log_file)
        except OSError as e:
            raise CampfireConfigError(f"Cannot open log file {log_file!r}: {e}") from e
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
