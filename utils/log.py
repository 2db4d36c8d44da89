"""Logger factory"""

import logging

from config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def create_logger(name: str, level: int = None, propagate: bool = False) -> logging.Logger:
    """Create a module logger writing to stderr at the configured level"""
    _level = level if level is not None else getattr(
        logging, settings.LOG_LEVEL.upper(), logging.INFO
    )
    logger = logging.getLogger(name)
    logger.setLevel(_level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.propagate = propagate
    return logger
