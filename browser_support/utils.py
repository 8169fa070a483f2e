import logging
from typing import Optional


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Return the named logger, leaving handlers and propagation to the application.

    Input:
        - name: logger name, usually __name__
        - level: optional level name ("DEBUG", "WARNING", ...); None keeps the current level
    Output: logging.Logger
    """
    logger = logging.getLogger(name)
    if level:
        logger.setLevel(level.upper())
    return logger
