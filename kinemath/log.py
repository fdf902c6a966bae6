# log.py
# ---------------------------------------------------------------
# Package logger. Silent by default (NullHandler); call init_logger()
# from scripts to get console output.
# ---------------------------------------------------------------

import logging

LOGGER_NAME = "kinemath"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def init_logger(level: int = logging.INFO) -> logging.Logger:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger of the package logger, e.g. get_logger("config") -> kinemath.config."""
    return logger.getChild(name)
