"""
passforge logging.

Every module logs through a logger namespaced under 'passforge'. Generated
secrets are never passed to a logger; only the settings that shaped them.
"""

import logging
from typing import Optional, Union


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under 'passforge'."""
    return logging.getLogger(f"passforge.{name}")


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the passforge package logger.

    Args:
        level: Logging level or level name (default INFO)
        log_file: Optional file path for file logging
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger = logging.getLogger("passforge")
    logger.setLevel(level)

    fmt = logging.Formatter("%(asctime)s [%(name)s] %(levelname)s: %(message)s")

    # calling twice (e.g. CLI invoked repeatedly in tests) must not duplicate output
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    handler = logging.StreamHandler()
    handler.setFormatter(fmt)
    logger.addHandler(handler)

    if log_file:
        fh = logging.FileHandler(log_file)
        fh.setFormatter(fmt)
        logger.addHandler(fh)
    return logger
