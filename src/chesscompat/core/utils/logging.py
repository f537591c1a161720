"""Loguru sinks for the chesscompat CLI and library users.

Library modules only call ``logger.debug``; nothing is configured on
import. Applications call :func:`setup_logging` once with the ``logging``
section of their :class:`~chesscompat.core.configs.CompatConfig`.
"""

import sys
from pathlib import Path

from loguru import logger

from chesscompat.core.configs.schema import LoggingConfig

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Replace all loguru sinks with the ones described by ``config``.

    Args:
        config: Logging section of the configuration. Defaults to
            ``LoggingConfig()`` (INFO to stderr, no file).
    """
    config = config if config is not None else LoggingConfig()

    logger.remove()
    logger.add(sys.stderr, level=config.level, format=CONSOLE_FORMAT, colorize=True)

    if config.file:
        log_path = Path(config.file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            level=config.level,
            format=FILE_FORMAT,
            rotation=config.rotation,
            retention=config.retention,
            compression="gz",
        )

    sinks = f"stderr and {config.file}" if config.file else "stderr"
    logger.debug(f"Logging to {sinks} at {config.level}")
