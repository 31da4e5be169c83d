"""Logger configuration for cronselect.

Library modules only call `logger.debug/warning`; hosts and the CLI call
setup_logger() once to decide where those records go.
"""

import sys
from pathlib import Path

from loguru import logger

from cronselect.config.settings import settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(
    level: str | None = None,
    log_file: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """Configure loguru with a stderr sink and an optional rotating file sink.

    Args:
        level: Logging level; defaults to CRONSELECT_LOG_LEVEL
        log_file: Log file path; defaults to CRONSELECT_LOG_FILE (console only when unset)
        rotation: Log rotation size (e.g., "10 MB", "1 day")
        retention: Log retention period (e.g., "7 days", "1 month")
    """
    level = (level or settings.log_level).upper()
    log_file = log_file or settings.log_file

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
            encoding="utf-8",
        )

    logger.debug(f"Logger initialized (level={level}, file={log_file})")
