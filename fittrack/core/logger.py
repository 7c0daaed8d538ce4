"""Logger configuration for fittrack.

Structured context is passed as keyword arguments (logger.info("msg", key=val))
and rendered through {extra}, so every sink shows it.
"""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level> | {extra}"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}"


def setup_logger(
    level: str = "INFO",
    log_file: str | None = None,
    *,
    serialize: bool = False,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """Replace loguru's default handler with fittrack's sinks.

    Args:
        level: Minimum level for every sink
        log_file: Optional log file path; parent directories are created
        serialize: Write the file sink as JSON lines instead of text
        rotation: File rotation size or interval (e.g., "10 MB", "1 day")
        retention: How long rotated files are kept (e.g., "7 days")
    """
    logger.remove()
    logger.configure(extra={"service": "fittrack"})
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
            serialize=serialize,
            backtrace=True,
            diagnose=False,
        )

    logger.debug("Logger configured", level=level, log_file=log_file, serialize=serialize)
