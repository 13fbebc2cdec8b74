"""
Logging setup using Loguru.

The blessed UI owns the screen, so logs go to a file only.
"""

from pathlib import Path

from loguru import logger


def setup_loguru(log_file: Path, level: str = "INFO") -> None:
    """
    Configure loguru for file-only logging (blessed UI handles console display).

    Args:
        log_file: Path to log file
        level: Minimum level for file logging (DEBUG, INFO, WARNING, ERROR)
    """
    # Remove default stderr handler, it would draw over the UI
    logger.remove()

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        rotation="10 MB",
        retention=5,  # Keep 5 backup files
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        enqueue=False,
    )

    logger.info(f"Loguru initialized: {log_file} (level={level})")
