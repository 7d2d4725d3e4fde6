import sys
from pathlib import Path
from typing import Optional

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"

_initialized = False


def init_logger(level: str = "INFO", log_file: Optional[str] = None, force: bool = False) -> None:
    """Configure loguru sinks once per process (stderr + optional rotating file)."""
    global _initialized
    if _initialized and not force:
        return

    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT, colorize=True, backtrace=True, diagnose=False)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=level.upper(),
            format=LOG_FORMAT.replace("{level: <8}", "{level}"),
            rotation="10 MB",
            retention="7 days",
            encoding="utf-8",
        )

    _initialized = True
    logger.debug(f"logger initialized: level={level}, file={log_file}")
