"""Logging setup for roomtypes.

Registry and policy modules log through loguru's global logger; this
module only decides where those records go, driven by LoggingConfig.
"""

import sys
from typing import List, Optional

from loguru import logger

from roomtypes.config.schema import LoggingConfig

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_logging(settings: Optional[LoggingConfig] = None) -> List[int]:
    """
    Route roomtypes logs to the console and the configured log file.

    Existing sinks are replaced. The console honors ``settings.level``
    (DEBUG when verbose); the file always records DEBUG and above.

    Args:
        settings: Logging settings; defaults to LoggingConfig()

    Returns:
        Handler ids of the console and file sinks
    """
    settings = settings or LoggingConfig()
    log_path = settings.log_path
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger.remove()
    console_id = logger.add(sys.stderr, level=settings.console_level, format=CONSOLE_FORMAT)
    file_id = logger.add(
        str(log_path),
        level="DEBUG",
        format=FILE_FORMAT,
        rotation="10 MB",
        retention="1 week",
        compression="zip",
    )

    logger.debug(f"Logging to {log_path} (console level {settings.console_level})")
    return [console_id, file_id]
