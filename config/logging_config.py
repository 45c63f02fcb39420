import sys
from typing import Optional
from loguru import logger

log = logger


def setup_logging(level: str = "INFO", log_file: Optional[str] = None):
    logger.remove()  # Remove default handler

    # Console handler
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )

    # Optional file handler, nothing is written locally unless asked
    if log_file:
        logger.add(
            log_file,
            rotation="10 MB",
            retention="1 month",
            level=level,
            compression="zip"
        )

    return logger
