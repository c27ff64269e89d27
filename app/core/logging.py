"""Logging setup for the ordering service."""
import logging
import sys
from typing import Optional

from app.core.config import settings

# Libraries that log every request at INFO
QUIET_LOGGERS = ("httpx", "uvicorn.access", "multipart")


def setup_logging(level: Optional[str] = None) -> None:
    """Send application logs to stdout at the configured level."""
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        f"[STARTUP] Logging at {level_name} for {settings.restaurant_name}"
    )
