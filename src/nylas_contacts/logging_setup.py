import logging
import os
from typing import Optional

from nylas_contacts.settings import get_settings


def resolve_level(level: Optional[str] = None) -> int:
    """
    Pick the log level: explicit argument, then LOG_LEVEL, then APP_LOG_LEVEL
    (Settings.log_level). Unknown names fall back to INFO.
    """
    level_name = (level or os.getenv("LOG_LEVEL") or get_settings().log_level).upper()
    return getattr(logging, level_name, logging.INFO)


def setup_logging(level: Optional[str] = None) -> None:
    """Configure a single console handler via logging.basicConfig."""
    level_value = resolve_level(level)

    logging.basicConfig(
        level=level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # urllib3 logs one line per pooled connection at DEBUG
    logging.getLogger("urllib3").setLevel(max(level_value, logging.INFO))
