from __future__ import annotations

import logging
from typing import Optional

# level and file come from scoundrel.config.Settings
LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = LOG_LEVEL, filename: Optional[str] = None) -> None:
    """Call once at program start (scoundrel.main)."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        filename=filename,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
