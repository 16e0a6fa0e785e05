"""
Root logger setup.

``setup_logging`` attaches a single console handler to the root logger.
It is a no-op when handlers already exist, so calling it from app startup
and again from tests or scripts is harmless.
"""

import logging
import os
from typing import Optional


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once, reading ``LOG_LEVEL`` when no level is given."""
    root = logging.getLogger()
    if root.handlers:
        return

    level = level or os.getenv("LOG_LEVEL", "INFO")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)
