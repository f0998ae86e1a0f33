"""Runtime settings read from the environment, and logging setup."""

from __future__ import annotations

import logging
import os

LOG_LEVEL = os.environ.get("AFEVAL_LOG_LEVEL", "INFO")
MAX_ENUMERATION_NODES = int(os.environ.get("AFEVAL_MAX_NODES", "20"))

LOG_FORMAT = "%(asctime)s │ %(name)-14s │ %(levelname)-7s │ %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def configure_logging(level: str | None = None) -> None:
    """Install the console handler for the afeval.* loggers."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
    logging.getLogger("afeval.config").debug(
        f"Logging configured (max enumeration nodes: {MAX_ENUMERATION_NODES})"
    )
