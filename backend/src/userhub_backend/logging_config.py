"""Logging setup shared by the API and the CLI entrypoints."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Send application logs to stdout with a uniform format."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("userhub_backend").setLevel(level)
    # uvicorn's reloader is chatty at INFO
    logging.getLogger("watchfiles").setLevel(logging.ERROR)


__all__ = ["LOG_FORMAT", "configure_logging"]
