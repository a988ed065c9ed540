"""Process-level bootstrap helpers."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "[%(levelname)s] %(message)s"


def configure_logging(level: int = logging.WARNING) -> None:
    """Route log records to stderr so stdout stays parseable."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)
    # SQLAlchemy echoes through its own loggers; keep them at WARNING unless debugging.
    logging.getLogger("sqlalchemy").setLevel(level if level <= logging.DEBUG else logging.WARNING)


__all__ = ["LOG_FORMAT", "configure_logging"]
