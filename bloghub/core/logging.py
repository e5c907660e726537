"""
Logging setup for the API process.

Every module logs through ``logging.getLogger(__name__)``; this only decides
the format and the levels once at startup.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# httpx logs every GitHub request URL at INFO; SQL echo is driven by DEBUG
# through the engine, not by the root level.
QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine")


def configure_logging(level: str = "INFO") -> None:
    """Send application logs to stdout and keep library loggers at WARNING."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stdout)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


__all__ = ["LOG_FORMAT", "QUIET_LOGGERS", "configure_logging"]
