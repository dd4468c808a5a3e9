"""
Logging setup for the users service.

One line per record on stdout. Request lines are emitted by
RequestLoggingMiddleware, so uvicorn's own access log is muted.
SQL statements are only logged when ``DATABASE_ECHO`` is enabled.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

QUIET_LOGGERS = ("uvicorn.access",)
SQL_LOGGER = "sqlalchemy.engine"


def configure_logging(level: str = "INFO", sql_echo: bool = False) -> None:
    """Configure root logging for the service.

    Args:
        level: Root log level name. Unknown names fall back to INFO.
        sql_echo: Emit every SQL statement at INFO through the root handler.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger(SQL_LOGGER).setLevel(logging.INFO if sql_echo else logging.WARNING)
