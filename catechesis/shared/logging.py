"""Logging configuration for the application.

Every record carries the current request id (set by RequestIDMiddleware)
so that denials and per-item batch failures can be traced to a request.
"""

import logging
import sys
from contextvars import ContextVar

from catechesis.core.config import get_settings

# Current request id (set by middleware, read by the log filter).
current_request_id: ContextVar[str | None] = ContextVar(
    "current_request_id", default=None
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"


class RequestIdFilter(logging.Filter):
    """Inject request_id into every record ('-' outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = current_request_id.get() or "-"
        return True


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdFilter())
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[handler],
        force=True,
    )

