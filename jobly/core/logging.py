from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import Optional


# Context variable for enriched logging
correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


class LoggingContextFilter(logging.Filter):
    """
    Logging filter that injects correlation_id from contextvars into each log
    record so formatters can include it.

    If no value is present in the context, a placeholder is used.
    """

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        cid = correlation_id_var.get()
        setattr(record, "correlation_id", cid or "-")
        return True


# PUBLIC_INTERFACE
def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure root logging with a structured format and context filter."""
    handler = logging.StreamHandler(stream=sys.stdout)
    fmt = "%(asctime)s | %(levelname)s | %(name)s | cid=%(correlation_id)s | %(message)s"
    formatter = logging.Formatter(fmt=fmt)
    handler.setFormatter(formatter)
    handler.addFilter(LoggingContextFilter())

    root = logging.getLogger()
    # Remove pre-existing default handlers configured elsewhere (e.g., basicConfig)
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
    root.setLevel(level)
