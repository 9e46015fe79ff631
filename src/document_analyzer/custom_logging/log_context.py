"""Logging setup that tags every line with the id of the HTTP request being served."""

import logging
from contextvars import ContextVar
from typing import Optional

from document_analyzer.config import settings

# Set by RequestContextMiddleware for the duration of one request; None outside a request
# (startup, shutdown). Each request runs in its own context, so concurrent requests keep
# their own ids.
request_id_context: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


class ContextFilter(logging.Filter):
    """Prefixes the message of each record with the current request id."""

    def filter(self, record):
        """Prefixes record.msg with the request id when a request is in progress.

        Args:
            record (logging.LogRecord): The log record to modify.

        Returns:
            bool: Always True; records are never dropped.
        """
        request_id = request_id_context.get()
        if request_id:
            record.msg = f"{request_id} {record.msg}"
        return True


def setup_logging():
    """Routes all service logging to stderr with request ids. Call once before serving."""
    root_logger = logging.getLogger()

    # Replace handlers installed by earlier calls or by the ASGI server.
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s", datefmt="%Y-%m-%d %H:%M:%S"))
    handler.addFilter(ContextFilter())

    root_logger.addHandler(handler)
    root_logger.setLevel(settings.LOG_LEVEL)
