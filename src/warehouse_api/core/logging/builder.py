"""
Logging builder: create and apply a dictConfig logging configuration and optionally
move the real handlers behind a QueueListener.

Queue mode (LOG_USE_QUEUE) makes the process-wide sink safe for concurrent producers:
request tasks only enqueue, one background thread writes to console, files and the
database. A bounded queue (LOG_QUEUE_MAX_SIZE > 0) with LOG_QUEUE_BLOCKING=False drops
records instead of stalling producers; drops are counted in get_queue_stats().
"""

from __future__ import annotations

from pathlib import Path
import logging
import logging.config
import queue as _queue
import threading
import contextlib
from typing import Optional
from logging.handlers import QueueHandler, QueueListener

from warehouse_api.config.settings import Settings
from warehouse_api.utils.logging import get_project_name

from .formatters import JsonFormatter, ColorFormatter
from .filters import RequestIdFilter, RedactFilter
from .handlers import (
    get_console_handler,
    get_file_handler,
    get_error_file_handler,
    get_error_console_handler,
    get_database_handler,
)

_QUEUE_LISTENER: Optional[QueueListener] = None
_QUEUE: Optional[_queue.Queue] = None

_DROPPED_LOGS_COUNT = 0
_DROPPED_LOGS_LOCK = threading.Lock()
_DROP_WARNING_THRESHOLD = 100

logger = logging.getLogger(__name__)


class NonBlockingQueueHandler(QueueHandler):
    """
    QueueHandler that never blocks the producer: when the bounded queue is full the
    record is dropped and counted.
    """

    def emit(self, record: logging.LogRecord) -> None:
        global _DROPPED_LOGS_COUNT
        try:
            self.queue.put_nowait(self.prepare(record))
        except _queue.Full:
            with _DROPPED_LOGS_LOCK:
                _DROPPED_LOGS_COUNT += 1
                dropped = _DROPPED_LOGS_COUNT
            if _DROP_WARNING_THRESHOLD and dropped % _DROP_WARNING_THRESHOLD == 0:
                _warn_dropped(self, dropped)


def _warn_dropped(handler: QueueHandler, dropped: int) -> None:
    warning = logging.LogRecord(
        name=__name__, level=logging.WARNING, pathname=__file__, lineno=0,
        msg="Dropped %d log records because the queue was full", args=(dropped,), exc_info=None,
    )
    warning.request_id = "-"
    # Best effort; the warning is lost too while the queue stays full.
    with contextlib.suppress(_queue.Full):
        handler.queue.put_nowait(warning)


def get_queue_stats() -> dict:
    """Return small diagnostics about queue usage (dropped logs count)."""
    with _DROPPED_LOGS_LOCK:
        return {"dropped_logs": _DROPPED_LOGS_COUNT, "queue_present": _QUEUE is not None}


def make_dict_config(settings: Settings) -> dict:
    """
    Build the dictConfig mapping for `settings`.

      - formatters: "standard" (colour in text mode) and "json"
      - filters: "request_id", "redact"
      - handlers: console, plus file/error_file when writing to LOG_DIR or
        error_console otherwise, plus "database" when LOG_DATABASE_URL is set
      - loggers: root, uvicorn.error, uvicorn.access, sqlalchemy.engine
    """
    formatters = {
        "standard": {
            "()": ColorFormatter if settings.LOG_FORMAT == "text" else logging.Formatter,
            "format": "%(asctime)s | %(levelname)s | %(name)s | %(request_id)s | %(message)s",
        },
        "json": {
            "()": JsonFormatter,
            "env": settings.ENV,
            "service": get_project_name(),
        },
    }

    filters = {
        "request_id": {"()": RequestIdFilter},
        "redact": {"()": RedactFilter},
    }

    handlers: dict[str, dict] = {"console": get_console_handler(settings)}

    if (not settings.LOG_TO_STDOUT) and (settings.LOG_DIR):
        handlers["file"] = get_file_handler(settings)
        handlers["error_file"] = get_error_file_handler(settings)
    else:
        handlers["error_console"] = get_error_console_handler(settings)

    if getattr(settings, "LOG_DATABASE_URL", None):
        handlers["database"] = get_database_handler(settings)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "filters": filters,
        "handlers": handlers,
        "loggers": {
            "": {
                "handlers": list(handlers.keys()),
                "level": settings.LOG_LEVEL,
                "propagate": True,
            },
            "uvicorn.error": {
                "level": settings.LOG_LEVEL,
                "handlers": list(handlers.keys()),
                "propagate": False,
            },
            "uvicorn.access": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False,
            },
            # SQL statements may carry row values
            "sqlalchemy.engine": {
                "level": "DEBUG" if settings.ENABLE_SQL_LOGGING else "WARNING",
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }


def setup_logging(settings: Settings) -> None:
    """
    Apply the dictConfig built from `settings` and, with LOG_USE_QUEUE, hand the root
    handlers to a QueueListener thread.

    The producer-side QueueHandler carries RequestIdFilter and RedactFilter because the
    request id contextvar only exists in the producing task.
    """
    global _QUEUE_LISTENER, _QUEUE, _DROP_WARNING_THRESHOLD

    # Re-running setup (tests, reload) must not leave a second listener behind.
    stop_queue_logging()

    if (not settings.LOG_TO_STDOUT) and (settings.LOG_DIR):
        Path(settings.LOG_DIR).mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(make_dict_config(settings))
    root_logger = logging.getLogger()
    root_logger.addFilter(RequestIdFilter())

    if not getattr(settings, "LOG_USE_QUEUE", False):
        return

    max_size = getattr(settings, "LOG_QUEUE_MAX_SIZE", 0) or 0
    blocking = bool(getattr(settings, "LOG_QUEUE_BLOCKING", False))
    _DROP_WARNING_THRESHOLD = int(getattr(settings, "LOG_QUEUE_DROP_WARNING_THRESHOLD", 100))

    current_handlers = list(root_logger.handlers)
    if not current_handlers:
        return

    # Detach the real handlers everywhere so they only run on the listener thread.
    handlers_to_move = set(current_handlers)
    for logger_obj in list(logging.Logger.manager.loggerDict.values()):
        if isinstance(logger_obj, logging.Logger):
            for h in list(logger_obj.handlers):
                if h in handlers_to_move:
                    logger_obj.removeHandler(h)
    for h in list(root_logger.handlers):
        root_logger.removeHandler(h)

    log_queue: _queue.Queue = _queue.Queue(max_size if max_size > 0 else 0)

    if max_size > 0 and not blocking:
        qh: QueueHandler = NonBlockingQueueHandler(log_queue)
    else:
        qh = QueueHandler(log_queue)
    qh.addFilter(RequestIdFilter())
    qh.addFilter(RedactFilter())

    listener = QueueListener(log_queue, *current_handlers, respect_handler_level=True)
    listener.start()
    root_logger.addHandler(qh)

    _QUEUE_LISTENER = listener
    _QUEUE = log_queue


def stop_queue_logging() -> None:
    """
    Flush and stop the QueueListener, then clear module refs.
    """
    global _QUEUE_LISTENER, _QUEUE
    listener = _QUEUE_LISTENER
    if listener is None:
        return

    try:
        # stop() drains the queue and joins the listener thread
        listener.stop()
    except RuntimeError:
        logger.exception("Failed to stop QueueListener cleanly")
    finally:
        for handler in listener.handlers:
            handler.close()
        _QUEUE_LISTENER = None
        _QUEUE = None
