"""
Handler factories for logging.dictConfig, plus the persistent database sink.

Every factory returns a plain dictConfig handler mapping; the builder decides which
ones are wired in.
"""

import getpass
import logging
from datetime import datetime, timezone
from pathlib import Path

from sqlalchemy import create_engine, insert
from sqlalchemy.engine import Engine

from warehouse_api.config.settings import Settings
from warehouse_api.models.log_entry import LogEntry


def get_console_handler(settings: Settings) -> dict:
    """
    Console/stream handler (stderr). Formatter follows LOG_FORMAT, level follows
    LOG_LEVEL; the builder's "formatters" and "filters" sections must define the
    names referenced here.
    """
    return {
        "class": "logging.StreamHandler",
        "formatter": "json" if settings.LOG_FORMAT == "json" else "standard",
        "level": settings.LOG_LEVEL,
        "filters": ["request_id", "redact"],
    }


def get_file_handler(settings: Settings) -> dict:
    file_path = str(Path(settings.LOG_DIR) / "app.log")
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "formatter": "json" if settings.LOG_FORMAT == "json" else "standard",
        "level": settings.LOG_LEVEL,
        "filename": file_path,
        "maxBytes": settings.LOG_MAX_BYTES,
        "backupCount": settings.LOG_BACKUP_COUNT,
        "encoding": "utf-8",
        "filters": ["request_id", "redact"],
    }


# Errors only, always structured
def get_error_file_handler(settings: Settings) -> dict:
    error_file_path = str(Path(settings.LOG_DIR) / "errors.log")
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "formatter": "json",
        "level": "ERROR",
        "filename": error_file_path,
        "maxBytes": settings.LOG_MAX_BYTES,
        "backupCount": settings.LOG_BACKUP_COUNT,
        "encoding": "utf-8",
        "filters": ["request_id", "redact"],
    }


def get_error_console_handler(settings: Settings) -> dict:
    return {
        "class": "logging.StreamHandler",
        "formatter": "json",
        "level": "ERROR",
        "filters": ["request_id", "redact"],
    }


def get_database_handler(settings: Settings) -> dict:
    return {
        "()": DatabaseLogHandler,
        "url": settings.LOG_DATABASE_URL,
        "level": "ERROR",
        "filters": ["request_id", "redact"],
    }


class DatabaseLogHandler(logging.Handler):
    """
    Append records to the `logs` table through a synchronous engine.

    Writes block, so with LOG_USE_QUEUE enabled this handler runs on the
    QueueListener thread and request handling never waits on it.
    """

    def __init__(self, url: str | None = None, *, engine: Engine | None = None, level=logging.NOTSET):
        super().__init__(level=level)
        if engine is None:
            if not url:
                raise ValueError("DatabaseLogHandler needs a database url or an engine")
            engine = create_engine(url, pool_pre_ping=True)
        self.engine = engine
        LogEntry.__table__.create(self.engine, checkfirst=True)
        self._user = _current_user()

    def emit(self, record: logging.LogRecord) -> None:
        try:
            values = {
                "time_stamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
                "user": self._user,
                "file_path": record.pathname,
                "function_line": str(record.lineno),
                "caller_function": record.funcName,
                "msg": self.format(record),
            }
            with self.engine.begin() as conn:
                conn.execute(insert(LogEntry.__table__).values(**values))
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        try:
            self.engine.dispose()
        finally:
            super().close()


def _current_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "unknown"
