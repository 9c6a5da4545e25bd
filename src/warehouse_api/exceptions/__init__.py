# warehouse_api/exceptions/
# ├── base.py                  service errors (NotFoundError, AlreadyExistsError, ...) -> HTTP status
# ├── storage.py               StorageError + StorageErrorKind, raised by repositories
# ├── integrity_classifier.py  driver error -> constraint class (Postgres, MySQL, SQLite)
# └── mapper.py                db_error_handler, translate_storage_error

from .base import (
    ServiceError,
    BadRequestError,
    NotFoundError,
    AlreadyExistsError,
    ForeignKeyNotFoundError,
    InvalidValueError,
    InternalError,
)
from .storage import StorageError, StorageErrorKind, RecordNotFoundError

__all__ = [
    "ServiceError",
    "BadRequestError",
    "NotFoundError",
    "AlreadyExistsError",
    "ForeignKeyNotFoundError",
    "InvalidValueError",
    "InternalError",
    "StorageError",
    "StorageErrorKind",
    "RecordNotFoundError",
]
