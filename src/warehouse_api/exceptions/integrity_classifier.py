"""
Classify driver errors into constraint classes.

Three sources, most precise first:
  1. PostgreSQL SQLSTATE (psycopg exposes `sqlstate`/`pgcode`) plus `diag.constraint_name`
  2. MySQL error numbers (first element of the DBAPI exception args)
  3. Message keywords, for SQLite and anything else

The classes are internal labels: each pins the StorageErrorKind that the mapper
raises to repository callers.
"""

import logging
import re
from enum import Enum
from typing import Type

from sqlalchemy.exc import DataError, DBAPIError, IntegrityError

from .storage import StorageError, StorageErrorKind

logger = logging.getLogger(__name__)


class ConstraintViolationError(StorageError):
    """Base for integrity/constraint violations."""


class UniqueConstraintError(ConstraintViolationError):
    kind = StorageErrorKind.DUPLICATE_KEY


class ForeignKeyConstraintError(ConstraintViolationError):
    kind = StorageErrorKind.FOREIGN_KEY_MISSING


class ReferencedRowError(ConstraintViolationError):
    """A parent row cannot be removed while child rows point at it; nothing is missing."""
    kind = StorageErrorKind.INTERNAL


class NotNullConstraintError(ConstraintViolationError):
    kind = StorageErrorKind.VALUE_OUT_OF_RANGE


class CheckConstraintError(ConstraintViolationError):
    kind = StorageErrorKind.VALUE_OUT_OF_RANGE


class ValueRangeError(ConstraintViolationError):
    """Bad date, string too long, number out of range."""
    kind = StorageErrorKind.VALUE_OUT_OF_RANGE


class UnknownIntegrityError(ConstraintViolationError):
    kind = StorageErrorKind.INTERNAL


class PostgresErrorCodes(str, Enum):
    UNIQUE_VIOLATION = "23505"
    NOT_NULL_VIOLATION = "23502"
    FOREIGN_KEY_VIOLATION = "23503"
    CHECK_VIOLATION = "23514"
    STRING_DATA_RIGHT_TRUNCATION = "22001"
    NUMERIC_VALUE_OUT_OF_RANGE = "22003"
    INVALID_DATETIME_FORMAT = "22007"
    DATETIME_FIELD_OVERFLOW = "22008"


PGCODE_EXCEPTION_MAP = {
    PostgresErrorCodes.UNIQUE_VIOLATION: UniqueConstraintError,
    PostgresErrorCodes.NOT_NULL_VIOLATION: NotNullConstraintError,
    PostgresErrorCodes.FOREIGN_KEY_VIOLATION: ForeignKeyConstraintError,
    PostgresErrorCodes.CHECK_VIOLATION: CheckConstraintError,
    PostgresErrorCodes.STRING_DATA_RIGHT_TRUNCATION: ValueRangeError,
    PostgresErrorCodes.NUMERIC_VALUE_OUT_OF_RANGE: ValueRangeError,
    PostgresErrorCodes.INVALID_DATETIME_FORMAT: ValueRangeError,
    PostgresErrorCodes.DATETIME_FIELD_OVERFLOW: ValueRangeError,
}


class MySQLErrorCodes(int, Enum):
    DUPLICATE_ENTRY = 1062
    NO_REFERENCED_ROW = 1452
    ROW_IS_REFERENCED = 1451
    COLUMN_CANNOT_BE_NULL = 1048
    DATA_TOO_LONG = 1406
    OUT_OF_RANGE_VALUE = 1264
    TRUNCATED_WRONG_VALUE = 1292


MYSQL_ERRNO_EXCEPTION_MAP = {
    MySQLErrorCodes.DUPLICATE_ENTRY: UniqueConstraintError,
    MySQLErrorCodes.NO_REFERENCED_ROW: ForeignKeyConstraintError,
    MySQLErrorCodes.ROW_IS_REFERENCED: ReferencedRowError,
    MySQLErrorCodes.COLUMN_CANNOT_BE_NULL: NotNullConstraintError,
    MySQLErrorCodes.DATA_TOO_LONG: ValueRangeError,
    MySQLErrorCodes.OUT_OF_RANGE_VALUE: ValueRangeError,
    MySQLErrorCodes.TRUNCATED_WRONG_VALUE: ValueRangeError,
}

_MYSQL_CONSTRAINT_RE = re.compile(r"CONSTRAINT `(?P<name>[^`]+)`")


def _match_any(msg: str, keywords: list[str]) -> bool:
    return any(keyword in msg for keyword in keywords)


def _is_referenced_row(msg: str) -> bool:
    # delete/update side of a foreign key, as PostgreSQL and MySQL word it
    return _match_any(msg.lower(), ["is still referenced", "cannot delete or update a parent row"])


def _classify_from_postgres_diag(orig) -> tuple[Type[ConstraintViolationError] | None, str | None]:
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if not sqlstate:
        return None, None

    diag = getattr(orig, "diag", None)
    constraint_name = getattr(diag, "constraint_name", None) if diag else None

    exception_class = PGCODE_EXCEPTION_MAP.get(sqlstate)
    # 23503 covers both directions of a foreign key
    if exception_class is ForeignKeyConstraintError and _is_referenced_row(str(orig)):
        exception_class = ReferencedRowError
    if exception_class:
        logger.debug(
            "classifier.postgres",
            extra={"sqlstate": sqlstate, "constraint_name": constraint_name},
        )
        return exception_class, constraint_name

    logger.warning(
        "classifier.postgres.unknown_code",
        extra={"sqlstate": sqlstate, "constraint_name": constraint_name},
    )
    return None, constraint_name


def _classify_from_mysql_errno(orig) -> tuple[Type[ConstraintViolationError] | None, str | None]:
    args = getattr(orig, "args", None) or ()
    if not args or not isinstance(args[0], int):
        return None, None

    try:
        exception_class = MYSQL_ERRNO_EXCEPTION_MAP.get(MySQLErrorCodes(args[0]))
    except ValueError:
        logger.warning("classifier.mysql.unknown_errno", extra={"errno": args[0]})
        return None, None

    match = _MYSQL_CONSTRAINT_RE.search(str(orig))
    return exception_class, match.group("name") if match else None


def _classify_from_generic_message(msg: str) -> Type[ConstraintViolationError] | None:
    """
    Keyword fallback (SQLite, unknown drivers).
    """
    normalized = msg.lower()

    if _is_referenced_row(normalized):
        return ReferencedRowError
    if _match_any(normalized, ["unique constraint", "unique failed", "unique violation", "duplicate"]):
        return UniqueConstraintError
    if _match_any(normalized, ["foreign key constraint", "foreign key", "is not present in table"]):
        return ForeignKeyConstraintError
    if _match_any(normalized, ["not null constraint", "null value in column"]):
        return NotNullConstraintError
    if _match_any(normalized, ["check constraint", "check failed"]):
        return CheckConstraintError
    if _match_any(normalized, ["data too long", "out of range", "incorrect date", "invalid input syntax for type date"]):
        return ValueRangeError
    return None


def classify_db_error(exc: DBAPIError) -> tuple[Type[ConstraintViolationError], str | None]:
    """
    Classify a SQLAlchemy DBAPIError into a ConstraintViolationError subclass.

    Returns:
        (exception class, constraint name if the driver reported one).
        Unrecognised errors come back as UnknownIntegrityError, except DataError
        which is always a value problem.
    """
    orig = exc.orig

    exception_class, constraint_name = _classify_from_postgres_diag(orig)
    if exception_class is None:
        exception_class, mysql_constraint = _classify_from_mysql_errno(orig)
        constraint_name = constraint_name or mysql_constraint
    if exception_class is None:
        exception_class = _classify_from_generic_message(str(orig) if orig is not None else str(exc))

    if exception_class is not None:
        return exception_class, constraint_name
    if isinstance(exc, DataError):
        return ValueRangeError, constraint_name

    if isinstance(exc, IntegrityError):
        logger.warning(
            "classifier.unknown_integrity_error",
            extra={"message_snippet": str(orig)[:200]},
        )
    return UnknownIntegrityError, constraint_name
