"""
Map driver errors to storage kinds, and storage kinds to service errors.

Repositories run every statement inside `db_error_handler`; services translate the
resulting StorageError with `translate_storage_error` and their own messages.
"""

import re
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any, Mapping

from sqlalchemy import select
from sqlalchemy.exc import DBAPIError, NoResultFound, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .base import (
    AlreadyExistsError,
    ForeignKeyNotFoundError,
    InternalError,
    InvalidValueError,
    NotFoundError,
    ServiceError,
)
from .integrity_classifier import (
    ConstraintViolationError,
    ForeignKeyConstraintError,
    ReferencedRowError,
    UniqueConstraintError,
    UnknownIntegrityError,
    classify_db_error,
)
from .storage import RecordNotFoundError, StorageError, StorageErrorKind

logger = logging.getLogger(__name__)


def _raw_message(exc: DBAPIError) -> str:
    return str(exc.orig) if exc.orig is not None else str(exc)


def _extract_columns_postgres(msg: str) -> list[str] | None:
    """
    'null value in column "cid" violates not-null constraint'
    'DETAIL:  Key (warehouse_code)=(W1) already exists.'
    """
    m = re.search(r'null value in column "(?P<col>[^"]+)"', msg, flags=re.IGNORECASE)
    if m:
        return [m.group("col")]
    m = re.search(r'key \((?P<cols>[^)]+)\)=', msg, flags=re.IGNORECASE)
    if m:
        return [c.strip().strip('"') for c in m.group("cols").split(",")]
    return None


def _extract_columns_sqlite(msg: str) -> list[str] | None:
    m = re.search(r'(?:UNIQUE|NOT NULL) constraint failed: (?P<cols>.+)$', msg, flags=re.IGNORECASE)
    if m:
        return [c.split('.')[-1].strip() for c in re.split(r',\s*', m.group("cols"))]
    return None


def _extract_columns_mysql(msg: str) -> list[str] | None:
    m = re.search(r"FOREIGN KEY \(`(?P<col>[^`]+)`\)", msg, flags=re.IGNORECASE)
    if m:
        return [m.group("col")]
    m = re.search(r"Duplicate entry .* for key '(?:[^'.]+\.)?(?P<key>[^']+)'", msg, flags=re.IGNORECASE)
    if m:
        return [m.group("key")]
    m = re.search(r"for column '(?P<col>[^']+)'", msg, flags=re.IGNORECASE)
    if m:
        return [m.group("col")]
    return None


def extract_columns(exc: DBAPIError) -> list[str] | None:
    """
    Best-effort extraction of column names from the driver message.
    """
    msg = _raw_message(exc)
    if not msg:
        return None
    return (
        _extract_columns_postgres(msg)
        or _extract_columns_sqlite(msg)
        or _extract_columns_mysql(msg)
    )


def _foreign_keys(model) -> list:
    """Foreign keys of `model` in column order."""
    return [fk for column in model.__table__.columns for fk in column.foreign_keys]


def resolve_foreign_key_parent(model, constraint_name: str | None, message: str) -> tuple[str, str] | None:
    """
    Return (column, referred table) of the violated foreign key, or None.

    Tries the constraint name first (it follows the metadata naming convention),
    then the column or referred table quoted in the driver message.
    """
    fks = _foreign_keys(model)

    if constraint_name:
        for fk in fks:
            if fk.constraint is not None and fk.constraint.name == constraint_name:
                return fk.parent.name, fk.column.table.name

    for fk in fks:
        column, table = fk.parent.name, fk.column.table.name
        if re.search(rf'key \({re.escape(column)}\)', message, flags=re.IGNORECASE):
            return column, table
        if re.search(rf'(?:references|in table)\s+["`]{re.escape(table)}["`]', message, flags=re.IGNORECASE):
            return column, table
    return None


async def probe_missing_parent(db: AsyncSession, model, values: Mapping[str, Any]) -> tuple[str, str] | None:
    """
    Look up each referenced parent for the value being written; the first one that
    does not exist is the culprit. Used when the driver says nothing (SQLite).
    """
    for fk in _foreign_keys(model):
        value = values.get(fk.parent.name)
        if value is None:
            continue
        try:
            found = await db.scalar(select(fk.column).where(fk.column == value).limit(1))
        except SQLAlchemyError:
            logger.warning(
                "mapper.foreign_key_probe_failed",
                extra={"model": model.__name__, "column": fk.parent.name},
                exc_info=True,
            )
            return None
        if found is None:
            return fk.parent.name, fk.column.table.name
    return None


def raise_mapped_db_error(
    exc: DBAPIError,
    exc_cls: type[ConstraintViolationError],
    constraint_name: str | None,
    model_name: str,
    parent: tuple[str, str] | None = None,
) -> None:
    """
    Raise the StorageError matching the classification, populating `.fields`,
    `.constraint` and, for foreign keys, `.parent`.
    """
    columns = extract_columns(exc)

    if exc_cls is UniqueConstraintError:
        logger.info(
            "mapper.duplicate_detected",
            extra={"model": model_name, "fields": columns, "constraint": constraint_name},
        )
        raise exc_cls(f"{model_name} already exists", fields=columns, constraint=constraint_name) from exc

    if exc_cls is ForeignKeyConstraintError:
        column, table = parent if parent else (None, None)
        logger.info(
            "mapper.foreign_key_violation",
            extra={"model": model_name, "fields": columns or [column], "parent": table,
                   "constraint": constraint_name},
        )
        raise exc_cls(
            f"{model_name} references a missing {table or 'parent'}",
            fields=columns or ([column] if column else None),
            constraint=constraint_name,
            parent=table,
        ) from exc

    if exc_cls is ReferencedRowError:
        logger.info(
            "mapper.row_still_referenced",
            extra={"model": model_name, "constraint": constraint_name},
        )
        raise exc_cls(f"{model_name} is still referenced by other records", constraint=constraint_name) from exc

    if exc_cls is UnknownIntegrityError:
        logger.warning(
            "mapper.unknown_db_error",
            extra={"model": model_name, "constraint": constraint_name, "error_type": type(exc.orig).__name__},
        )
        logger.debug("mapper.unknown_db_error_raw", extra={"model": model_name, "raw": _raw_message(exc)})
        raise exc_cls(f"{model_name} database error", constraint=constraint_name) from exc

    logger.info(
        "mapper.invalid_value",
        extra={"model": model_name, "fields": columns, "constraint": constraint_name},
    )
    raise exc_cls(f"{model_name} has an invalid value", fields=columns, constraint=constraint_name) from exc


async def _rollback(db: AsyncSession, model_name: str) -> None:
    try:
        await db.rollback()
    except SQLAlchemyError:
        logger.exception("mapper.rollback_failed", extra={"model": model_name})


@asynccontextmanager
async def db_error_handler(db: AsyncSession, model, values: Mapping[str, Any] | None = None):
    """
    Usage:
        async with db_error_handler(self.db, self.model, values):
            ... DB ops that may fail ...

    Rolls back on error and raises a StorageError. `values` (the columns being
    written) lets foreign-key failures name the missing parent on drivers that
    don't report it.
    """
    model_name = model.__name__
    try:
        yield
    except StorageError:
        await _rollback(db, model_name)
        raise
    except DBAPIError as exc:
        await _rollback(db, model_name)
        exc_cls, constraint_name = classify_db_error(exc)
        parent = None
        if exc_cls is ForeignKeyConstraintError:
            parent = resolve_foreign_key_parent(model, constraint_name, _raw_message(exc))
            if parent is None and values:
                parent = await probe_missing_parent(db, model, values)
        raise_mapped_db_error(exc, exc_cls, constraint_name, model_name, parent)
    except NoResultFound as exc:
        await _rollback(db, model_name)
        raise RecordNotFoundError(f"{model_name} not found") from exc
    except SQLAlchemyError as exc:
        await _rollback(db, model_name)
        logger.exception("mapper.unexpected_db_error", extra={"model": model_name})
        raise StorageError(f"Failed to operate on {model_name}") from exc


@dataclass(frozen=True)
class ErrorMessages:
    """
    Client-facing messages of one resource, one per storage kind.

    `foreign_keys` maps a referred table name to the message naming that parent.
    """

    not_found: str
    already_exists: str = "already exists"
    foreign_keys: Mapping[str, str] = field(default_factory=dict)
    foreign_key_default: str = "a referenced entity does not exist"
    invalid_value: str = "a field has an invalid value"


def translate_storage_error(exc: StorageError, messages: ErrorMessages) -> ServiceError:
    """Service error for a storage error; the caller raises it `from exc`."""
    if exc.kind is StorageErrorKind.NOT_FOUND:
        return NotFoundError(messages.not_found, fields=exc.fields)
    if exc.kind is StorageErrorKind.DUPLICATE_KEY:
        return AlreadyExistsError(messages.already_exists, fields=exc.fields)
    if exc.kind is StorageErrorKind.FOREIGN_KEY_MISSING:
        message = messages.foreign_keys.get(exc.parent or "", messages.foreign_key_default)
        return ForeignKeyNotFoundError(message, entity=exc.parent, fields=exc.fields)
    if exc.kind is StorageErrorKind.VALUE_OUT_OF_RANGE:
        return InvalidValueError(messages.invalid_value, fields=exc.fields)
    return InternalError()
