"""
Storage-level errors.

Repositories raise only `StorageError`; the `kind` is what callers switch on. The
message and the extra attributes are for logs, never for clients.
"""

from enum import Enum
from typing import Iterable


class StorageErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    DUPLICATE_KEY = "duplicate_key"
    FOREIGN_KEY_MISSING = "foreign_key_missing"
    VALUE_OUT_OF_RANGE = "value_out_of_range"
    INTERNAL = "internal"


class StorageError(Exception):
    """
    Base exception for repository failures.

    - kind: StorageErrorKind; subclasses pin it through the class attribute
    - fields: column names involved, when the driver tells us
    - constraint: constraint name, when the driver tells us
    - parent: for FOREIGN_KEY_MISSING, the table whose row was missing
    """

    kind: StorageErrorKind = StorageErrorKind.INTERNAL

    def __init__(self, message: str, *, kind: StorageErrorKind | None = None,
                 fields: Iterable[str] | None = None, constraint: str | None = None,
                 parent: str | None = None):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind
        self.fields = list(fields) if fields else None
        self.constraint = constraint
        self.parent = parent

    def __str__(self) -> str:
        parts = [f"kind: {self.kind.value}"]
        if self.fields:
            parts.append(f"fields: {', '.join(self.fields)}")
        if self.constraint:
            parts.append(f"constraint: {self.constraint}")
        if self.parent:
            parts.append(f"parent: {self.parent}")
        return f"{self.message} ({'; '.join(parts)})"


class RecordNotFoundError(StorageError):
    kind = StorageErrorKind.NOT_FOUND


__all__ = ["StorageErrorKind", "StorageError", "RecordNotFoundError"]
