"""
Service-level exceptions: the only errors the HTTP layer ever sees.

Each carries a message that is safe to show to clients and a canonical error_code
that decides the response status.
"""

from typing import Iterable


class ServiceError(Exception):
    """
    Base exception for service errors.

    - message: client-facing message, stable per resource and kind
    - fields: optional field names related to the error (logs only)
    - error_code: canonical short code, looked up in ERROR_CODE_TO_STATUS
    """

    ERROR_CODE_TO_STATUS = {
        "bad_request": 400,
        "not_found": 404,
        "already_exists": 409,
        "foreign_key_not_found": 409,
        "invalid_value": 422,
        "internal": 500,
    }
    error_code = "internal"

    def __init__(self, message: str, *, fields: Iterable[str] | None = None,
                 error_code: str | None = None):
        super().__init__(message)
        self.message = message
        self.fields = list(fields) if fields else None
        if error_code is not None:
            self.error_code = error_code

    def __str__(self) -> str:
        if self.fields:
            return f"{self.message} (fields: {', '.join(self.fields)}; code: {self.error_code})"
        return f"{self.message} (code: {self.error_code})"

    def to_payload(self) -> dict:
        """JSON body for the error envelope: {"error": message}."""
        return {"error": self.message}

    def http_status(self) -> int:
        return self.ERROR_CODE_TO_STATUS.get(self.error_code, 500)


class BadRequestError(ServiceError):
    error_code = "bad_request"


class NotFoundError(ServiceError):
    error_code = "not_found"

    def __init__(self, message: str = "not found", *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields)


class AlreadyExistsError(ServiceError):
    error_code = "already_exists"


class ForeignKeyNotFoundError(ServiceError):
    """A referenced parent entity does not exist; `entity` names the parent."""

    error_code = "foreign_key_not_found"

    def __init__(self, message: str, *, entity: str | None = None,
                 fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields)
        self.entity = entity


class InvalidValueError(ServiceError):
    error_code = "invalid_value"


class InternalError(ServiceError):
    error_code = "internal"

    def __init__(self, message: str = "internal server error"):
        super().__init__(message)


__all__ = [
    "ServiceError",
    "BadRequestError",
    "NotFoundError",
    "AlreadyExistsError",
    "ForeignKeyNotFoundError",
    "InvalidValueError",
    "InternalError",
]
