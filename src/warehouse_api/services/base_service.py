"""
Generic service: business rules on top of one repository.

A service never lets a StorageError escape. Every repository failure is logged
and re-raised as the ServiceError matching its kind, with the resource's own
client-facing message (see ErrorMessages).

Flow of the write operations:
  create:          validate -> business key must be free -> save -> commit -> re-read
  partial_update:  load (NotFound) -> drop absent fields -> business key re-checked
                   only when it changes -> update -> commit -> re-read
  delete:          delete (NotFound when nothing was deleted) -> commit
"""

import logging
from typing import Any, Awaitable, Callable, Generic, TypeVar

from warehouse_api.exceptions.base import AlreadyExistsError, NotFoundError, ServiceError
from warehouse_api.exceptions.mapper import ErrorMessages, translate_storage_error
from warehouse_api.exceptions.storage import StorageError, StorageErrorKind
from warehouse_api.repositories.base_repository import BaseRepository, ModelType

logger = logging.getLogger(__name__)

KeyType = TypeVar("KeyType")
RepositoryType = TypeVar("RepositoryType", bound=BaseRepository)


class BaseService(Generic[ModelType, RepositoryType]):
    """
    Subclasses set `messages` and, when the resource has one, `business_key`
    (the unique column that identifies it to clients).
    """

    messages: ErrorMessages = ErrorMessages(not_found="not found")
    business_key: str | None = None

    def __init__(self, repository: RepositoryType):
        self.repository = repository

    @property
    def resource(self) -> str:
        return self.repository.model_name

    # --- error translation ---------------------------------------------------

    def _translate(self, exc: StorageError, operation: str, **context: Any) -> ServiceError:
        error = translate_storage_error(exc, self.messages)
        extra = {
            "resource": self.resource,
            "operation": operation,
            "storage_kind": exc.kind.value,
            "fields": exc.fields,
            "parent": exc.parent,
            **context,
        }
        if exc.kind is StorageErrorKind.INTERNAL:
            logger.error(f"service.{operation}.failed", extra=extra, exc_info=exc)
        else:
            logger.info(f"service.{operation}.{exc.kind.value}", extra=extra)
        return error

    # --- hooks ---------------------------------------------------------------

    def validate_create(self, data: dict[str, Any]) -> dict[str, Any]:
        """Resource-specific checks on a create payload; raise InvalidValueError."""
        return data

    def is_absent(self, field: str, value: Any) -> bool:
        """
        Whether a supplied PATCH value still means "leave unchanged".

        Empty strings never carry a meaningful value for this API's string fields.
        """
        return value is None or value == ""

    # --- operations ----------------------------------------------------------

    async def get_all(self) -> list[ModelType]:
        try:
            return await self.repository.get_all()
        except StorageError as exc:
            raise self._translate(exc, "get_all") from exc

    async def get(self, entity_id: Any) -> ModelType:
        try:
            return await self.repository.get(entity_id)
        except StorageError as exc:
            raise self._translate(exc, "get", id=entity_id) from exc

    async def create(self, data: dict[str, Any]) -> ModelType:
        data = self.validate_create(dict(data))

        if self.business_key is not None:
            await self._ensure_business_key_free(data[self.business_key], "create")

        try:
            new_id = await self.repository.save(**data)
            await self.repository.commit()
            return await self.repository.get(new_id)
        except StorageError as exc:
            raise self._translate(exc, "create") from exc

    async def partial_update(self, entity_id: Any, changes: dict[str, Any]) -> ModelType:
        try:
            current = await self.repository.get(entity_id)
        except StorageError as exc:
            raise self._translate(exc, "partial_update", id=entity_id) from exc

        present = {
            field: value for field, value in changes.items()
            if not self.is_absent(field, value)
        }

        key = self.business_key
        if key is not None and key in present and present[key] != getattr(current, key):
            await self._ensure_business_key_free(present[key], "partial_update")

        try:
            await self.repository.update(entity_id, **present)
            await self.repository.commit()
            return await self.repository.get(entity_id)
        except StorageError as exc:
            raise self._translate(exc, "partial_update", id=entity_id) from exc

    async def delete(self, entity_id: Any) -> None:
        try:
            await self.repository.delete(entity_id)
            await self.repository.commit()
        except StorageError as exc:
            raise self._translate(exc, "delete", id=entity_id) from exc

    # --- helpers -------------------------------------------------------------

    async def _ensure_business_key_free(self, value: Any, operation: str) -> None:
        try:
            taken = await self.repository.exists(**{self.business_key: value})
        except StorageError as exc:
            raise self._translate(exc, operation) from exc
        if taken:
            logger.info(
                f"service.{operation}.already_exists",
                extra={"resource": self.resource, "business_key": self.business_key},
            )
            raise AlreadyExistsError(self.messages.already_exists, fields=[self.business_key])

    async def _report(
        self,
        fetch_all: Callable[[], Awaitable[list[dict[str, Any]]]],
        fetch_one: Callable[[KeyType], Awaitable[list[dict[str, Any]]]],
        key: KeyType | None,
        not_found: str,
    ) -> list[dict[str, Any]]:
        """
        "All" report without a key, single-row report with one. A missing parent
        is NotFound; an empty "all" report is just an empty list.
        """
        try:
            if key is None:
                return await fetch_all()
            return await fetch_one(key)
        except StorageError as exc:
            if exc.kind is StorageErrorKind.NOT_FOUND:
                logger.info(
                    "service.report.not_found",
                    extra={"resource": self.resource, "id": key},
                )
                raise NotFoundError(not_found) from exc
            raise self._translate(exc, "report", id=key) from exc
