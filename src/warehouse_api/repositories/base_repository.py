"""
Base repository class providing common database operations.

Every resource repository subclasses `BaseRepository[Model]` and only adds its
report queries. All statements run inside `db_error_handler`, so callers only ever
see `StorageError` (with a kind) and never a driver exception.

Writes are flushed, not committed: the service commits once the whole operation
succeeded.
"""

import logging
import time
from typing import Any, Generic, Type, TypeVar

from sqlalchemy import Select, delete, inspect as sa_inspect, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from warehouse_api.database.base import Base
from warehouse_api.exceptions.integrity_classifier import ForeignKeyConstraintError, ReferencedRowError
from warehouse_api.exceptions.mapper import db_error_handler
from warehouse_api.exceptions.storage import RecordNotFoundError, StorageError, StorageErrorKind
from warehouse_api.validators.exception_validators import find_unknown_model_kwargs, get_required_columns

ModelType = TypeVar("ModelType", bound=Base)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[ModelType]):
    """
    Generic repository for one model with a single-column primary key.

    Type Parameters:
        ModelType: The SQLAlchemy model class this repository manages.
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Args:
            model: the model class itself (Seller, not Seller()); queries are built from it
            db: the request's AsyncSession
        """
        self.model = model
        self.db = db
        self._pk = sa_inspect(model).primary_key[0]

    @property
    def model_name(self) -> str:
        return self.model.__name__

    async def get(self, entity_id: Any) -> ModelType:
        """
        Return the entity with this primary key, freshly read from the store.

        Raises:
            RecordNotFoundError: no row has this key.
            StorageError: any other failure.
        """
        query = (
            select(self.model)
            .where(self._pk == entity_id)
            # re-read even when the session already holds a stale copy
            .execution_options(populate_existing=True)
        )
        async with db_error_handler(self.db, self.model):
            entity = (await self.db.execute(query)).scalar_one_or_none()

        if entity is None:
            logger.debug("repo.get.not_found", extra={"model": self.model_name, "id": entity_id})
            raise RecordNotFoundError(f"{self.model_name} with ID {entity_id} not found")
        return entity

    async def get_all(self, *, offset: int = 0, limit: int | None = None) -> list[ModelType]:
        """All entities ordered by primary key; an empty list is not an error."""
        query = select(self.model).order_by(self._pk).offset(offset)
        if limit is not None:
            query = query.limit(limit)

        async with db_error_handler(self.db, self.model):
            entities = (await self.db.execute(query)).scalars().all()

        logger.debug("repo.get_all.success", extra={"model": self.model_name, "count": len(entities)})
        return list(entities)

    async def exists(self, **criteria: Any) -> bool:
        """
        True when a row matches every `column=value` pair (typically the business key).

        Driver failures surface as StorageError instead of reading as "absent".
        """
        unknown = find_unknown_model_kwargs(self.model, criteria)
        if unknown:
            raise StorageError(
                f"Unknown field(s) for {self.model_name}: {', '.join(unknown)}", fields=unknown
            )

        query = select(self._pk).limit(1)
        for field, value in criteria.items():
            query = query.where(getattr(self.model, field) == value)

        async with db_error_handler(self.db, self.model):
            found = await self.db.scalar(query)
        return found is not None

    async def save(self, **values: Any) -> Any:
        """
        Insert a row and return its primary key.

        Raises:
            StorageError: DUPLICATE_KEY, FOREIGN_KEY_MISSING (with `.parent`),
                VALUE_OUT_OF_RANGE or INTERNAL.
        """
        logger.debug(
            "repo.save.start",
            extra={"model": self.model_name, "provided_keys": sorted(values.keys())},
        )

        unknown = find_unknown_model_kwargs(self.model, values)
        if unknown:
            logger.error("repo.save.invalid_fields", extra={"model": self.model_name, "invalid_fields": sorted(unknown)})
            raise StorageError(
                f"Unknown field(s) for {self.model_name}: {', '.join(unknown)}", fields=unknown
            )

        missing = [c for c in get_required_columns(self.model) if values.get(c) is None]
        if missing:
            logger.info("repo.save.missing_required", extra={"model": self.model_name, "missing_fields": sorted(missing)})
            raise StorageError(
                f"Missing required field(s) for {self.model_name}: {', '.join(missing)}",
                kind=StorageErrorKind.VALUE_OUT_OF_RANGE,
                fields=missing,
            )

        start = time.perf_counter()
        async with db_error_handler(self.db, self.model, values):
            entity = self.model(**values)
            self.db.add(entity)
            await self.db.flush()
            new_id = getattr(entity, self._pk.key)

        logger.debug(
            "repo.save.success",
            extra={
                "model": self.model_name,
                "id": new_id,
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return new_id

    async def update(self, entity_id: Any, **values: Any) -> None:
        """
        Write `values` onto the row with this key.

        Zero affected rows is not an error here (the row may simply be unchanged);
        services check existence first.
        """
        if not values:
            return

        unknown = find_unknown_model_kwargs(self.model, values)
        if unknown:
            raise StorageError(
                f"Unknown field(s) for {self.model_name}: {', '.join(unknown)}", fields=unknown
            )

        stmt = (
            update(self.model)
            .where(self._pk == entity_id)
            .values(**values)
            .execution_options(synchronize_session="fetch")
        )
        async with db_error_handler(self.db, self.model, values):
            result = await self.db.execute(stmt)

        logger.debug(
            "repo.update.success",
            extra={"model": self.model_name, "id": entity_id, "rowcount": result.rowcount},
        )

    async def delete(self, entity_id: Any) -> None:
        """
        Raises:
            RecordNotFoundError: no row had this key.
            ReferencedRowError: child rows still point at it (kind INTERNAL).
        """
        stmt = delete(self.model).where(self._pk == entity_id)
        try:
            async with db_error_handler(self.db, self.model):
                result = await self.db.execute(stmt)
        except ForeignKeyConstraintError as exc:
            # a delete can only break the foreign key from the child side; SQLite
            # reports both directions with the same message
            logger.info("repo.delete.still_referenced", extra={"model": self.model_name, "id": entity_id})
            raise ReferencedRowError(
                f"{self.model_name} with ID {entity_id} is still referenced by other records",
                constraint=exc.constraint,
            ) from exc

        if result.rowcount == 0:
            logger.debug("repo.delete.not_found", extra={"model": self.model_name, "id": entity_id})
            raise RecordNotFoundError(f"{self.model_name} with ID {entity_id} not found for deletion")
        logger.debug("repo.delete.success", extra={"model": self.model_name, "id": entity_id})

    async def commit(self) -> None:
        # deferred constraints fail here, so commit is mapped like any statement
        async with db_error_handler(self.db, self.model):
            await self.db.commit()

    async def _fetch_report(self, query: Select, key_column=None, key: Any = None) -> list[dict[str, Any]]:
        """
        Run a report projection. With a `key`, restrict it to that parent and raise
        RecordNotFoundError when the parent does not exist.
        """
        if key is not None:
            query = query.where(key_column == key)

        async with db_error_handler(self.db, self.model):
            rows = (await self.db.execute(query)).mappings().all()

        if key is not None and not rows:
            raise RecordNotFoundError(f"{self.model_name} with ID {key} not found")
        return [dict(row) for row in rows]
