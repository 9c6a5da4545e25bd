from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class ORMSchema(BaseModel):
    """Base for response schemas built straight from ORM instances."""

    model_config = ConfigDict(from_attributes=True)


class PatchSchema(BaseModel):
    """
    Base for PATCH bodies. Every field is optional; `changes()` tells which ones the
    client actually sent, so a missing key and a key set to 0 are different things.
    """

    def changes(self) -> dict[str, Any]:
        """Fields present in the request body with a non-null value."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if getattr(self, name) is not None
        }


class DataResponse(BaseModel, Generic[T]):
    """Success envelope: {"data": ...}."""

    data: T


class ErrorResponse(BaseModel):
    """Error envelope: {"error": "..."}."""

    error: str
