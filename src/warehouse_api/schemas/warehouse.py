from pydantic import BaseModel, Field

from .common import ORMSchema, PatchSchema


class WarehouseBase(BaseModel):
    address: str = Field(..., max_length=255)
    telephone: str = Field(..., max_length=50)
    warehouse_code: str = Field(..., max_length=50)
    minimum_capacity: int
    minimum_temperature: int
    locality_id: str | None = Field(None, max_length=50)


class WarehouseCreate(WarehouseBase):
    pass


class WarehouseUpdate(PatchSchema):
    address: str | None = Field(None, max_length=255)
    telephone: str | None = Field(None, max_length=50)
    warehouse_code: str | None = Field(None, max_length=50)
    minimum_capacity: int | None = None
    minimum_temperature: int | None = None
    locality_id: str | None = Field(None, max_length=50)


class WarehouseResponse(WarehouseBase, ORMSchema):
    id: int
