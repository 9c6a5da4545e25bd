from pydantic import BaseModel

from .common import ORMSchema, PatchSchema


class SectionBase(BaseModel):
    section_number: int
    current_temperature: int
    minimum_temperature: int
    current_capacity: int
    minimum_capacity: int
    maximum_capacity: int
    warehouse_id: int
    product_type_id: int


class SectionCreate(SectionBase):
    pass


class SectionUpdate(PatchSchema):
    section_number: int | None = None
    current_temperature: int | None = None
    minimum_temperature: int | None = None
    current_capacity: int | None = None
    minimum_capacity: int | None = None
    maximum_capacity: int | None = None
    warehouse_id: int | None = None
    product_type_id: int | None = None


class SectionResponse(SectionBase, ORMSchema):
    id: int
