from pydantic import BaseModel, Field

from .common import ORMSchema, PatchSchema


class EmployeeBase(BaseModel):
    card_number_id: str = Field(..., max_length=50)
    first_name: str = Field(..., max_length=255)
    last_name: str = Field(..., max_length=255)
    warehouse_id: int


class EmployeeCreate(EmployeeBase):
    pass


class EmployeeUpdate(PatchSchema):
    """`card_number_id` identifies the employee and cannot be patched."""

    first_name: str | None = Field(None, max_length=255)
    last_name: str | None = Field(None, max_length=255)
    warehouse_id: int | None = None


class EmployeeResponse(EmployeeBase, ORMSchema):
    id: int
