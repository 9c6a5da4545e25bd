from pydantic import BaseModel, Field

from .common import ORMSchema


class CarryBase(BaseModel):
    cid: str = Field(..., max_length=50)
    company_name: str = Field(..., max_length=255)
    address: str = Field(..., max_length=255)
    telephone: str = Field(..., max_length=50)
    locality_id: str = Field(..., max_length=50)


class CarryCreate(CarryBase):
    pass


class CarryResponse(CarryBase, ORMSchema):
    id: int
