from pydantic import BaseModel, Field

from .common import ORMSchema, PatchSchema


class SellerBase(BaseModel):
    cid: int
    company_name: str = Field(..., max_length=255)
    address: str = Field(..., max_length=255)
    telephone: str = Field(..., max_length=50)
    locality_id: str = Field(..., max_length=50)


class SellerCreate(SellerBase):
    pass


class SellerUpdate(PatchSchema):
    cid: int | None = None
    company_name: str | None = Field(None, max_length=255)
    address: str | None = Field(None, max_length=255)
    telephone: str | None = Field(None, max_length=50)
    locality_id: str | None = Field(None, max_length=50)


class SellerResponse(SellerBase, ORMSchema):
    id: int
