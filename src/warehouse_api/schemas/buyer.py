from pydantic import BaseModel, Field

from .common import ORMSchema, PatchSchema


class BuyerBase(BaseModel):
    card_number_id: str = Field(..., max_length=50)
    first_name: str = Field(..., max_length=255)
    last_name: str = Field(..., max_length=255)


class BuyerCreate(BuyerBase):
    pass


class BuyerUpdate(PatchSchema):
    card_number_id: str | None = Field(None, max_length=50)
    first_name: str | None = Field(None, max_length=255)
    last_name: str | None = Field(None, max_length=255)


class BuyerResponse(BuyerBase, ORMSchema):
    id: int
