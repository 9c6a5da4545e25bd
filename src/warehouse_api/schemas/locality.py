from pydantic import BaseModel, Field

from .common import ORMSchema


class LocalityBase(BaseModel):
    """The id is an external code (postal code), chosen by the client."""

    id: str = Field(..., min_length=1, max_length=50)
    locality_name: str = Field(..., max_length=255)
    province_name: str = Field(..., max_length=255)
    country_name: str = Field(..., max_length=255)


class LocalityCreate(LocalityBase):
    pass


class LocalityResponse(LocalityBase, ORMSchema):
    pass
