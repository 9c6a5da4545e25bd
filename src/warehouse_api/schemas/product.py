from pydantic import BaseModel, Field

from .common import ORMSchema, PatchSchema


class ProductBase(BaseModel):
    """
    Product attributes. Dimensions in metres, net weight in kilograms,
    recommended freezing temperature in Celsius.
    """

    description: str = Field(..., max_length=255)
    expiration_rate: int
    freezing_rate: int
    height: float
    length: float
    net_weight: float
    product_code: str = Field(..., max_length=50)
    recommended_freezing_temperature: float
    width: float
    product_type_id: int
    seller_id: int | None = None


class ProductCreate(ProductBase):
    pass


class ProductUpdate(PatchSchema):
    description: str | None = Field(None, max_length=255)
    expiration_rate: int | None = None
    freezing_rate: int | None = None
    height: float | None = None
    length: float | None = None
    net_weight: float | None = None
    product_code: str | None = Field(None, max_length=50)
    recommended_freezing_temperature: float | None = None
    width: float | None = None
    product_type_id: int | None = None
    # null means "leave as is"; a product cannot be detached from its seller here
    seller_id: int | None = None


class ProductResponse(ProductBase, ORMSchema):
    id: int
