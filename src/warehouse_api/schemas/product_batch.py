from datetime import date

from pydantic import AliasChoices, BaseModel, Field

from .common import ORMSchema


class ProductBatchBase(BaseModel):
    batch_number: int
    current_quantity: int
    current_temperature: int
    due_date: date
    initial_quantity: int
    manufacturing_date: date
    manufacturing_hour: int = Field(..., ge=0, le=23)
    # older clients send the misspelt key
    minimum_temperature: int = Field(
        ..., validation_alias=AliasChoices("minimum_temperature", "minumum_temperature")
    )
    product_id: int
    section_id: int


class ProductBatchCreate(ProductBatchBase):
    pass


class ProductBatchResponse(ProductBatchBase, ORMSchema):
    id: int
