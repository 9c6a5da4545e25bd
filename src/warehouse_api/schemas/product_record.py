from datetime import date

from pydantic import BaseModel

from .common import ORMSchema


class ProductRecordBase(BaseModel):
    last_update_date: date
    purchase_price: float
    sale_price: float
    product_id: int


class ProductRecordCreate(ProductRecordBase):
    pass


class ProductRecordResponse(ProductRecordBase, ORMSchema):
    id: int
