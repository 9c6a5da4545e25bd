from datetime import date

from pydantic import BaseModel, Field

from .common import ORMSchema


class PurchaseOrderBase(BaseModel):
    order_number: str = Field(..., max_length=50)
    order_date: date
    tracking_code: str = Field(..., max_length=50)
    buyer_id: int
    product_record_id: int
    order_status_id: int


class PurchaseOrderCreate(PurchaseOrderBase):
    pass


class PurchaseOrderResponse(PurchaseOrderBase, ORMSchema):
    id: int
