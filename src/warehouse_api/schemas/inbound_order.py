from datetime import date

from pydantic import BaseModel, Field

from .common import ORMSchema


class InboundOrderBase(BaseModel):
    order_date: date
    order_number: str = Field(..., max_length=50)
    employee_id: int
    product_batch_id: int
    warehouse_id: int


class InboundOrderCreate(InboundOrderBase):
    pass


class InboundOrderResponse(InboundOrderBase, ORMSchema):
    id: int
