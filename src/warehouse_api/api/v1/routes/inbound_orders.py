from fastapi import APIRouter, Depends, status

from warehouse_api.core.dependencies import get_inbound_order_service
from warehouse_api.schemas.common import DataResponse
from warehouse_api.schemas.inbound_order import InboundOrderCreate, InboundOrderResponse
from warehouse_api.services.inbound_order_service import InboundOrderService

router = APIRouter(prefix="/inboundOrders", tags=["inbound orders"])


@router.post("", response_model=DataResponse[InboundOrderResponse], status_code=status.HTTP_201_CREATED)
async def create_inbound_order(
    payload: InboundOrderCreate,
    service: InboundOrderService = Depends(get_inbound_order_service),
):
    """
    The error names the missing parent: employee, warehouse or product batch.
    """
    order = await service.create(payload.model_dump())
    return {"data": InboundOrderResponse.model_validate(order)}
