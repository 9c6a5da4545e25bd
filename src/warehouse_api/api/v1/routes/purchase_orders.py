from fastapi import APIRouter, Depends, Query, status

from warehouse_api.core.dependencies import get_purchase_order_service
from warehouse_api.schemas.common import DataResponse
from warehouse_api.schemas.purchase_order import PurchaseOrderCreate, PurchaseOrderResponse
from warehouse_api.schemas.reports import BuyerPurchaseOrdersReport
from warehouse_api.services.purchase_order_service import PurchaseOrderService

router = APIRouter(prefix="/purchase_orders", tags=["purchase orders"])

# The per-buyer report lives at the API root, outside /purchase_orders.
report_router = APIRouter(tags=["purchase orders"])


@router.post("", response_model=DataResponse[PurchaseOrderResponse], status_code=status.HTTP_201_CREATED)
async def create_purchase_order(
    payload: PurchaseOrderCreate,
    service: PurchaseOrderService = Depends(get_purchase_order_service),
):
    order = await service.create(payload.model_dump())
    return {"data": PurchaseOrderResponse.model_validate(order)}


@report_router.get("/reportPurchaseOrder", response_model=DataResponse[list[BuyerPurchaseOrdersReport]])
async def report_purchase_orders(
    buyer_id: int | None = Query(None, alias="id"),
    service: PurchaseOrderService = Depends(get_purchase_order_service),
):
    """Purchase orders per buyer; `?id=` narrows it to one buyer."""
    return {"data": await service.report_by_buyer(buyer_id)}
