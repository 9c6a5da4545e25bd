from fastapi import APIRouter, Depends, status

from warehouse_api.core.dependencies import get_product_record_service
from warehouse_api.schemas.common import DataResponse
from warehouse_api.schemas.product_record import ProductRecordCreate, ProductRecordResponse
from warehouse_api.services.product_record_service import ProductRecordService

router = APIRouter(prefix="/productRecords", tags=["product records"])


@router.post("", response_model=DataResponse[ProductRecordResponse], status_code=status.HTTP_201_CREATED)
async def create_product_record(
    payload: ProductRecordCreate,
    service: ProductRecordService = Depends(get_product_record_service),
):
    """Dated from today onwards; an earlier `last_update_date` is rejected with 422."""
    record = await service.create(payload.model_dump())
    return {"data": ProductRecordResponse.model_validate(record)}
