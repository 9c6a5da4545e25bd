from fastapi import APIRouter, Depends, status

from warehouse_api.core.dependencies import get_product_batch_service
from warehouse_api.schemas.common import DataResponse
from warehouse_api.schemas.product_batch import ProductBatchCreate, ProductBatchResponse
from warehouse_api.services.product_batch_service import ProductBatchService

router = APIRouter(prefix="/productBatches", tags=["product batches"])


@router.post("", response_model=DataResponse[ProductBatchResponse], status_code=status.HTTP_201_CREATED)
async def create_product_batch(
    payload: ProductBatchCreate,
    service: ProductBatchService = Depends(get_product_batch_service),
):
    batch = await service.create(payload.model_dump())
    return {"data": ProductBatchResponse.model_validate(batch)}
