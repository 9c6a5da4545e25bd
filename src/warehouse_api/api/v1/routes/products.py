from fastapi import APIRouter, Depends, Query, Response, status

from warehouse_api.core.dependencies import get_product_service
from warehouse_api.schemas.common import DataResponse
from warehouse_api.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from warehouse_api.schemas.reports import ProductRecordsReport
from warehouse_api.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("/reportRecords", response_model=DataResponse[list[ProductRecordsReport]])
async def report_records(
    product_id: int | None = Query(None, alias="id"),
    service: ProductService = Depends(get_product_service),
):
    """Price records per product; `?id=` narrows it to one product."""
    return {"data": await service.report_records(product_id)}


@router.get("", response_model=DataResponse[list[ProductResponse]])
async def list_products(service: ProductService = Depends(get_product_service)):
    products = await service.get_all()
    return {"data": [ProductResponse.model_validate(p) for p in products]}


@router.get("/{product_id}", response_model=DataResponse[ProductResponse])
async def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    return {"data": ProductResponse.model_validate(await service.get(product_id))}


@router.post("", response_model=DataResponse[ProductResponse], status_code=status.HTTP_201_CREATED)
async def create_product(payload: ProductCreate, service: ProductService = Depends(get_product_service)):
    product = await service.create(payload.model_dump())
    return {"data": ProductResponse.model_validate(product)}


@router.patch("/{product_id}", response_model=DataResponse[ProductResponse])
async def update_product(
    product_id: int,
    payload: ProductUpdate,
    service: ProductService = Depends(get_product_service),
):
    """
    Merge the supplied keys into the stored product. A key sent as 0 is written;
    a key left out keeps its current value.
    """
    product = await service.partial_update(product_id, payload.changes())
    return {"data": ProductResponse.model_validate(product)}


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    await service.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
