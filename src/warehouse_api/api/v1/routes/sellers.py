from fastapi import APIRouter, Depends, Response, status

from warehouse_api.core.dependencies import get_seller_service
from warehouse_api.schemas.common import DataResponse
from warehouse_api.schemas.seller import SellerCreate, SellerResponse, SellerUpdate
from warehouse_api.services.seller_service import SellerService

router = APIRouter(prefix="/sellers", tags=["sellers"])


@router.get("", response_model=DataResponse[list[SellerResponse]])
async def list_sellers(service: SellerService = Depends(get_seller_service)):
    sellers = await service.get_all()
    return {"data": [SellerResponse.model_validate(s) for s in sellers]}


@router.get("/{seller_id}", response_model=DataResponse[SellerResponse])
async def get_seller(seller_id: int, service: SellerService = Depends(get_seller_service)):
    return {"data": SellerResponse.model_validate(await service.get(seller_id))}


@router.post("", response_model=DataResponse[SellerResponse], status_code=status.HTTP_201_CREATED)
async def create_seller(payload: SellerCreate, service: SellerService = Depends(get_seller_service)):
    seller = await service.create(payload.model_dump())
    return {"data": SellerResponse.model_validate(seller)}


@router.patch("/{seller_id}", response_model=DataResponse[SellerResponse])
async def update_seller(
    seller_id: int,
    payload: SellerUpdate,
    service: SellerService = Depends(get_seller_service),
):
    """Only the keys present in the body are written."""
    seller = await service.partial_update(seller_id, payload.changes())
    return {"data": SellerResponse.model_validate(seller)}


@router.delete("/{seller_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_seller(seller_id: int, service: SellerService = Depends(get_seller_service)):
    await service.delete(seller_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
