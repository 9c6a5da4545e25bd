from fastapi import APIRouter, Depends, Response, status

from warehouse_api.core.dependencies import get_buyer_service
from warehouse_api.schemas.buyer import BuyerCreate, BuyerResponse, BuyerUpdate
from warehouse_api.schemas.common import DataResponse
from warehouse_api.services.buyer_service import BuyerService

router = APIRouter(prefix="/buyers", tags=["buyers"])


@router.get("", response_model=DataResponse[list[BuyerResponse]])
async def list_buyers(service: BuyerService = Depends(get_buyer_service)):
    buyers = await service.get_all()
    return {"data": [BuyerResponse.model_validate(b) for b in buyers]}


@router.get("/{buyer_id}", response_model=DataResponse[BuyerResponse])
async def get_buyer(buyer_id: int, service: BuyerService = Depends(get_buyer_service)):
    return {"data": BuyerResponse.model_validate(await service.get(buyer_id))}


@router.post("", response_model=DataResponse[BuyerResponse], status_code=status.HTTP_201_CREATED)
async def create_buyer(payload: BuyerCreate, service: BuyerService = Depends(get_buyer_service)):
    buyer = await service.create(payload.model_dump())
    return {"data": BuyerResponse.model_validate(buyer)}


@router.patch("/{buyer_id}", response_model=DataResponse[BuyerResponse])
async def update_buyer(
    buyer_id: int,
    payload: BuyerUpdate,
    service: BuyerService = Depends(get_buyer_service),
):
    buyer = await service.partial_update(buyer_id, payload.changes())
    return {"data": BuyerResponse.model_validate(buyer)}


@router.delete("/{buyer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_buyer(buyer_id: int, service: BuyerService = Depends(get_buyer_service)):
    await service.delete(buyer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
