from fastapi import APIRouter, Depends, status

from warehouse_api.core.dependencies import get_carry_service
from warehouse_api.schemas.carry import CarryCreate, CarryResponse
from warehouse_api.schemas.common import DataResponse
from warehouse_api.services.carry_service import CarryService

router = APIRouter(prefix="/carries", tags=["carries"])


@router.post("", response_model=DataResponse[CarryResponse], status_code=status.HTTP_201_CREATED)
async def create_carry(payload: CarryCreate, service: CarryService = Depends(get_carry_service)):
    carry = await service.create(payload.model_dump())
    return {"data": CarryResponse.model_validate(carry)}
