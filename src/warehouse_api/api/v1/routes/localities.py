from fastapi import APIRouter, Depends, Query, status

from warehouse_api.core.dependencies import get_locality_service
from warehouse_api.schemas.common import DataResponse
from warehouse_api.schemas.locality import LocalityCreate, LocalityResponse
from warehouse_api.schemas.reports import LocalityCarriesReport, LocalitySellersReport
from warehouse_api.services.locality_service import LocalityService

router = APIRouter(prefix="/localities", tags=["localities"])


@router.get("/reportSellers", response_model=DataResponse[list[LocalitySellersReport]])
async def report_sellers(
    locality_id: str | None = Query(None, alias="id"),
    service: LocalityService = Depends(get_locality_service),
):
    """Sellers per locality; `?id=` narrows it to one locality."""
    return {"data": await service.report_sellers(locality_id)}


@router.get("/reportCarries", response_model=DataResponse[list[LocalityCarriesReport]])
async def report_carries(
    locality_id: str | None = Query(None, alias="id"),
    service: LocalityService = Depends(get_locality_service),
):
    """Carriers per locality; `?id=` narrows it to one locality."""
    return {"data": await service.report_carries(locality_id)}


@router.get("/{locality_id}", response_model=DataResponse[LocalityResponse])
async def get_locality(locality_id: str, service: LocalityService = Depends(get_locality_service)):
    return {"data": LocalityResponse.model_validate(await service.get(locality_id))}


@router.post("", response_model=DataResponse[LocalityResponse], status_code=status.HTTP_201_CREATED)
async def create_locality(payload: LocalityCreate, service: LocalityService = Depends(get_locality_service)):
    locality = await service.create(payload.model_dump())
    return {"data": LocalityResponse.model_validate(locality)}
