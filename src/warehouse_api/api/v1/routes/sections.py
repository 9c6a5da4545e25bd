from fastapi import APIRouter, Depends, Query, Response, status

from warehouse_api.core.dependencies import get_section_service
from warehouse_api.schemas.common import DataResponse
from warehouse_api.schemas.reports import SectionProductsReport
from warehouse_api.schemas.section import SectionCreate, SectionResponse, SectionUpdate
from warehouse_api.services.section_service import SectionService

router = APIRouter(prefix="/sections", tags=["sections"])


@router.get("/reportProducts", response_model=DataResponse[list[SectionProductsReport]])
async def report_products(
    section_id: int | None = Query(None, alias="id"),
    service: SectionService = Depends(get_section_service),
):
    """Units stored per section (sum of its batches' current quantity)."""
    return {"data": await service.report_products(section_id)}


@router.get("", response_model=DataResponse[list[SectionResponse]])
async def list_sections(service: SectionService = Depends(get_section_service)):
    sections = await service.get_all()
    return {"data": [SectionResponse.model_validate(s) for s in sections]}


@router.get("/{section_id}", response_model=DataResponse[SectionResponse])
async def get_section(section_id: int, service: SectionService = Depends(get_section_service)):
    return {"data": SectionResponse.model_validate(await service.get(section_id))}


@router.post("", response_model=DataResponse[SectionResponse], status_code=status.HTTP_201_CREATED)
async def create_section(payload: SectionCreate, service: SectionService = Depends(get_section_service)):
    section = await service.create(payload.model_dump())
    return {"data": SectionResponse.model_validate(section)}


@router.patch("/{section_id}", response_model=DataResponse[SectionResponse])
async def update_section(
    section_id: int,
    payload: SectionUpdate,
    service: SectionService = Depends(get_section_service),
):
    """A temperature of -273 is ignored, 0 is written."""
    section = await service.partial_update(section_id, payload.changes())
    return {"data": SectionResponse.model_validate(section)}


@router.delete("/{section_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_section(section_id: int, service: SectionService = Depends(get_section_service)):
    await service.delete(section_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
