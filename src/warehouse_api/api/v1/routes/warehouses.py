from fastapi import APIRouter, Depends, Response, status

from warehouse_api.core.dependencies import get_warehouse_service
from warehouse_api.schemas.common import DataResponse
from warehouse_api.schemas.warehouse import WarehouseCreate, WarehouseResponse, WarehouseUpdate
from warehouse_api.services.warehouse_service import WarehouseService

router = APIRouter(prefix="/warehouses", tags=["warehouses"])


@router.get("", response_model=DataResponse[list[WarehouseResponse]])
async def list_warehouses(service: WarehouseService = Depends(get_warehouse_service)):
    warehouses = await service.get_all()
    return {"data": [WarehouseResponse.model_validate(w) for w in warehouses]}


@router.get("/{warehouse_id}", response_model=DataResponse[WarehouseResponse])
async def get_warehouse(warehouse_id: int, service: WarehouseService = Depends(get_warehouse_service)):
    return {"data": WarehouseResponse.model_validate(await service.get(warehouse_id))}


@router.post("", response_model=DataResponse[WarehouseResponse], status_code=status.HTTP_201_CREATED)
async def create_warehouse(
    payload: WarehouseCreate,
    service: WarehouseService = Depends(get_warehouse_service),
):
    warehouse = await service.create(payload.model_dump())
    return {"data": WarehouseResponse.model_validate(warehouse)}


@router.patch("/{warehouse_id}", response_model=DataResponse[WarehouseResponse])
async def update_warehouse(
    warehouse_id: int,
    payload: WarehouseUpdate,
    service: WarehouseService = Depends(get_warehouse_service),
):
    warehouse = await service.partial_update(warehouse_id, payload.changes())
    return {"data": WarehouseResponse.model_validate(warehouse)}


@router.delete("/{warehouse_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_warehouse(warehouse_id: int, service: WarehouseService = Depends(get_warehouse_service)):
    await service.delete(warehouse_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
