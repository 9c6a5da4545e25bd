from fastapi import APIRouter, Depends, Response, status

from warehouse_api.core.dependencies import get_employee_service
from warehouse_api.schemas.common import DataResponse
from warehouse_api.schemas.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from warehouse_api.schemas.reports import EmployeeInboundOrdersReport
from warehouse_api.services.employee_service import EmployeeService

router = APIRouter(prefix="/employees", tags=["employees"])


# report routes go first so "reportInboundOrders" is never parsed as an id
@router.get("/reportInboundOrders", response_model=DataResponse[list[EmployeeInboundOrdersReport]])
async def report_inbound_orders(service: EmployeeService = Depends(get_employee_service)):
    """Inbound orders handled by every employee."""
    return {"data": await service.report_inbound_orders()}


@router.get(
    "/reportInboundOrders/{employee_id}",
    response_model=DataResponse[list[EmployeeInboundOrdersReport]],
)
async def report_employee_inbound_orders(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
):
    """Same report for one employee; 404 when the employee does not exist."""
    return {"data": await service.report_inbound_orders(employee_id)}


@router.get("", response_model=DataResponse[list[EmployeeResponse]])
async def list_employees(service: EmployeeService = Depends(get_employee_service)):
    employees = await service.get_all()
    return {"data": [EmployeeResponse.model_validate(e) for e in employees]}


@router.get("/{employee_id}", response_model=DataResponse[EmployeeResponse])
async def get_employee(employee_id: int, service: EmployeeService = Depends(get_employee_service)):
    return {"data": EmployeeResponse.model_validate(await service.get(employee_id))}


@router.post("", response_model=DataResponse[EmployeeResponse], status_code=status.HTTP_201_CREATED)
async def create_employee(payload: EmployeeCreate, service: EmployeeService = Depends(get_employee_service)):
    employee = await service.create(payload.model_dump())
    return {"data": EmployeeResponse.model_validate(employee)}


@router.patch("/{employee_id}", response_model=DataResponse[EmployeeResponse])
async def update_employee(
    employee_id: int,
    payload: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
):
    employee = await service.partial_update(employee_id, payload.changes())
    return {"data": EmployeeResponse.model_validate(employee)}


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(employee_id: int, service: EmployeeService = Depends(get_employee_service)):
    await service.delete(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
