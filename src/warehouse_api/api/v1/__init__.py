from fastapi import APIRouter

from warehouse_api.schemas.common import ErrorResponse

from .routes import (
    buyers,
    carries,
    employees,
    inbound_orders,
    localities,
    product_batches,
    product_records,
    products,
    purchase_orders,
    sections,
    sellers,
    warehouses,
)

# every failure shares the {"error": ...} envelope
ERROR_RESPONSES = {
    code: {"model": ErrorResponse}
    for code in (400, 404, 409, 422, 500)
}

api_router = APIRouter(prefix="/api/v1", responses=ERROR_RESPONSES)

api_router.include_router(sellers.router)
api_router.include_router(localities.router)
api_router.include_router(warehouses.router)
api_router.include_router(employees.router)
api_router.include_router(buyers.router)
api_router.include_router(carries.router)
api_router.include_router(products.router)
api_router.include_router(product_records.router)
api_router.include_router(product_batches.router)
api_router.include_router(sections.router)
api_router.include_router(purchase_orders.router)
api_router.include_router(purchase_orders.report_router)
api_router.include_router(inbound_orders.router)
