"""
FastAPI providers: one request-scoped service per resource, each on the request's
own AsyncSession.

Usage:
    async def endpoint(service: SellerService = Depends(get_seller_service)):
        ...
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from warehouse_api.database.session import get_async_session
from warehouse_api.repositories import (
    BuyerRepository,
    CarryRepository,
    EmployeeRepository,
    InboundOrderRepository,
    LocalityRepository,
    ProductBatchRepository,
    ProductRecordRepository,
    ProductRepository,
    PurchaseOrderRepository,
    SectionRepository,
    SellerRepository,
    WarehouseRepository,
)
from warehouse_api.services import (
    BuyerService,
    CarryService,
    EmployeeService,
    InboundOrderService,
    LocalityService,
    ProductBatchService,
    ProductRecordService,
    ProductService,
    PurchaseOrderService,
    SectionService,
    SellerService,
    WarehouseService,
)


def get_locality_service(db: AsyncSession = Depends(get_async_session)) -> LocalityService:
    return LocalityService(LocalityRepository(db))


def get_seller_service(db: AsyncSession = Depends(get_async_session)) -> SellerService:
    return SellerService(SellerRepository(db))


def get_carry_service(db: AsyncSession = Depends(get_async_session)) -> CarryService:
    return CarryService(CarryRepository(db))


def get_warehouse_service(db: AsyncSession = Depends(get_async_session)) -> WarehouseService:
    return WarehouseService(WarehouseRepository(db))


def get_employee_service(db: AsyncSession = Depends(get_async_session)) -> EmployeeService:
    return EmployeeService(EmployeeRepository(db))


def get_buyer_service(db: AsyncSession = Depends(get_async_session)) -> BuyerService:
    return BuyerService(BuyerRepository(db))


def get_product_service(db: AsyncSession = Depends(get_async_session)) -> ProductService:
    return ProductService(ProductRepository(db))


def get_product_record_service(db: AsyncSession = Depends(get_async_session)) -> ProductRecordService:
    return ProductRecordService(ProductRecordRepository(db))


def get_product_batch_service(db: AsyncSession = Depends(get_async_session)) -> ProductBatchService:
    return ProductBatchService(ProductBatchRepository(db))


def get_section_service(db: AsyncSession = Depends(get_async_session)) -> SectionService:
    return SectionService(SectionRepository(db))


def get_purchase_order_service(db: AsyncSession = Depends(get_async_session)) -> PurchaseOrderService:
    return PurchaseOrderService(PurchaseOrderRepository(db))


def get_inbound_order_service(db: AsyncSession = Depends(get_async_session)) -> InboundOrderService:
    return InboundOrderService(InboundOrderRepository(db))
