from .base_service import BaseService
from .locality_service import LocalityService
from .seller_service import SellerService
from .carry_service import CarryService
from .warehouse_service import WarehouseService
from .employee_service import EmployeeService
from .buyer_service import BuyerService
from .product_service import ProductService
from .product_record_service import ProductRecordService
from .section_service import SectionService
from .product_batch_service import ProductBatchService
from .purchase_order_service import PurchaseOrderService
from .inbound_order_service import InboundOrderService

__all__ = [
    "BaseService",
    "LocalityService",
    "SellerService",
    "CarryService",
    "WarehouseService",
    "EmployeeService",
    "BuyerService",
    "ProductService",
    "ProductRecordService",
    "SectionService",
    "ProductBatchService",
    "PurchaseOrderService",
    "InboundOrderService",
]
