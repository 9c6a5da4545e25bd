from .base_repository import BaseRepository
from .locality_repository import LocalityRepository
from .seller_repository import SellerRepository
from .carry_repository import CarryRepository
from .warehouse_repository import WarehouseRepository
from .employee_repository import EmployeeRepository
from .buyer_repository import BuyerRepository
from .product_repository import ProductRepository
from .product_record_repository import ProductRecordRepository
from .section_repository import SectionRepository
from .product_batch_repository import ProductBatchRepository
from .purchase_order_repository import PurchaseOrderRepository
from .inbound_order_repository import InboundOrderRepository

__all__ = [
    "BaseRepository",
    "LocalityRepository",
    "SellerRepository",
    "CarryRepository",
    "WarehouseRepository",
    "EmployeeRepository",
    "BuyerRepository",
    "ProductRepository",
    "ProductRecordRepository",
    "SectionRepository",
    "ProductBatchRepository",
    "PurchaseOrderRepository",
    "InboundOrderRepository",
]
