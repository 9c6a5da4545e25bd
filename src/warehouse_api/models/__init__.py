"""
Single import point for every ORM model, so Base.metadata knows all tables once
`warehouse_api.models` is imported:

    from warehouse_api.models import Seller, Warehouse, Section
"""

from .locality import Locality
from .seller import Seller
from .carry import Carry
from .warehouse import Warehouse
from .employee import Employee
from .buyer import Buyer
from .product import Product
from .product_record import ProductRecord
from .section import Section
from .product_batch import ProductBatch
from .purchase_order import PurchaseOrder
from .inbound_order import InboundOrder
from .log_entry import LogEntry

__all__ = [
    "Locality",
    "Seller",
    "Carry",
    "Warehouse",
    "Employee",
    "Buyer",
    "Product",
    "ProductRecord",
    "Section",
    "ProductBatch",
    "PurchaseOrder",
    "InboundOrder",
    "LogEntry",
]
