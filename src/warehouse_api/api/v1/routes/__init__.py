from . import (
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

__all__ = [
    "buyers",
    "carries",
    "employees",
    "inbound_orders",
    "localities",
    "product_batches",
    "product_records",
    "products",
    "purchase_orders",
    "sections",
    "sellers",
    "warehouses",
]
