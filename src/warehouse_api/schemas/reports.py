"""
Report rows. Field names are part of the public API.
"""

from pydantic import BaseModel


class LocalitySellersReport(BaseModel):
    locality_id: str
    locality_name: str
    sellers_count: int


class LocalityCarriesReport(BaseModel):
    locality_id: str
    locality_name: str
    carries_count: int


class EmployeeInboundOrdersReport(BaseModel):
    id: int
    card_number_id: str
    first_name: str
    last_name: str
    warehouse_id: int
    inbound_orders_count: int


class BuyerPurchaseOrdersReport(BaseModel):
    buyer_id: int
    card_number_id: str
    first_name: str
    last_name: str
    orders_count: int


class ProductRecordsReport(BaseModel):
    product_id: int
    description: str
    records_count: int


class SectionProductsReport(BaseModel):
    section_id: int
    section_number: int
    products_count: int
