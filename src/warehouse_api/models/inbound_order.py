from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from warehouse_api.database.base import Base


class InboundOrder(Base):
    """Reception of a product batch into a warehouse, handled by an employee."""
    __tablename__ = "inbound_orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_date: Mapped[date] = mapped_column(Date, nullable=False)
    order_number: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    employee_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("employees.id"), nullable=False, index=True
    )
    product_batch_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("product_batches.id"), nullable=False, index=True
    )
    warehouse_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("warehouses.id"), nullable=False, index=True
    )
