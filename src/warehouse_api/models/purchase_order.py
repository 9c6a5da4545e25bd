from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from warehouse_api.database.base import Base


class PurchaseOrder(Base):
    __tablename__ = "purchase_orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_number: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    order_date: Mapped[date] = mapped_column(Date, nullable=False)
    tracking_code: Mapped[str] = mapped_column(String(50), nullable=False)
    buyer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("buyers.id"), nullable=False, index=True
    )
    product_record_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("product_records.id"), nullable=False, index=True
    )
    # Statuses are managed outside this service
    order_status_id: Mapped[int] = mapped_column(Integer, nullable=False)
