from datetime import date

from sqlalchemy import Date, Float, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from warehouse_api.database.base import Base


class ProductRecord(Base):
    """A price snapshot of a product at a given date."""
    __tablename__ = "product_records"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    last_update_date: Mapped[date] = mapped_column(Date, nullable=False)
    purchase_price: Mapped[float] = mapped_column(Float, nullable=False)
    sale_price: Mapped[float] = mapped_column(Float, nullable=False)
    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("products.id"), nullable=False, index=True
    )
