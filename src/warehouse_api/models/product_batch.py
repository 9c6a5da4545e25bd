from datetime import date

from sqlalchemy import Date, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from warehouse_api.database.base import Base


class ProductBatch(Base):
    """A lot of one product stored in one section."""
    __tablename__ = "product_batches"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    batch_number: Mapped[int] = mapped_column(Integer, unique=True, nullable=False)
    current_quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    current_temperature: Mapped[int] = mapped_column(Integer, nullable=False)
    due_date: Mapped[date] = mapped_column(Date, nullable=False)
    initial_quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    manufacturing_date: Mapped[date] = mapped_column(Date, nullable=False)
    manufacturing_hour: Mapped[int] = mapped_column(Integer, nullable=False)
    minimum_temperature: Mapped[int] = mapped_column(Integer, nullable=False)
    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("products.id"), nullable=False, index=True
    )
    section_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("sections.id"), nullable=False, index=True
    )
