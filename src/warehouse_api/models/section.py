from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from warehouse_api.database.base import Base


class Section(Base):
    __tablename__ = "sections"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    section_number: Mapped[int] = mapped_column(Integer, unique=True, nullable=False)
    current_temperature: Mapped[int] = mapped_column(Integer, nullable=False)
    minimum_temperature: Mapped[int] = mapped_column(Integer, nullable=False)
    current_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    minimum_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    maximum_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    warehouse_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("warehouses.id"), nullable=False, index=True
    )
    product_type_id: Mapped[int] = mapped_column(Integer, nullable=False)
