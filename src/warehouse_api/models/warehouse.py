from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from warehouse_api.database.base import Base


class Warehouse(Base):
    __tablename__ = "warehouses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    warehouse_code: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    telephone: Mapped[str] = mapped_column(String(50), nullable=False)
    minimum_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    minimum_temperature: Mapped[int] = mapped_column(Integer, nullable=False)
    # Optional: warehouses registered before localities existed carry none
    locality_id: Mapped[str | None] = mapped_column(
        String(50), ForeignKey("localities.id"), nullable=True, index=True
    )
