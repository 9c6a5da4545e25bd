from sqlalchemy import Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from warehouse_api.database.base import Base


class Product(Base):
    """
    A product offered by a seller. Dimensions are in metres, weights in kilograms,
    temperatures in Celsius.
    """
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    expiration_rate: Mapped[int] = mapped_column(Integer, nullable=False)
    freezing_rate: Mapped[int] = mapped_column(Integer, nullable=False)
    height: Mapped[float] = mapped_column(Float, nullable=False)
    length: Mapped[float] = mapped_column(Float, nullable=False)
    net_weight: Mapped[float] = mapped_column(Float, nullable=False)
    product_code: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    recommended_freezing_temperature: Mapped[float] = mapped_column(Float, nullable=False)
    width: Mapped[float] = mapped_column(Float, nullable=False)
    product_type_id: Mapped[int] = mapped_column(Integer, nullable=False)
    seller_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("sellers.id"), nullable=True, index=True
    )
