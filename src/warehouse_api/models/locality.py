from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from warehouse_api.database.base import Base


class Locality(Base):
    """
    A locality, keyed by an externally assigned code (e.g. a postal code), not a
    surrogate id.
    """
    __tablename__ = "localities"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    locality_name: Mapped[str] = mapped_column(String(255), nullable=False)
    province_name: Mapped[str] = mapped_column(String(255), nullable=False)
    country_name: Mapped[str] = mapped_column(String(255), nullable=False)
