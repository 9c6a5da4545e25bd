from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from warehouse_api.database.base import Base


class Carry(Base):
    """A carrier company serving a locality."""
    __tablename__ = "carries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cid: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    company_name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    telephone: Mapped[str] = mapped_column(String(50), nullable=False)
    locality_id: Mapped[str] = mapped_column(
        String(50), ForeignKey("localities.id"), nullable=False, index=True
    )
