from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from warehouse_api.database.base import Base


class LogEntry(Base):
    """A persisted log record, written by DatabaseLogHandler."""
    __tablename__ = "logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    time_stamp: Mapped[str] = mapped_column(String(64), nullable=False)
    user: Mapped[str] = mapped_column(String(255), nullable=False)
    file_path: Mapped[str] = mapped_column(String(1024), nullable=False)
    function_line: Mapped[str] = mapped_column(String(16), nullable=False)
    caller_function: Mapped[str] = mapped_column(String(255), nullable=False)
    msg: Mapped[str] = mapped_column(Text, nullable=False)
