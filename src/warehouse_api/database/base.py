"""
Declarative base for every ORM model.

The naming convention gives each constraint a deterministic name; the error mapper
relies on the foreign-key pattern fk_<table>_<column>_<referred_table> to tell which
parent a failed insert or update referenced.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


Base.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}
