# clinic_domain/models/base.py
from enum import Enum as PyEnum

from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for all ORM models.
    """

    pass


def enum_column_type(enum_cls: type[PyEnum], name: str) -> SAEnum:
    """
    SQLAlchemy Enum that stores the member *values* ("Scheduled", "Other", ...)
    rather than the member names.
    """
    return SAEnum(
        enum_cls,
        name=name,
        values_callable=lambda members: [m.value for m in members],
        validate_strings=True,
    )
