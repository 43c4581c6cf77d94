# clinic_domain/models/department.py
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from clinic_domain.models.base import Base


class Department(Base):
    """
    A medical specialty (Cardiology, Pediatrics, ...).
    Referenced by doctors (restrict on delete) and rooms (set null on delete).
    """

    __tablename__ = "departments"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
