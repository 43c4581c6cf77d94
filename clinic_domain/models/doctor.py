# clinic_domain/models/doctor.py
from datetime import date

from sqlalchemy import Date, ForeignKey, String, text
from sqlalchemy.orm import Mapped, mapped_column

from clinic_domain.models.base import Base


class Doctor(Base):
    __tablename__ = "doctors"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    specialization: Mapped[str | None] = mapped_column(String(100), nullable=True)

    department_id: Mapped[int] = mapped_column(
        ForeignKey("departments.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
        doc="Owning department; a department cannot be deleted while doctors reference it",
    )

    phone: Mapped[str | None] = mapped_column(String(15), nullable=True, unique=True)
    email: Mapped[str | None] = mapped_column(String(100), nullable=True, unique=True)
    hire_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        server_default=text("CURRENT_DATE"),
    )
