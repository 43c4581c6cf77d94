# clinic_domain/models/patient.py
from datetime import date
from enum import Enum as PyEnum

from sqlalchemy import Date, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from clinic_domain.models.base import Base, enum_column_type


class Gender(str, PyEnum):
    M = "M"
    F = "F"
    OTHER = "Other"


class Patient(Base):
    """
    Registered patient.

    Deleting a patient removes their appointments and medical records.
    """

    __tablename__ = "patients"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    gender: Mapped[Gender | None] = mapped_column(
        enum_column_type(Gender, "patient_gender_enum"),
        nullable=True,
    )

    phone: Mapped[str | None] = mapped_column(String(15), nullable=True, unique=True)
    email: Mapped[str | None] = mapped_column(String(100), nullable=True, unique=True, index=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)

    registration_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        server_default=text("CURRENT_DATE"),
    )
