# clinic_domain/models/service.py
from decimal import Decimal

from sqlalchemy import CheckConstraint, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from clinic_domain.models.base import Base


class Service(Base):
    """
    A billable medical service (consultation, lab test, ...).
    """

    __tablename__ = "services"
    __table_args__ = (CheckConstraint("price >= 0", name="ck_services_price_non_negative"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)


class DoctorService(Base):
    """
    Many-to-many membership between doctors and the services they offer.
    The (doctor_id, service_id) pair is the identity; rows go away with either side.
    """

    __tablename__ = "doctor_services"

    doctor_id: Mapped[int] = mapped_column(
        ForeignKey("doctors.id", ondelete="CASCADE"),
        primary_key=True,
    )
    service_id: Mapped[int] = mapped_column(
        ForeignKey("services.id", ondelete="CASCADE"),
        primary_key=True,
    )
