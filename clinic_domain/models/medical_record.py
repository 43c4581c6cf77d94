# clinic_domain/models/medical_record.py
from datetime import date

from sqlalchemy import Date, ForeignKey, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from clinic_domain.models.base import Base


class MedicalRecord(Base):
    """
    Patient health history entry.

    Survives deletion of its appointment (link set to NULL) but not of its patient.
    """

    __tablename__ = "medical_records"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    patient_id: Mapped[int] = mapped_column(
        ForeignKey("patients.id", ondelete="CASCADE"),
        nullable=False,
    )
    appointment_id: Mapped[int | None] = mapped_column(
        ForeignKey("appointments.id", ondelete="SET NULL"),
        nullable=True,
    )

    diagnosis: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    record_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        server_default=text("CURRENT_DATE"),
    )
