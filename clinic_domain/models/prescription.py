# clinic_domain/models/prescription.py
from datetime import date

from sqlalchemy import Date, ForeignKey, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from clinic_domain.models.base import Base


class Prescription(Base):
    """
    One prescription per appointment (appointment_id is unique).
    """

    __tablename__ = "prescriptions"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    appointment_id: Mapped[int] = mapped_column(
        ForeignKey("appointments.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )

    medication: Mapped[str] = mapped_column(String(200), nullable=False)
    dosage: Mapped[str | None] = mapped_column(String(100), nullable=True)         # e.g. "500mg"
    frequency: Mapped[str | None] = mapped_column(String(100), nullable=True)      # e.g. "Twice daily"
    instructions: Mapped[str | None] = mapped_column(Text, nullable=True)          # e.g. "Take after meals"
    prescribed_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        server_default=text("CURRENT_DATE"),
    )
