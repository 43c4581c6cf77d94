# clinic_domain/models/clinic.py
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from clinic_domain.models.base import Base


class Clinic(Base):
    __tablename__ = "clinics"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    location: Mapped[str] = mapped_column(String(200), nullable=False)
