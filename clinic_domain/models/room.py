# clinic_domain/models/room.py
from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Integer, String, text, true
from sqlalchemy.orm import Mapped, mapped_column

from clinic_domain.models.base import Base


class Room(Base):
    __tablename__ = "rooms"
    __table_args__ = (CheckConstraint("capacity >= 1", name="ck_rooms_capacity_positive"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    room_number: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)
    department_id: Mapped[int | None] = mapped_column(
        ForeignKey("departments.id", ondelete="SET NULL"),
        nullable=True,
    )
    capacity: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("1"))
    availability: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=true())
