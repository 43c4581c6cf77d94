# clinic_domain/models/payment.py
from datetime import date
from decimal import Decimal
from enum import Enum as PyEnum

from sqlalchemy import CheckConstraint, Date, ForeignKey, Numeric, text
from sqlalchemy.orm import Mapped, mapped_column

from clinic_domain.models.base import Base, enum_column_type


class PaymentMethod(str, PyEnum):
    CASH = "Cash"
    CARD = "Card"
    INSURANCE = "Insurance"
    ONLINE = "Online"


class PaymentStatus(str, PyEnum):
    PENDING = "Pending"
    PAID = "Paid"
    REFUNDED = "Refunded"


class Payment(Base):
    __tablename__ = "payments"
    __table_args__ = (CheckConstraint("amount > 0", name="ck_payments_amount_positive"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # Many payments per appointment are allowed
    appointment_id: Mapped[int] = mapped_column(
        ForeignKey("appointments.id", ondelete="CASCADE"),
        nullable=False,
    )

    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    payment_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        server_default=text("CURRENT_DATE"),
    )
    payment_method: Mapped[PaymentMethod] = mapped_column(
        enum_column_type(PaymentMethod, "payment_method_enum"),
        nullable=False,
        default=PaymentMethod.CASH,
        server_default=text("'Cash'"),
    )
    status: Mapped[PaymentStatus] = mapped_column(
        enum_column_type(PaymentStatus, "payment_status_enum"),
        nullable=False,
        default=PaymentStatus.PENDING,
        server_default=text("'Pending'"),
    )
