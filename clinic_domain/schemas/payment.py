# clinic_domain/schemas/payment.py
from datetime import date
from decimal import Decimal

from pydantic import Field

from clinic_domain.models.payment import PaymentMethod, PaymentStatus
from clinic_domain.schemas.common import CreateSchema, RecordSchema


class PaymentCreate(CreateSchema):
    appointment_id: int
    amount: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    payment_date: date = Field(default_factory=date.today)
    payment_method: PaymentMethod = PaymentMethod.CASH
    status: PaymentStatus = PaymentStatus.PENDING


class PaymentResponse(RecordSchema):
    id: int
    appointment_id: int
    amount: Decimal
    payment_date: date
    payment_method: PaymentMethod
    status: PaymentStatus
