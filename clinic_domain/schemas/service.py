# clinic_domain/schemas/service.py
from decimal import Decimal

from pydantic import Field

from clinic_domain.schemas.common import CreateSchema, RecordSchema


class ServiceCreate(CreateSchema):
    name: str = Field(min_length=1, max_length=100)
    description: str | None = None
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)


class ServiceResponse(RecordSchema):
    id: int
    name: str
    description: str | None = None
    price: Decimal


class DoctorServiceCreate(CreateSchema):
    doctor_id: int
    service_id: int


class DoctorServiceResponse(RecordSchema):
    doctor_id: int
    service_id: int
