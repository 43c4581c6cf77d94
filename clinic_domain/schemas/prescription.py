# clinic_domain/schemas/prescription.py
from datetime import date

from pydantic import Field

from clinic_domain.schemas.common import CreateSchema, RecordSchema


class PrescriptionCreate(CreateSchema):
    appointment_id: int
    medication: str = Field(min_length=1, max_length=200)
    dosage: str | None = Field(default=None, max_length=100)
    frequency: str | None = Field(default=None, max_length=100)
    instructions: str | None = None
    prescribed_date: date = Field(default_factory=date.today)


class PrescriptionResponse(RecordSchema):
    id: int
    appointment_id: int
    medication: str
    dosage: str | None = None
    frequency: str | None = None
    instructions: str | None = None
    prescribed_date: date
