# clinic_domain/schemas/medical_record.py
from datetime import date

from pydantic import Field

from clinic_domain.schemas.common import CreateSchema, RecordSchema


class MedicalRecordCreate(CreateSchema):
    patient_id: int
    appointment_id: int | None = None
    diagnosis: str | None = None
    notes: str | None = None
    record_date: date = Field(default_factory=date.today)


class MedicalRecordResponse(RecordSchema):
    id: int
    patient_id: int
    appointment_id: int | None = None
    diagnosis: str | None = None
    notes: str | None = None
    record_date: date
