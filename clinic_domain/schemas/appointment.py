# clinic_domain/schemas/appointment.py
from datetime import date, datetime, time

from clinic_domain.models.appointment import AppointmentStatus
from clinic_domain.schemas.common import CreateSchema, RecordSchema


class AppointmentCreate(CreateSchema):
    patient_id: int
    doctor_id: int
    clinic_id: int | None = None
    room_id: int | None = None
    appointment_date: date
    appointment_time: time
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    notes: str | None = None


class AppointmentResponse(RecordSchema):
    id: int
    patient_id: int
    doctor_id: int
    clinic_id: int | None = None
    room_id: int | None = None
    appointment_date: date
    appointment_time: time
    status: AppointmentStatus
    notes: str | None = None
    created_at: datetime
