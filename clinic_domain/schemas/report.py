# clinic_domain/schemas/report.py
from datetime import date, time
from decimal import Decimal

from pydantic import BaseModel

from clinic_domain.models.appointment import AppointmentStatus


class UpcomingAppointmentRow(BaseModel):
    appointment_id: int
    patient_name: str
    doctor_name: str
    appointment_date: date
    appointment_time: time
    status: AppointmentStatus


class DoctorPatientRow(BaseModel):
    doctor_id: int
    doctor_name: str
    patient_id: int
    patient_name: str
    total_appointments: int


class PatientPrescriptionRow(BaseModel):
    prescription_id: int
    medication: str
    dosage: str | None = None
    appointment_date: date


class DoctorPaymentsRow(BaseModel):
    doctor_id: int
    doctor_name: str
    total_payments: Decimal
    payment_count: int


class DepartmentAppointmentsRow(BaseModel):
    department_id: int
    department: str
    appointment_count: int


class DoctorServiceRow(BaseModel):
    doctor_id: int
    doctor_name: str
    service_id: int
    service_name: str
    price: Decimal
