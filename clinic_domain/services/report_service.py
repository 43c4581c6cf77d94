# clinic_domain/services/report_service.py
"""
Read-only reporting projections over the clinic data.
"""

from datetime import date
from decimal import Decimal

from sqlalchemy import func
from sqlalchemy.orm import Session

from clinic_domain.models.all_models import (
    Appointment,
    AppointmentStatus,
    Department,
    Doctor,
    DoctorService,
    Patient,
    Payment,
    PaymentStatus,
    Prescription,
    Service,
)
from clinic_domain.schemas.report import (
    DepartmentAppointmentsRow,
    DoctorPatientRow,
    DoctorPaymentsRow,
    DoctorServiceRow,
    PatientPrescriptionRow,
    UpcomingAppointmentRow,
)
from clinic_domain.utils.datetime_utils import today

CENTS = Decimal("0.01")

patient_name = (Patient.first_name + " " + Patient.last_name).label("patient_name")
doctor_name = (Doctor.first_name + " " + Doctor.last_name).label("doctor_name")


def upcoming_appointments(db: Session, *, on_or_after: date | None = None) -> list[UpcomingAppointmentRow]:
    """
    Scheduled appointments on or after `on_or_after` (default: today),
    soonest first.
    """
    start = on_or_after or today()
    rows = (
        db.query(
            Appointment.id,
            patient_name,
            doctor_name,
            Appointment.appointment_date,
            Appointment.appointment_time,
            Appointment.status,
        )
        .join(Patient, Appointment.patient_id == Patient.id)
        .join(Doctor, Appointment.doctor_id == Doctor.id)
        .filter(
            Appointment.appointment_date >= start,
            Appointment.status == AppointmentStatus.SCHEDULED,
        )
        .order_by(Appointment.appointment_date, Appointment.appointment_time)
        .all()
    )
    return [
        UpcomingAppointmentRow(
            appointment_id=row[0],
            patient_name=row.patient_name,
            doctor_name=row.doctor_name,
            appointment_date=row.appointment_date,
            appointment_time=row.appointment_time,
            status=row.status,
        )
        for row in rows
    ]


def doctor_patients(db: Session, *, doctor_id: int) -> list[DoctorPatientRow]:
    """
    Patients seen by a doctor, with the number of appointments each.
    """
    rows = (
        db.query(
            Doctor.id,
            doctor_name,
            Patient.id,
            patient_name,
            func.count(Appointment.id).label("total_appointments"),
        )
        .join(Appointment, Appointment.doctor_id == Doctor.id)
        .join(Patient, Appointment.patient_id == Patient.id)
        .filter(Doctor.id == doctor_id)
        .group_by(Doctor.id, Doctor.first_name, Doctor.last_name, Patient.id, Patient.first_name, Patient.last_name)
        .order_by(Patient.id)
        .all()
    )
    return [
        DoctorPatientRow(
            doctor_id=row[0],
            doctor_name=row.doctor_name,
            patient_id=row[2],
            patient_name=row.patient_name,
            total_appointments=row.total_appointments,
        )
        for row in rows
    ]


def patient_prescriptions(db: Session, *, patient_id: int) -> list[PatientPrescriptionRow]:
    rows = (
        db.query(
            Prescription.id,
            Prescription.medication,
            Prescription.dosage,
            Appointment.appointment_date,
        )
        .join(Appointment, Prescription.appointment_id == Appointment.id)
        .filter(Appointment.patient_id == patient_id)
        .order_by(Appointment.appointment_date, Prescription.id)
        .all()
    )
    return [
        PatientPrescriptionRow(
            prescription_id=row[0],
            medication=row.medication,
            dosage=row.dosage,
            appointment_date=row.appointment_date,
        )
        for row in rows
    ]


def payments_per_doctor(
    db: Session,
    *,
    status: PaymentStatus = PaymentStatus.PAID,
) -> list[DoctorPaymentsRow]:
    """
    Total amount and number of payments in `status` per doctor,
    largest total first. Doctors without such payments are left out.
    """
    total = func.sum(Payment.amount).label("total_payments")
    rows = (
        db.query(
            Doctor.id,
            doctor_name,
            total,
            func.count(Payment.id).label("payment_count"),
        )
        .join(Appointment, Appointment.doctor_id == Doctor.id)
        .join(Payment, Payment.appointment_id == Appointment.id)
        .filter(Payment.status == status)
        .group_by(Doctor.id, Doctor.first_name, Doctor.last_name)
        .order_by(total.desc(), Doctor.id)
        .all()
    )
    return [
        DoctorPaymentsRow(
            doctor_id=row[0],
            doctor_name=row.doctor_name,
            total_payments=Decimal(row.total_payments).quantize(CENTS),
            payment_count=row.payment_count,
        )
        for row in rows
    ]


def appointments_per_department(db: Session) -> list[DepartmentAppointmentsRow]:
    """
    Appointment count for every department, including departments with none.
    """
    appointment_count = func.count(Appointment.id).label("appointment_count")
    rows = (
        db.query(Department.id, Department.name, appointment_count)
        .outerjoin(Doctor, Doctor.department_id == Department.id)
        .outerjoin(Appointment, Appointment.doctor_id == Doctor.id)
        .group_by(Department.id, Department.name)
        .order_by(appointment_count.desc(), Department.name)
        .all()
    )
    return [
        DepartmentAppointmentsRow(
            department_id=row[0],
            department=row.name,
            appointment_count=row.appointment_count,
        )
        for row in rows
    ]


def doctor_services(db: Session, *, doctor_id: int) -> list[DoctorServiceRow]:
    rows = (
        db.query(
            Doctor.id,
            doctor_name,
            Service.id,
            Service.name,
            Service.price,
        )
        .join(DoctorService, DoctorService.doctor_id == Doctor.id)
        .join(Service, DoctorService.service_id == Service.id)
        .filter(Doctor.id == doctor_id)
        .order_by(Service.id)
        .all()
    )
    return [
        DoctorServiceRow(
            doctor_id=row[0],
            doctor_name=row.doctor_name,
            service_id=row[2],
            service_name=row.name,
            price=row.price,
        )
        for row in rows
    ]
