# clinic_domain/services/cascade_service.py
"""
Delete rules, dispatched per entity type.

The rules run inside the caller's transaction, so a cascade is applied
completely or not at all. They mirror the ON DELETE clauses declared on
the tables, which lets the same behaviour hold on stores without native
foreign keys.
"""

import logging
from typing import Any, Callable

from sqlalchemy.orm import Session

from clinic_domain.core.errors import RestrictedDeleteError
from clinic_domain.models.all_models import (
    Appointment,
    Clinic,
    Department,
    Doctor,
    DoctorService,
    MedicalRecord,
    Patient,
    Payment,
    Prescription,
    Room,
    Service,
)
from clinic_domain.services.entity_registry import EntityType

logger = logging.getLogger(__name__)


def _delete_appointments(db: Session, appointment_ids: list[int]) -> None:
    """
    Remove appointments with their prescriptions and payments;
    medical records stay but lose the appointment link.
    """
    if not appointment_ids:
        return

    db.query(Prescription).filter(Prescription.appointment_id.in_(appointment_ids)).delete(
        synchronize_session="fetch"
    )
    db.query(Payment).filter(Payment.appointment_id.in_(appointment_ids)).delete(synchronize_session="fetch")
    db.query(MedicalRecord).filter(MedicalRecord.appointment_id.in_(appointment_ids)).update(
        {MedicalRecord.appointment_id: None},
        synchronize_session="fetch",
    )
    db.query(Appointment).filter(Appointment.id.in_(appointment_ids)).delete(synchronize_session="fetch")


def delete_department(db: Session, department: Department) -> None:
    doctor_count = db.query(Doctor).filter(Doctor.department_id == department.id).count()
    if doctor_count > 0:
        raise RestrictedDeleteError(
            f"Cannot delete department '{department.name}'. {doctor_count} doctor(s) are assigned to it. "
            "Please reassign them to another department first.",
            entity="Department",
        )

    db.query(Room).filter(Room.department_id == department.id).update(
        {Room.department_id: None},
        synchronize_session="fetch",
    )
    db.query(Department).filter(Department.id == department.id).delete(synchronize_session="fetch")


def delete_clinic(db: Session, clinic: Clinic) -> None:
    db.query(Appointment).filter(Appointment.clinic_id == clinic.id).update(
        {Appointment.clinic_id: None},
        synchronize_session="fetch",
    )
    db.query(Clinic).filter(Clinic.id == clinic.id).delete(synchronize_session="fetch")


def delete_room(db: Session, room: Room) -> None:
    db.query(Appointment).filter(Appointment.room_id == room.id).update(
        {Appointment.room_id: None},
        synchronize_session="fetch",
    )
    db.query(Room).filter(Room.id == room.id).delete(synchronize_session="fetch")


def delete_patient(db: Session, patient: Patient) -> None:
    patient_id = patient.id
    appointment_ids = [
        row[0] for row in db.query(Appointment.id).filter(Appointment.patient_id == patient_id).all()
    ]
    _delete_appointments(db, appointment_ids)
    db.query(MedicalRecord).filter(MedicalRecord.patient_id == patient_id).delete(synchronize_session="fetch")
    db.query(Patient).filter(Patient.id == patient_id).delete(synchronize_session="fetch")
    logger.info(
        "Patient %s deleted with %d appointment(s)",
        patient_id,
        len(appointment_ids),
    )


def delete_doctor(db: Session, doctor: Doctor) -> None:
    # Appointment history is kept, so the doctor has to stay
    appointment_count = db.query(Appointment).filter(Appointment.doctor_id == doctor.id).count()
    if appointment_count > 0:
        raise RestrictedDeleteError(
            f"Cannot delete doctor {doctor.id}. {appointment_count} appointment(s) reference this doctor.",
            entity="Doctor",
        )

    db.query(DoctorService).filter(DoctorService.doctor_id == doctor.id).delete(synchronize_session="fetch")
    db.query(Doctor).filter(Doctor.id == doctor.id).delete(synchronize_session="fetch")


def delete_service(db: Session, service: Service) -> None:
    db.query(DoctorService).filter(DoctorService.service_id == service.id).delete(synchronize_session="fetch")
    db.query(Service).filter(Service.id == service.id).delete(synchronize_session="fetch")


def delete_appointment(db: Session, appointment: Appointment) -> None:
    _delete_appointments(db, [appointment.id])


def _delete_row(db: Session, record: Any) -> None:
    db.delete(record)
    db.flush()


DELETE_RULES: dict[EntityType, Callable[[Session, Any], None]] = {
    EntityType.DEPARTMENT: delete_department,
    EntityType.CLINIC: delete_clinic,
    EntityType.PATIENT: delete_patient,
    EntityType.DOCTOR: delete_doctor,
    EntityType.SERVICE: delete_service,
    EntityType.DOCTOR_SERVICE: _delete_row,
    EntityType.ROOM: delete_room,
    EntityType.APPOINTMENT: delete_appointment,
    EntityType.PRESCRIPTION: _delete_row,
    EntityType.MEDICAL_RECORD: _delete_row,
    EntityType.PAYMENT: _delete_row,
}


def apply_delete_rule(db: Session, entity: EntityType, record: Any) -> None:
    DELETE_RULES[entity](db, record)
