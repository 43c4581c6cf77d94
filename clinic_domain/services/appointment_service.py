# clinic_domain/services/appointment_service.py
from datetime import date, time
from typing import Any

from sqlalchemy.orm import Session

from clinic_domain.core.errors import DoubleBookingError, InvalidTransitionError
from clinic_domain.models.appointment import Appointment, AppointmentStatus

# Completed and Cancelled are terminal
ALLOWED_STATUS_TRANSITIONS: dict[AppointmentStatus, set[AppointmentStatus]] = {
    AppointmentStatus.SCHEDULED: {AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED},
    AppointmentStatus.COMPLETED: set(),
    AppointmentStatus.CANCELLED: set(),
}


def check_status_transition(current: AppointmentStatus, new: AppointmentStatus) -> None:
    """
    Raise InvalidTransitionError unless `current -> new` is allowed.
    Re-stating the current status is a no-op.
    """
    if current == new:
        return
    if new not in ALLOWED_STATUS_TRANSITIONS[current]:
        raise InvalidTransitionError(
            f"Appointment is already {current.value}. It cannot be moved to {new.value}.",
            entity="Appointment",
            field="status",
        )


def find_conflicting_appointment(
    db: Session,
    *,
    doctor_id: int,
    appointment_date: date,
    appointment_time: time,
    exclude_id: int | None = None,
) -> Appointment | None:
    """
    Return an appointment already holding the doctor's (date, time) slot.

    Every status counts, cancelled appointments included: the slot stays
    unique for the lifetime of the row.
    """
    query = db.query(Appointment).filter(
        Appointment.doctor_id == doctor_id,
        Appointment.appointment_date == appointment_date,
        Appointment.appointment_time == appointment_time,
    )
    if exclude_id is not None:
        query = query.filter(Appointment.id != exclude_id)
    return query.first()


def check_appointment_write(db: Session, current: Appointment | None, values: dict[str, Any]) -> None:
    """
    Appointment-specific checks run before a create (`current` is None) or update.
    """
    if current is not None:
        check_status_transition(current.status, values["status"])

    conflicting = find_conflicting_appointment(
        db,
        doctor_id=values["doctor_id"],
        appointment_date=values["appointment_date"],
        appointment_time=values["appointment_time"],
        exclude_id=current.id if current is not None else None,
    )
    if conflicting:
        raise DoubleBookingError(entity="Appointment")
