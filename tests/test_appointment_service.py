# tests/test_appointment_service.py
from datetime import date, time

import pytest

from clinic_domain.core.errors import (
    ConstraintError,
    DoubleBookingError,
    InvalidTransitionError,
    ValidationError,
)
from clinic_domain.models.appointment import AppointmentStatus
from clinic_domain.services import appointment_service, entity_service
from clinic_domain.services.entity_registry import EntityType


def test_new_appointment_defaults_to_scheduled(model, make_patient, make_doctor, make_appointment):
    appointment_id = make_appointment(make_patient(), make_doctor(), notes="First visit")

    appointment = model.get(EntityType.APPOINTMENT, appointment_id)

    assert appointment.status == AppointmentStatus.SCHEDULED
    assert appointment.appointment_date == date(2030, 1, 15)
    assert appointment.appointment_time == time(10, 0)
    assert appointment.notes == "First visit"
    assert appointment.created_at is not None


def test_double_booking_is_rejected(model, make_patient, make_doctor, make_appointment):
    doctor_id = make_doctor()
    make_appointment(make_patient(), doctor_id)

    with pytest.raises(ConstraintError) as exc_info:
        make_appointment(make_patient(), doctor_id)

    assert str(exc_info.value) == "double-booked"
    assert len(model.list(EntityType.APPOINTMENT, {"doctor_id": doctor_id})) == 1


def test_cancelled_appointment_still_holds_the_slot(model, make_patient, make_doctor, make_appointment):
    doctor_id = make_doctor()
    make_appointment(make_patient(), doctor_id, status="Cancelled")

    with pytest.raises(DoubleBookingError):
        make_appointment(make_patient(), doctor_id)


def test_other_slots_and_doctors_are_free(model, make_patient, make_doctor, make_appointment):
    patient_id = make_patient()
    first_doctor = make_doctor()
    second_doctor = make_doctor()

    make_appointment(patient_id, first_doctor)
    make_appointment(patient_id, first_doctor, appointment_time=time(10, 30))
    make_appointment(patient_id, first_doctor, appointment_date=date(2030, 1, 16))
    make_appointment(patient_id, second_doctor)

    assert len(model.list(EntityType.APPOINTMENT, {"patient_id": patient_id})) == 4


def test_moving_into_a_taken_slot_is_rejected(model, make_patient, make_doctor, make_appointment):
    doctor_id = make_doctor()
    make_appointment(make_patient(), doctor_id)
    later_id = make_appointment(make_patient(), doctor_id, appointment_time=time(11, 0))

    with pytest.raises(DoubleBookingError):
        model.update(EntityType.APPOINTMENT, later_id, {"appointment_time": time(10, 0)})

    assert model.get(EntityType.APPOINTMENT, later_id).appointment_time == time(11, 0)


def test_updating_an_appointment_does_not_conflict_with_itself(model, make_patient, make_doctor, make_appointment):
    appointment_id = make_appointment(make_patient(), make_doctor())

    updated = model.update(EntityType.APPOINTMENT, appointment_id, {"notes": "Bring previous ECG"})

    assert updated.notes == "Bring previous ECG"


def test_appointment_references_must_exist(model, make_patient, make_doctor, make_appointment):
    patient_id = make_patient()
    doctor_id = make_doctor()

    with pytest.raises(ValidationError) as exc_info:
        make_appointment(patient_id, doctor_id, room_id=99)
    assert exc_info.value.field == "room_id"

    with pytest.raises(ValidationError) as exc_info:
        make_appointment(999, doctor_id)
    assert exc_info.value.field == "patient_id"


@pytest.mark.parametrize("target", [AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED])
def test_scheduled_can_complete_or_cancel(model, make_patient, make_doctor, make_appointment, target):
    appointment_id = make_appointment(make_patient(), make_doctor())

    updated = model.update(EntityType.APPOINTMENT, appointment_id, {"status": target})

    assert updated.status == target


@pytest.mark.parametrize(
    "start, target",
    [
        (AppointmentStatus.COMPLETED, AppointmentStatus.SCHEDULED),
        (AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED),
        (AppointmentStatus.CANCELLED, AppointmentStatus.SCHEDULED),
        (AppointmentStatus.CANCELLED, AppointmentStatus.COMPLETED),
    ],
)
def test_terminal_statuses_do_not_move(model, make_patient, make_doctor, make_appointment, start, target):
    appointment_id = make_appointment(make_patient(), make_doctor(), status=start)

    with pytest.raises(InvalidTransitionError):
        model.update(EntityType.APPOINTMENT, appointment_id, {"status": target})

    assert model.get(EntityType.APPOINTMENT, appointment_id).status == start


def test_terminal_appointment_keeps_editable_notes(model, make_patient, make_doctor, make_appointment):
    appointment_id = make_appointment(make_patient(), make_doctor(), status="Completed")

    updated = model.update(
        EntityType.APPOINTMENT,
        appointment_id,
        {"status": "Completed", "notes": "Follow-up in two weeks"},
    )

    assert updated.status == AppointmentStatus.COMPLETED
    assert updated.notes == "Follow-up in two weeks"


def test_unknown_status_is_rejected(model, make_patient, make_doctor, make_appointment):
    with pytest.raises(ValidationError):
        make_appointment(make_patient(), make_doctor(), status="NoShow")


def test_store_constraint_catches_a_missed_conflict(monkeypatch, db_session, model, make_patient, make_doctor):
    """
    Two writers that both passed the pre-check: the unique constraint
    on (doctor, date, time) still rejects the second one.
    """
    doctor_id = make_doctor()
    fields = {
        "patient_id": make_patient(),
        "doctor_id": doctor_id,
        "appointment_date": date(2030, 2, 1),
        "appointment_time": time(9, 0),
    }
    model.create(EntityType.APPOINTMENT, fields)

    monkeypatch.setattr(appointment_service, "find_conflicting_appointment", lambda *args, **kwargs: None)

    with pytest.raises(DoubleBookingError):
        entity_service.create_entity(db_session, EntityType.APPOINTMENT, fields)


def test_find_conflicting_appointment_excludes_itself(db_session, make_patient, make_doctor, make_appointment):
    doctor_id = make_doctor()
    appointment_id = make_appointment(make_patient(), doctor_id)

    found = appointment_service.find_conflicting_appointment(
        db_session,
        doctor_id=doctor_id,
        appointment_date=date(2030, 1, 15),
        appointment_time=time(10, 0),
    )
    assert found is not None and found.id == appointment_id

    assert (
        appointment_service.find_conflicting_appointment(
            db_session,
            doctor_id=doctor_id,
            appointment_date=date(2030, 1, 15),
            appointment_time=time(10, 0),
            exclude_id=appointment_id,
        )
        is None
    )
