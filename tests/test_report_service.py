# tests/test_report_service.py
from datetime import date, time
from decimal import Decimal

import pytest

from clinic_domain.core.errors import ValidationError
from clinic_domain.models.appointment import AppointmentStatus
from clinic_domain.models.payment import PaymentStatus
from clinic_domain.services import report_service, seed_service
from clinic_domain.services.entity_registry import EntityType
from clinic_domain.services.report_service import (
    appointments_per_department,
    doctor_patients,
    doctor_services,
    patient_prescriptions,
    payments_per_doctor,
    upcoming_appointments,
)
from clinic_domain.services.seed_service import (
    SeedStatus,
    has_sample_data,
    load_sample_data,
    sample_data_status,
)


def test_sample_data_is_loaded_once(model):
    assert has_sample_data(model) is False

    created = load_sample_data(model)

    assert has_sample_data(model) is True
    assert len(created["departments"]) == 3
    assert len(created["doctor_services"]) == 4
    assert created["doctor_services"][0] == (created["doctors"][0], created["services"][0])
    assert len(model.list(EntityType.APPOINTMENT)) == 2
    assert sample_data_status(model) == SeedStatus.COMPLETE


def test_interrupted_seed_is_reported_as_partial(monkeypatch, model):
    assert sample_data_status(model) == SeedStatus.EMPTY
    monkeypatch.setattr(seed_service, "PAYMENTS", [{"appointment": 0, "amount": Decimal("0.00")}])

    with pytest.raises(ValidationError):
        load_sample_data(model)

    assert has_sample_data(model) is True
    assert sample_data_status(model) == SeedStatus.PARTIAL


def test_upcoming_appointments_only_lists_scheduled(model, seeded):
    rows = model.report(upcoming_appointments, on_or_after=date(2023, 1, 1))

    assert [row.appointment_id for row in rows] == [seeded["appointments"][0]]
    row = rows[0]
    assert row.patient_name == "John Voke"
    assert row.doctor_name == "Dr. Alice Johnson"
    assert row.appointment_date == date(2023, 10, 15)
    assert row.appointment_time == time(10, 0)
    assert row.status == AppointmentStatus.SCHEDULED


def test_upcoming_appointments_default_to_today(monkeypatch, model, seeded):
    assert model.report(upcoming_appointments) == []

    monkeypatch.setattr(report_service, "today", lambda: date(2023, 10, 15))
    assert len(model.report(upcoming_appointments)) == 1


def test_upcoming_appointments_are_ordered_by_slot(model, make_patient, make_doctor, make_appointment):
    patient_id = make_patient()
    doctor_id = make_doctor()
    late = make_appointment(patient_id, doctor_id, appointment_time=time(15, 0))
    early = make_appointment(patient_id, doctor_id, appointment_time=time(9, 0))
    next_day = make_appointment(patient_id, doctor_id, appointment_date=date(2030, 1, 16), appointment_time=time(8, 0))

    rows = model.report(upcoming_appointments, on_or_after=date(2030, 1, 1))

    assert [row.appointment_id for row in rows] == [early, late, next_day]


def test_doctor_patients(model, seeded, make_appointment):
    alice = seeded["doctors"][0]
    john, jane = seeded["patients"]
    make_appointment(john, alice, appointment_date=date(2023, 11, 1))
    make_appointment(jane, alice, appointment_date=date(2023, 11, 2))

    rows = model.report(doctor_patients, doctor_id=alice)

    assert [(row.patient_name, row.total_appointments) for row in rows] == [
        ("John Voke", 2),
        ("Jane Smith", 1),
    ]
    assert {row.doctor_name for row in rows} == {"Dr. Alice Johnson"}


def test_doctor_patients_for_unknown_doctor_is_empty(model, seeded):
    assert model.report(doctor_patients, doctor_id=999) == []


def test_patient_prescriptions(model, seeded):
    rows = model.report(patient_prescriptions, patient_id=seeded["patients"][0])

    assert len(rows) == 1
    assert rows[0].prescription_id == seeded["prescriptions"][0]
    assert rows[0].medication == "Aspirin"
    assert rows[0].dosage == "100mg"
    assert rows[0].appointment_date == date(2023, 10, 15)


def test_payments_per_doctor(model, seeded):
    rows = model.report(payments_per_doctor)

    assert [(row.doctor_name, row.total_payments, row.payment_count) for row in rows] == [
        ("Dr. Bob Lee", Decimal("75.00"), 1),
        ("Dr. Alice Johnson", Decimal("50.00"), 1),
    ]


def test_payments_per_doctor_filters_by_status(model, seeded):
    assert model.report(payments_per_doctor, status=PaymentStatus.PENDING) == []

    model.create(
        EntityType.PAYMENT,
        {"appointment_id": seeded["appointments"][0], "amount": "12.50"},
    )
    rows = model.report(payments_per_doctor, status=PaymentStatus.PENDING)

    assert [(row.doctor_id, row.total_payments) for row in rows] == [(seeded["doctors"][0], Decimal("12.50"))]


def test_appointments_per_department_includes_empty_departments(model, seeded):
    rows = model.report(appointments_per_department)

    assert [(row.department, row.appointment_count) for row in rows] == [
        ("Cardiology", 1),
        ("Pediatrics", 1),
        ("Orthopedics", 0),
    ]


def test_doctor_services(model, seeded):
    rows = model.report(doctor_services, doctor_id=seeded["doctors"][0])

    assert [(row.service_name, row.price) for row in rows] == [
        ("Consultation", Decimal("50.00")),
        ("ECG Test", Decimal("100.00")),
    ]
