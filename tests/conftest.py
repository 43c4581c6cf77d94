# tests/conftest.py
from datetime import date, time
from decimal import Decimal

import pytest

from clinic_domain.core.database import build_engine, build_session_factory, init_db
from clinic_domain.services.clinic_model import ClinicModel
from clinic_domain.services.entity_registry import EntityType
from clinic_domain.services.seed_service import load_sample_data


@pytest.fixture
def engine():
    """Fresh in-memory database per test."""
    engine = build_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def model(session_factory):
    return ClinicModel(session_factory)


@pytest.fixture
def seeded(model):
    return load_sample_data(model)


@pytest.fixture
def department_id(model):
    return model.create(EntityType.DEPARTMENT, {"name": "Cardiology", "description": "Heart"})


@pytest.fixture
def make_patient(model):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        n = counter["n"]
        fields = {
            "first_name": f"Patient{n}",
            "last_name": "Test",
            "date_of_birth": date(1985, 1, n),
            "gender": "F",
            "phone": f"555-000-{n:04d}",
            "email": f"patient{n}@email.com",
        }
        fields.update(overrides)
        return model.create(EntityType.PATIENT, fields)

    return _make


@pytest.fixture
def make_doctor(model, department_id):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        n = counter["n"]
        fields = {
            "first_name": f"Dr. Doc{n}",
            "last_name": "Test",
            "specialization": "General",
            "department_id": department_id,
            "phone": f"555-111-{n:04d}",
            "email": f"doctor{n}@email.com",
        }
        fields.update(overrides)
        return model.create(EntityType.DOCTOR, fields)

    return _make


@pytest.fixture
def make_appointment(model):
    def _make(patient_id, doctor_id, **overrides):
        fields = {
            "patient_id": patient_id,
            "doctor_id": doctor_id,
            "appointment_date": date(2030, 1, 15),
            "appointment_time": time(10, 0),
        }
        fields.update(overrides)
        return model.create(EntityType.APPOINTMENT, fields)

    return _make


@pytest.fixture
def service_id(model):
    return model.create(EntityType.SERVICE, {"name": "Consultation", "price": Decimal("50.00")})
