# tests/test_clinic_model.py
import pytest

from clinic_domain.core.config import Settings
from clinic_domain.core.database import build_engine, build_session_factory, drop_db, init_db
from clinic_domain.core.errors import ClinicDomainError, StorageError
from clinic_domain.services.clinic_model import ClinicModel
from clinic_domain.services.entity_registry import EntityType


def test_storage_failures_surface_as_storage_error():
    engine = build_engine("sqlite://")
    model = ClinicModel(build_session_factory(engine))

    # No tables were created on this engine
    with pytest.raises(StorageError) as exc_info:
        model.list(EntityType.PATIENT)

    assert isinstance(exc_info.value, ClinicDomainError)
    engine.dispose()


def test_schema_can_be_dropped_and_recreated(engine, model, department_id):
    drop_db(engine)
    init_db(engine)

    assert model.list(EntityType.DEPARTMENT) == []


def test_rejected_write_leaves_nothing_behind(model, department_id):
    with pytest.raises(ClinicDomainError):
        model.create(EntityType.DEPARTMENT, {"name": "Cardiology"})

    assert [d.id for d in model.list(EntityType.DEPARTMENT)] == [department_id]


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///other.db")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.database_url == "sqlite:///other.db"
    assert settings.log_level == "debug"
    assert settings.database_echo is False
