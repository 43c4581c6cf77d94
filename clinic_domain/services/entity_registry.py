# clinic_domain/services/entity_registry.py
"""
Per-entity metadata used by the generic CRUD service.

Each entry names the ORM model, the input/output schemas, the unique column
groups checked before a write, the foreign references that must exist, and an
optional extra check (appointments use it for scheduling rules).
"""

from dataclasses import dataclass, field
from enum import Enum as PyEnum
from typing import Any, Callable

from pydantic import BaseModel
from sqlalchemy.orm import Session

from clinic_domain.core.errors import ValidationError
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
from clinic_domain.models.base import Base
from clinic_domain.schemas.appointment import AppointmentCreate, AppointmentResponse
from clinic_domain.schemas.clinic import ClinicCreate, ClinicResponse
from clinic_domain.schemas.department import DepartmentCreate, DepartmentResponse
from clinic_domain.schemas.doctor import DoctorCreate, DoctorResponse
from clinic_domain.schemas.medical_record import MedicalRecordCreate, MedicalRecordResponse
from clinic_domain.schemas.patient import PatientCreate, PatientResponse
from clinic_domain.schemas.payment import PaymentCreate, PaymentResponse
from clinic_domain.schemas.prescription import PrescriptionCreate, PrescriptionResponse
from clinic_domain.schemas.room import RoomCreate, RoomResponse
from clinic_domain.schemas.service import (
    DoctorServiceCreate,
    DoctorServiceResponse,
    ServiceCreate,
    ServiceResponse,
)
from clinic_domain.services.appointment_service import check_appointment_write


class EntityType(str, PyEnum):
    DEPARTMENT = "department"
    CLINIC = "clinic"
    PATIENT = "patient"
    DOCTOR = "doctor"
    SERVICE = "service"
    DOCTOR_SERVICE = "doctor_service"
    ROOM = "room"
    APPOINTMENT = "appointment"
    PRESCRIPTION = "prescription"
    MEDICAL_RECORD = "medical_record"
    PAYMENT = "payment"


WriteCheck = Callable[[Session, Any, dict[str, Any]], None]


@dataclass(frozen=True)
class EntityDefinition:
    entity: EntityType
    model: type[Base]
    create_schema: type[BaseModel]
    response_schema: type[BaseModel]
    unique_together: tuple[tuple[str, ...], ...] = ()
    references: dict[str, EntityType] = field(default_factory=dict)
    before_write: WriteCheck | None = None
    updatable: bool = True

    @property
    def label(self) -> str:
        return self.model.__name__


ENTITY_DEFINITIONS: dict[EntityType, EntityDefinition] = {
    EntityType.DEPARTMENT: EntityDefinition(
        entity=EntityType.DEPARTMENT,
        model=Department,
        create_schema=DepartmentCreate,
        response_schema=DepartmentResponse,
        unique_together=(("name",),),
    ),
    EntityType.CLINIC: EntityDefinition(
        entity=EntityType.CLINIC,
        model=Clinic,
        create_schema=ClinicCreate,
        response_schema=ClinicResponse,
    ),
    EntityType.PATIENT: EntityDefinition(
        entity=EntityType.PATIENT,
        model=Patient,
        create_schema=PatientCreate,
        response_schema=PatientResponse,
        unique_together=(("phone",), ("email",)),
    ),
    EntityType.DOCTOR: EntityDefinition(
        entity=EntityType.DOCTOR,
        model=Doctor,
        create_schema=DoctorCreate,
        response_schema=DoctorResponse,
        unique_together=(("phone",), ("email",)),
        references={"department_id": EntityType.DEPARTMENT},
    ),
    EntityType.SERVICE: EntityDefinition(
        entity=EntityType.SERVICE,
        model=Service,
        create_schema=ServiceCreate,
        response_schema=ServiceResponse,
    ),
    EntityType.DOCTOR_SERVICE: EntityDefinition(
        entity=EntityType.DOCTOR_SERVICE,
        model=DoctorService,
        create_schema=DoctorServiceCreate,
        response_schema=DoctorServiceResponse,
        unique_together=(("doctor_id", "service_id"),),
        references={"doctor_id": EntityType.DOCTOR, "service_id": EntityType.SERVICE},
        # The pair is the identity; delete and re-create instead
        updatable=False,
    ),
    EntityType.ROOM: EntityDefinition(
        entity=EntityType.ROOM,
        model=Room,
        create_schema=RoomCreate,
        response_schema=RoomResponse,
        unique_together=(("room_number",),),
        references={"department_id": EntityType.DEPARTMENT},
    ),
    EntityType.APPOINTMENT: EntityDefinition(
        entity=EntityType.APPOINTMENT,
        model=Appointment,
        create_schema=AppointmentCreate,
        response_schema=AppointmentResponse,
        references={
            "patient_id": EntityType.PATIENT,
            "doctor_id": EntityType.DOCTOR,
            "clinic_id": EntityType.CLINIC,
            "room_id": EntityType.ROOM,
        },
        before_write=check_appointment_write,
    ),
    EntityType.PRESCRIPTION: EntityDefinition(
        entity=EntityType.PRESCRIPTION,
        model=Prescription,
        create_schema=PrescriptionCreate,
        response_schema=PrescriptionResponse,
        unique_together=(("appointment_id",),),
        references={"appointment_id": EntityType.APPOINTMENT},
    ),
    EntityType.MEDICAL_RECORD: EntityDefinition(
        entity=EntityType.MEDICAL_RECORD,
        model=MedicalRecord,
        create_schema=MedicalRecordCreate,
        response_schema=MedicalRecordResponse,
        references={
            "patient_id": EntityType.PATIENT,
            "appointment_id": EntityType.APPOINTMENT,
        },
    ),
    EntityType.PAYMENT: EntityDefinition(
        entity=EntityType.PAYMENT,
        model=Payment,
        create_schema=PaymentCreate,
        response_schema=PaymentResponse,
        references={"appointment_id": EntityType.APPOINTMENT},
    ),
}


def get_definition(entity: EntityType | str) -> EntityDefinition:
    try:
        return ENTITY_DEFINITIONS[EntityType(entity)]
    except ValueError:
        raise ValidationError(f"Unknown entity type: {entity!r}") from None
