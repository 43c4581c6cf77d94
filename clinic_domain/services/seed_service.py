# clinic_domain/services/seed_service.py
"""
Sample reference data and records, loaded through ordinary create calls.

Rows refer to each other by their position in the lists below
(e.g. DOCTORS[0] belongs to DEPARTMENTS[0]); identifiers are resolved
as the rows are created.
"""

import logging
from decimal import Decimal
from enum import Enum as PyEnum
from typing import Any

from clinic_domain.models.appointment import AppointmentStatus
from clinic_domain.models.patient import Gender
from clinic_domain.models.payment import PaymentMethod, PaymentStatus
from clinic_domain.services.clinic_model import ClinicModel
from clinic_domain.services.entity_registry import EntityType

logger = logging.getLogger(__name__)

DEPARTMENTS = [
    {"name": "Cardiology", "description": "Heart and cardiovascular diseases"},
    {"name": "Pediatrics", "description": "Child healthcare"},
    {"name": "Orthopedics", "description": "Bone and joint treatments"},
]

CLINICS = [
    {"name": "Main Clinic", "location": "123 Health St, City A"},
    {"name": "Branch Clinic", "location": "456 Wellness Ave, City B"},
]

SERVICES = [
    {"name": "Consultation", "description": "General doctor consultation", "price": Decimal("50.00")},
    {"name": "ECG Test", "description": "Electrocardiogram test", "price": Decimal("100.00")},
    {"name": "Blood Test", "description": "Basic blood analysis", "price": Decimal("75.00")},
]

PATIENTS = [
    {
        "first_name": "John",
        "last_name": "Voke",
        "date_of_birth": "1980-05-15",
        "gender": Gender.M,
        "phone": "123-456-7890",
        "email": "jontefresh.voke@email.com",
        "address": "789 Oak Ave",
    },
    {
        "first_name": "Jane",
        "last_name": "Smith",
        "date_of_birth": "1990-08-22",
        "gender": Gender.F,
        "phone": "098-765-4321",
        "email": "jane.smith@email.com",
        "address": "101 Pine St",
    },
]

# "department" is an index into DEPARTMENTS
DOCTORS = [
    {
        "first_name": "Dr. Alice",
        "last_name": "Johnson",
        "specialization": "Cardiologist",
        "department": 0,
        "phone": "111-222-3333",
        "email": "alice.j@email.com",
    },
    {
        "first_name": "Dr. Bob",
        "last_name": "Lee",
        "specialization": "Pediatrician",
        "department": 1,
        "phone": "444-555-6666",
        "email": "bob.l@email.com",
    },
]

# (doctor index, service index)
DOCTOR_SERVICES = [
    (0, 0),  # Dr. Johnson: Consultation
    (0, 1),  # Dr. Johnson: ECG Test
    (1, 0),  # Dr. Lee: Consultation
    (1, 2),  # Dr. Lee: Blood Test
]

ROOMS = [
    {"room_number": "Room 101", "department": 0, "capacity": 1},
    {"room_number": "Room 202", "department": 1, "capacity": 2},
]

APPOINTMENTS = [
    {
        "patient": 0,
        "doctor": 0,
        "clinic": 0,
        "room": 0,
        "appointment_date": "2023-10-15",
        "appointment_time": "10:00:00",
        "status": AppointmentStatus.SCHEDULED,
    },
    {
        "patient": 1,
        "doctor": 1,
        "clinic": 1,
        "room": 1,
        "appointment_date": "2023-10-16",
        "appointment_time": "14:30:00",
        "status": AppointmentStatus.COMPLETED,
    },
]

# "appointment" is an index into APPOINTMENTS
PRESCRIPTIONS = [
    {
        "appointment": 0,
        "medication": "Aspirin",
        "dosage": "100mg",
        "frequency": "Daily",
        "instructions": "Take after meals",
    },
    {
        "appointment": 1,
        "medication": "Antibiotic",
        "dosage": "500mg",
        "frequency": "Twice daily",
        "instructions": "Complete full course",
    },
]

MEDICAL_RECORDS = [
    {"patient": 0, "appointment": 0, "diagnosis": "Hypertension", "notes": "Patient reports chest pain"},
    {"patient": 1, "appointment": 1, "diagnosis": "Fever", "notes": "Child has mild symptoms"},
]

PAYMENTS = [
    {
        "appointment": 0,
        "amount": Decimal("50.00"),
        "payment_method": PaymentMethod.CARD,
        "status": PaymentStatus.PAID,
    },
    {
        "appointment": 1,
        "amount": Decimal("75.00"),
        "payment_method": PaymentMethod.CASH,
        "status": PaymentStatus.PAID,
    },
]


def _resolve(row: dict[str, Any], created: dict[str, list[Any]], **references: str) -> dict[str, Any]:
    """
    Replace index keys (e.g. "department") with the created ids
    (e.g. "department_id"). `references` maps index key -> created-list key.
    """
    fields = dict(row)
    for key, created_key in references.items():
        fields[f"{key}_id"] = created[created_key][fields.pop(key)]
    return fields


class SeedStatus(str, PyEnum):
    EMPTY = "empty"
    PARTIAL = "partial"
    COMPLETE = "complete"


def sample_data_status(model: ClinicModel) -> SeedStatus:
    """
    Payments are created last, so departments without payments mean an
    earlier load stopped part way.
    """
    if not model.list(EntityType.DEPARTMENT, limit=1):
        return SeedStatus.EMPTY
    if not model.list(EntityType.PAYMENT, limit=1):
        return SeedStatus.PARTIAL
    return SeedStatus.COMPLETE


def has_sample_data(model: ClinicModel) -> bool:
    return sample_data_status(model) != SeedStatus.EMPTY


def load_sample_data(model: ClinicModel) -> dict[str, list[Any]]:
    """
    Create every sample row in dependency order.
    Returns the created identifiers per entity type.
    """
    created: dict[str, list[Any]] = {}

    created["departments"] = [model.create(EntityType.DEPARTMENT, row) for row in DEPARTMENTS]
    created["clinics"] = [model.create(EntityType.CLINIC, row) for row in CLINICS]
    created["services"] = [model.create(EntityType.SERVICE, row) for row in SERVICES]
    created["patients"] = [model.create(EntityType.PATIENT, row) for row in PATIENTS]
    created["doctors"] = [
        model.create(EntityType.DOCTOR, _resolve(row, created, department="departments")) for row in DOCTORS
    ]
    created["doctor_services"] = [
        model.create(
            EntityType.DOCTOR_SERVICE,
            {
                "doctor_id": created["doctors"][doctor],
                "service_id": created["services"][service],
            },
        )
        for doctor, service in DOCTOR_SERVICES
    ]
    created["rooms"] = [
        model.create(EntityType.ROOM, _resolve(row, created, department="departments")) for row in ROOMS
    ]
    created["appointments"] = [
        model.create(
            EntityType.APPOINTMENT,
            _resolve(row, created, patient="patients", doctor="doctors", clinic="clinics", room="rooms"),
        )
        for row in APPOINTMENTS
    ]
    created["prescriptions"] = [
        model.create(EntityType.PRESCRIPTION, _resolve(row, created, appointment="appointments"))
        for row in PRESCRIPTIONS
    ]
    created["medical_records"] = [
        model.create(
            EntityType.MEDICAL_RECORD,
            _resolve(row, created, patient="patients", appointment="appointments"),
        )
        for row in MEDICAL_RECORDS
    ]
    created["payments"] = [
        model.create(EntityType.PAYMENT, _resolve(row, created, appointment="appointments")) for row in PAYMENTS
    ]

    logger.info(
        "Sample data loaded: %s",
        ", ".join(f"{len(ids)} {name}" for name, ids in created.items()),
    )
    return created
