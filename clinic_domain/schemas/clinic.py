# clinic_domain/schemas/clinic.py
from pydantic import Field

from clinic_domain.schemas.common import CreateSchema, RecordSchema


class ClinicCreate(CreateSchema):
    name: str = Field(min_length=1, max_length=100)
    location: str = Field(min_length=1, max_length=200)


class ClinicResponse(RecordSchema):
    id: int
    name: str
    location: str
