# clinic_domain/schemas/department.py
from pydantic import field_validator

from clinic_domain.schemas.common import CreateSchema, RecordSchema


class DepartmentCreate(CreateSchema):
    name: str
    description: str | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v:
            raise ValueError("Department name is required")
        if len(v) > 100:
            raise ValueError("Department name must be at most 100 characters long")
        return v


class DepartmentResponse(RecordSchema):
    id: int
    name: str
    description: str | None = None
