# clinic_domain/schemas/doctor.py
from datetime import date

from pydantic import EmailStr, Field, field_validator

from clinic_domain.schemas.common import CreateSchema, RecordSchema, validate_phone


class DoctorCreate(CreateSchema):
    first_name: str = Field(min_length=1, max_length=50)
    last_name: str = Field(min_length=1, max_length=50)
    specialization: str | None = Field(default=None, max_length=100)
    department_id: int
    phone: str | None = None
    # EmailStr lowercases the domain part, so "A@Email.COM" is stored as "A@email.com"
    email: EmailStr | None = None
    hire_date: date = Field(default_factory=date.today)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: str | None) -> str | None:
        return validate_phone(v)

    @field_validator("email")
    @classmethod
    def check_email_length(cls, v: str | None) -> str | None:
        if v is not None and len(v) > 100:
            raise ValueError("Email must be at most 100 characters long")
        return v


class DoctorResponse(RecordSchema):
    id: int
    first_name: str
    last_name: str
    specialization: str | None = None
    department_id: int
    phone: str | None = None
    email: str | None = None
    hire_date: date
