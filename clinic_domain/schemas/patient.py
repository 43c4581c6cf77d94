# clinic_domain/schemas/patient.py
from datetime import date

from pydantic import EmailStr, Field, field_validator

from clinic_domain.models.patient import Gender
from clinic_domain.schemas.common import CreateSchema, RecordSchema, validate_phone


class PatientCreate(CreateSchema):
    first_name: str = Field(min_length=1, max_length=50)
    last_name: str = Field(min_length=1, max_length=50)
    date_of_birth: date | None = None
    gender: Gender | None = None
    phone: str | None = None
    # EmailStr lowercases the domain part, so "A@Email.COM" is stored as "A@email.com"
    email: EmailStr | None = None
    address: str | None = None
    registration_date: date = Field(default_factory=date.today)

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

    @field_validator("date_of_birth")
    @classmethod
    def check_date_of_birth(cls, v: date | None) -> date | None:
        if v is not None and v > date.today():
            raise ValueError("Date of birth cannot be in the future")
        return v


class PatientResponse(RecordSchema):
    id: int
    first_name: str
    last_name: str
    date_of_birth: date | None = None
    gender: Gender | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    registration_date: date
