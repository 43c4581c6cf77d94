# clinic_domain/schemas/common.py
import re

from pydantic import BaseModel, ConfigDict

PHONE_PATTERN = re.compile(r"^\+?[0-9()\-\s.]{3,15}$")


class CreateSchema(BaseModel):
    """
    Input model for create/update. Unknown fields are rejected.
    """

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class RecordSchema(BaseModel):
    """
    Output model built from an ORM row.
    """

    model_config = ConfigDict(from_attributes=True)


def validate_phone(v: str | None) -> str | None:
    if v is None:
        return None
    if len(v) > 15:
        raise ValueError("Phone number must be at most 15 characters long")
    if not PHONE_PATTERN.match(v):
        raise ValueError("Phone number can only contain digits, spaces, dash (-), dot, parentheses and a leading +")
    return v
