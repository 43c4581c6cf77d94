# clinic_domain/schemas/room.py
from pydantic import Field

from clinic_domain.schemas.common import CreateSchema, RecordSchema


class RoomCreate(CreateSchema):
    room_number: str = Field(min_length=1, max_length=20)
    department_id: int | None = None
    capacity: int = Field(default=1, ge=1)
    availability: bool = True


class RoomResponse(RecordSchema):
    id: int
    room_number: str
    department_id: int | None = None
    capacity: int
    availability: bool
