# clinic_domain/services/entity_service.py
"""
Generic create / update / delete / get / list for every clinic entity.

Functions take an open Session and leave commit/rollback to the caller
(see `session_scope`). Checks and the write share that transaction; the
store's own constraints catch anything that slips in between.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import Enum as SAEnum
from sqlalchemy import and_, inspect, not_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from clinic_domain.core.errors import (
    ClinicDomainError,
    ConstraintError,
    DoubleBookingError,
    DuplicateError,
    NotFoundError,
    RestrictedDeleteError,
    ValidationError,
)
from clinic_domain.models.appointment import DOUBLE_BOOKING_CONSTRAINT
from clinic_domain.services.cascade_service import apply_delete_rule
from clinic_domain.services.entity_registry import EntityDefinition, EntityType, get_definition

logger = logging.getLogger(__name__)

# SQLite reports the columns rather than the constraint name
_SQLITE_DOUBLE_BOOKING = "appointments.doctor_id, appointments.appointment_date, appointments.appointment_time"


def identity_of(record: Any) -> Any:
    """
    Primary key of `record`: an int, or a tuple for composite keys.
    """
    identity = inspect(record).identity
    if identity is None:
        return None
    return identity[0] if len(identity) == 1 else identity


def translate_integrity_error(
    exc: IntegrityError,
    entity: str | None = None,
    *,
    deleting: bool = False,
) -> ClinicDomainError:
    """
    Map a store-level constraint failure onto the domain taxonomy.

    A foreign-key failure means a dependent row appeared while deleting,
    or a referenced row vanished while writing.
    """
    message = str(exc.orig) if exc.orig is not None else str(exc)
    lowered = message.lower()

    if DOUBLE_BOOKING_CONSTRAINT in message or _SQLITE_DOUBLE_BOOKING in message:
        return DoubleBookingError(entity="Appointment")
    if "unique" in lowered or "duplicate" in lowered:
        return DuplicateError(f"Uniqueness constraint violated: {message}", entity=entity)
    if "foreign key" in lowered:
        if deleting:
            return RestrictedDeleteError(f"Rows still reference this {entity or 'record'}: {message}", entity=entity)
        return ValidationError(f"Referenced record does not exist: {message}", entity=entity)
    return ConstraintError(f"Constraint violated: {message}", entity=entity)


def _format_pydantic_errors(exc: PydanticValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error["loc"]) or "record"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def _validate(definition: EntityDefinition, values: Any) -> dict[str, Any]:
    try:
        payload = definition.create_schema.model_validate(values)
    except PydanticValidationError as exc:
        errors = exc.errors(include_url=False)
        first_loc = errors[0]["loc"] if errors else ()
        raise ValidationError(
            f"Invalid {definition.label}: {_format_pydantic_errors(exc)}",
            entity=definition.label,
            field=str(first_loc[0]) if first_loc else None,
            errors=errors,
        ) from exc
    return payload.model_dump()


def _check_references(db: Session, definition: EntityDefinition, values: Mapping[str, Any]) -> None:
    for field_name, target in definition.references.items():
        value = values.get(field_name)
        if value is None:
            continue
        target_definition = get_definition(target)
        if db.get(target_definition.model, value) is None:
            raise ValidationError(
                f"{target_definition.label} {value} does not exist",
                entity=definition.label,
                field=field_name,
            )


def _exclude_record(definition: EntityDefinition, record: Any):
    primary_key = inspect(definition.model).primary_key
    return not_(and_(*[column == getattr(record, column.key) for column in primary_key]))


def _check_unique(
    db: Session,
    definition: EntityDefinition,
    values: Mapping[str, Any],
    current: Any | None = None,
) -> None:
    model = definition.model
    for columns in definition.unique_together:
        # NULLs never collide
        if any(values.get(c) is None for c in columns):
            continue
        query = db.query(model).filter(*[getattr(model, c) == values[c] for c in columns])
        if current is not None:
            query = query.filter(_exclude_record(definition, current))
        if query.first() is not None:
            described = ", ".join(f"{c}={values[c]!r}" for c in columns)
            raise DuplicateError(
                f"{definition.label} with {described} already exists.",
                entity=definition.label,
                field=columns[0],
            )


def _flush(db: Session, definition: EntityDefinition) -> None:
    try:
        db.flush()
    except IntegrityError as exc:
        raise translate_integrity_error(exc, definition.label) from exc


def create_entity(db: Session, entity: EntityType | str, fields: Mapping[str, Any]) -> Any:
    """
    Validate `fields` and insert a new row. Returns the ORM instance.
    """
    definition = get_definition(entity)
    values = _validate(definition, fields)

    _check_references(db, definition, values)
    _check_unique(db, definition, values)
    if definition.before_write is not None:
        definition.before_write(db, None, values)

    record = definition.model(**values)
    db.add(record)
    _flush(db, definition)
    db.refresh(record)

    logger.info("Created %s %s", definition.label, identity_of(record))
    return record


def get_entity(db: Session, entity: EntityType | str, identity: Any) -> Any:
    definition = get_definition(entity)
    if isinstance(identity, list):
        identity = tuple(identity)

    key_size = len(inspect(definition.model).primary_key)
    given_size = len(identity) if isinstance(identity, tuple) else 1
    if identity is None or given_size != key_size:
        raise ValidationError(
            f"{definition.label} identifier must have {key_size} value(s), got {identity!r}",
            entity=definition.label,
            field="id",
        )

    record = db.get(definition.model, identity)
    if record is None:
        raise NotFoundError(f"{definition.label} {identity} not found", entity=definition.label)
    return record


def update_entity(db: Session, entity: EntityType | str, identity: Any, fields: Mapping[str, Any]) -> Any:
    """
    Apply `fields` to an existing row.

    The merged record (current values overlaid with `fields`) goes through
    the same validation as a create.
    """
    definition = get_definition(entity)
    if not definition.updatable:
        raise ValidationError(
            f"{definition.label} rows cannot be updated. Delete and re-create them instead.",
            entity=definition.label,
        )
    if not isinstance(fields, Mapping):
        raise ValidationError(f"Update fields for {definition.label} must be a mapping", entity=definition.label)

    record = get_entity(db, definition.entity, identity)

    current_values = {name: getattr(record, name) for name in definition.create_schema.model_fields}
    values = _validate(definition, {**current_values, **fields})
    changed = {name: values[name] for name in fields}

    _check_references(db, definition, changed)
    _check_unique(db, definition, values, current=record)
    if definition.before_write is not None:
        definition.before_write(db, record, values)

    for name, value in changed.items():
        setattr(record, name, value)
    _flush(db, definition)
    db.refresh(record)

    logger.info("Updated %s %s (%s)", definition.label, identity_of(record), ", ".join(sorted(changed)))
    return record


def delete_entity(db: Session, entity: EntityType | str, identity: Any) -> None:
    """
    Delete a row, applying the cascade / restrict / set-null rule of its type.
    """
    definition = get_definition(entity)
    record = get_entity(db, definition.entity, identity)
    identity = identity_of(record)

    try:
        apply_delete_rule(db, definition.entity, record)
    except IntegrityError as exc:
        raise translate_integrity_error(exc, definition.label, deleting=True) from exc

    logger.info("Deleted %s %s", definition.label, identity)


def _coerce_filter_value(definition: EntityDefinition, column: Any, value: Any) -> Any:
    enum_class = getattr(column.type, "enum_class", None)
    if value is None or not isinstance(column.type, SAEnum) or enum_class is None:
        return value
    try:
        return enum_class(value)
    except ValueError:
        raise ValidationError(
            f"Invalid value {value!r} for {definition.label}.{column.key}",
            entity=definition.label,
            field=column.key,
        ) from None


def list_entities(
    db: Session,
    entity: EntityType | str,
    filters: Mapping[str, Any] | None = None,
    *,
    limit: int | None = None,
    offset: int | None = None,
) -> list[Any]:
    """
    Rows matching equality `filters` (column name -> value; None matches NULL),
    ordered by primary key.
    """
    definition = get_definition(entity)
    model = definition.model
    columns = model.__table__.columns

    query = db.query(model)
    for key, value in (filters or {}).items():
        column = columns.get(key)
        if column is None:
            raise ValidationError(
                f"Unknown filter field '{key}' for {definition.label}",
                entity=definition.label,
                field=key,
            )
        query = query.filter(getattr(model, key) == _coerce_filter_value(definition, column, value))

    if limit is not None and limit < 0:
        raise ValidationError("limit must be non-negative", entity=definition.label, field="limit")
    if offset is not None and offset < 0:
        raise ValidationError("offset must be non-negative", entity=definition.label, field="offset")

    query = query.order_by(*inspect(model).primary_key)
    if offset:
        query = query.offset(offset)
    if limit is not None:
        query = query.limit(limit)
    return query.all()
