# clinic_domain/core/errors.py
"""
Error taxonomy raised by the clinic domain model.

Every failure reaches the caller synchronously and the surrounding
transaction is rolled back before it does.
"""

from typing import Any


class ClinicDomainError(Exception):
    """
    Base class for all domain errors.

    `entity` and `field` are filled in where the failing record/field is known.
    """

    def __init__(self, message: str, *, entity: str | None = None, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.entity = entity
        self.field = field


class ValidationError(ClinicDomainError):
    """Missing, malformed or unknown field, or a referenced entity that does not exist."""

    def __init__(
        self,
        message: str,
        *,
        entity: str | None = None,
        field: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message, entity=entity, field=field)
        self.errors = errors or []


class ConstraintError(ClinicDomainError):
    """A domain invariant would be broken by the write."""


class DuplicateError(ConstraintError, ValidationError):
    """A uniqueness constraint would be violated."""


class DoubleBookingError(ConstraintError):
    def __init__(self, message: str = "double-booked", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class RestrictedDeleteError(ConstraintError):
    """Deletion blocked while dependent rows still reference the entity."""


class InvalidTransitionError(ConstraintError):
    """Appointment status change not allowed by the status lifecycle."""


class NotFoundError(ClinicDomainError):
    pass


class StorageError(ClinicDomainError):
    """The backing store failed (connection loss, serialization failure, ...)."""
