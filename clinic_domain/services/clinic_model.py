# clinic_domain/services/clinic_model.py
"""
ClinicModel: the storage-independent entry point.

Every call runs in its own transaction. On success it commits; on any
failure it rolls back and raises a ClinicDomainError subclass, so a
rejected write never leaves a partial change behind.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Generator, Mapping, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from clinic_domain.core.database import SessionLocal, session_scope
from clinic_domain.core.errors import ClinicDomainError, StorageError
from clinic_domain.services import entity_service
from clinic_domain.services.entity_registry import EntityType, get_definition

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ClinicModel:
    def __init__(self, session_factory: sessionmaker | None = None) -> None:
        self._session_factory = session_factory or SessionLocal

    @contextmanager
    def _unit_of_work(self, action: str, entity: Any = None) -> Generator[Session, None, None]:
        try:
            with session_scope(self._session_factory) as db:
                yield db
        except ClinicDomainError as exc:
            logger.warning("%s %s rejected: %s", action, entity or "", exc)
            raise
        except IntegrityError as exc:
            # Raised at commit time, after the in-transaction checks passed
            domain_error = entity_service.translate_integrity_error(exc, deleting=action == "delete")
            logger.warning("%s %s rejected by the store: %s", action, entity or "", domain_error)
            raise domain_error from exc
        except SQLAlchemyError as exc:
            logger.error("%s %s failed: %s", action, entity or "", exc, exc_info=True)
            raise StorageError(f"Storage failure during {action}: {exc}") from exc

    def create(self, entity: EntityType | str, fields: Mapping[str, Any]) -> Any:
        """
        Create a record and return its identifier
        (an int, or a (doctor_id, service_id) tuple for doctor services).
        """
        with self._unit_of_work("create", entity) as db:
            record = entity_service.create_entity(db, entity, fields)
            return entity_service.identity_of(record)

    def update(self, entity: EntityType | str, identity: Any, fields: Mapping[str, Any]) -> Any:
        with self._unit_of_work("update", entity) as db:
            record = entity_service.update_entity(db, entity, identity, fields)
            return get_definition(entity).response_schema.model_validate(record)

    def delete(self, entity: EntityType | str, identity: Any) -> None:
        with self._unit_of_work("delete", entity) as db:
            entity_service.delete_entity(db, entity, identity)

    def get(self, entity: EntityType | str, identity: Any) -> Any:
        with self._unit_of_work("get", entity) as db:
            record = entity_service.get_entity(db, entity, identity)
            return get_definition(entity).response_schema.model_validate(record)

    def list(
        self,
        entity: EntityType | str,
        filters: Mapping[str, Any] | None = None,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Any]:
        with self._unit_of_work("list", entity) as db:
            records = entity_service.list_entities(db, entity, filters, limit=limit, offset=offset)
            response_schema = get_definition(entity).response_schema
            return [response_schema.model_validate(r) for r in records]

    def report(self, query: Callable[..., T], **params: Any) -> T:
        """
        Run a read-only projection from report_service, e.g.
        `model.report(payments_per_doctor, status=PaymentStatus.PAID)`.
        """
        with self._unit_of_work("report", getattr(query, "__name__", query)) as db:
            return query(db, **params)
