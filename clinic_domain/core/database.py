from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from clinic_domain.core.config import get_settings


def build_engine(
    database_url: str,
    *,
    echo: bool = False,
    isolation_level: str | None = None,
) -> Engine:
    """
    Create an engine for `database_url`.

    SQLite gets foreign-key enforcement switched on for every connection,
    and in-memory SQLite shares one connection so all sessions see the same data.
    """
    kwargs: dict = {"future": True, "echo": echo}
    if isolation_level:
        kwargs["isolation_level"] = isolation_level

    is_sqlite = database_url.startswith("sqlite")
    if is_sqlite:
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    engine = create_engine(database_url, **kwargs)

    if is_sqlite:

        @event.listens_for(engine, "connect")
        def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        future=True,
    )


settings = get_settings()

# Main SQLAlchemy engine, built from DATABASE_URL
engine = build_engine(
    settings.database_url,
    echo=settings.database_echo,
    isolation_level=settings.database_isolation_level,
)

# Session factory
SessionLocal = build_session_factory(engine)


@contextmanager
def session_scope(session_factory: sessionmaker | None = None) -> Generator[Session, None, None]:
    """
    One unit of work: commit on success, roll back on any error.

    Usage:
        with session_scope() as db:
            db.query(...)
    """
    db = (session_factory or SessionLocal)()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    """
    Create all tables on `bind` (defaults to the configured engine).
    """
    from clinic_domain.models import all_models  # noqa: F401  (registers every model)
    from clinic_domain.models.base import Base

    Base.metadata.create_all(bind=bind or engine)


def drop_db(bind: Engine | None = None) -> None:
    from clinic_domain.models import all_models  # noqa: F401
    from clinic_domain.models.base import Base

    Base.metadata.drop_all(bind=bind or engine)
