"""Database connection and initialization."""

import logging

from sqlalchemy import event
from sqlalchemy.exc import IntegrityError
from sqlmodel import SQLModel, Session, create_engine

from snackboard.config import settings
from snackboard.errors import FieldValidationError

# Import all models so SQLModel registers them
import snackboard.models  # noqa: F401

logger = logging.getLogger(__name__)

engine = create_engine(
    f"sqlite:///{settings.database_path}",
    echo=settings.debug,
    connect_args={"check_same_thread": False},
)


@event.listens_for(engine, "connect")
def _set_sqlite_pragmas(dbapi_connection, connection_record) -> None:
    # foreign_keys is per-connection in SQLite, so it must be set on every new one
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.execute("PRAGMA synchronous=NORMAL")
    cursor.close()


def init_db() -> None:
    """Create all tables and enable WAL mode."""
    SQLModel.metadata.create_all(engine)

    # Enable WAL mode for better concurrent read performance
    with engine.connect() as conn:
        conn.exec_driver_sql("PRAGMA journal_mode=WAL")
        conn.commit()


def get_session():
    """FastAPI dependency: yields a database session."""
    with Session(engine) as session:
        yield session


def commit_or_raise(session: Session, field: str = "name") -> None:
    """Commit, reporting a constraint violation as a validation error on `field`."""
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        logger.warning("Constraint violation: %s", e.orig)
        raise FieldValidationError("Conflicts with existing data", field=field)
