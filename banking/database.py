"""
Database connection and session management.
Uses SQLAlchemy for ORM and connection pooling.
"""

from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from banking.core.config import settings
from banking.core.exceptions import ConstraintViolationError, PersistenceError
from banking.core.logger import get_logger

logger = get_logger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless this is set per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, echo: bool = False, **kwargs):
    """
    Create an engine for the given URL.

    SQLite connections may be shared across threads by the API server and
    get foreign key enforcement switched on.
    """
    is_sqlite = url.startswith("sqlite")
    if is_sqlite:
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        kwargs.setdefault("pool_pre_ping", True)  # Verify connections before using

    new_engine = create_engine(url, echo=echo, **kwargs)

    if is_sqlite:
        event.listen(new_engine, "connect", _enable_sqlite_foreign_keys)

    return new_engine


# Create database engine
engine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

# Create session factory
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# Base class for models
Base = declarative_base()


@contextmanager
def session_scope(session_factory):
    """
    One unit of work: a fresh session that is committed on success,
    rolled back on any failure and always closed.

    SQLAlchemy errors leave as PersistenceError so callers never need to
    know which store is underneath.
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except IntegrityError as e:
        session.rollback()
        logger.error(f"Constraint violation: {e.orig}")
        raise ConstraintViolationError(str(e.orig)) from e
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Database operation failed: {e}")
        raise PersistenceError(str(e)) from e
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(bind=None):
    """
    Create all tables that do not exist yet.
    """
    # Register the models on Base.metadata before creating tables
    import banking.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def get_session_factory():
    """
    Dependency returning the session factory used by repositories.

    Usage:
        @router.get("/example")
        def example(session_factory=Depends(get_session_factory)):
            ...
    """
    return SessionLocal
