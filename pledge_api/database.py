"""
Database engine and session management.
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import get_settings

settings = get_settings()


def _connect_args(database_url: str, timeout: int) -> dict:
    """Bounded connect, lock and statement timeouts for the configured backend."""
    backend = make_url(database_url).get_backend_name()
    if backend == "sqlite":
        return {"check_same_thread": False, "timeout": timeout}
    if backend == "postgresql":
        return {
            "connect_timeout": timeout,
            "options": f"-c statement_timeout={timeout * 1000}",
        }
    return {}


engine = create_engine(
    settings.database_url,
    connect_args=_connect_args(settings.database_url, settings.database_timeout),
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """FastAPI dependency yielding a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Create tables (in production, use migrations instead)."""
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
