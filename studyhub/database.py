"""Database configuration and session management."""

import logging
from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from studyhub.config import Settings, get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


def build_connect_args(settings: Settings) -> dict[str, Any]:
    """Driver connect arguments for the configured database URL."""
    if settings.database_url.startswith("sqlite"):
        return {"check_same_thread": False}
    if settings.database_url.startswith("postgresql") and settings.database_sslmode:
        return {"sslmode": settings.database_sslmode}
    return {}


def _engine_options(settings: Settings) -> dict[str, Any]:
    if settings.database_url.startswith("sqlite"):
        return {}
    return {"pool_size": settings.db_pool_size, "max_overflow": settings.db_max_overflow}


engine = create_engine(
    settings.database_url,
    pool_pre_ping=True,
    connect_args=build_connect_args(settings),
    **_engine_options(settings),
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base: Any = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_connection() -> bool:
    """Return True if the database answers a trivial query."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Database connection failed: {e}")
        return False
    logger.info("Database connected")
    return True
