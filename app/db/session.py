"""
Database Session Management

PostgreSQL goes through the atams connection pool. A sqlite URL selects the
in-memory store instead: one shared connection with the hris schema attached,
so the same models and repositories run unchanged.
"""
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from atams.db import init_database
from atams.db import session as atams_session
from app.core.config import settings


def is_sqlite_url(url: str) -> bool:
    return url.startswith("sqlite")


def _create_memory_engine(url: str) -> Engine:
    memory_engine = create_engine(
        url,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=settings.DEBUG,
    )

    @event.listens_for(memory_engine, "connect")
    def _attach_schema(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("ATTACH DATABASE ':memory:' AS hris")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return memory_engine


def _create_pooled_engine() -> Engine:
    init_database(
        settings.DATABASE_URL,
        settings.DEBUG,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_recycle=settings.DB_POOL_RECYCLE,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_pre_ping=settings.DB_POOL_PRE_PING
    )
    return atams_session.engine


if is_sqlite_url(settings.DATABASE_URL):
    engine = _create_memory_engine(settings.DATABASE_URL)
else:
    engine = _create_pooled_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency

    Usage:
        @router.get("/")
        async def endpoint(db: Session = Depends(get_db)):
            # Use db here
            pass
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
