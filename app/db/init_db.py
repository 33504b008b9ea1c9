"""
Schema bootstrap for the hris tables
"""
from sqlalchemy import text
from sqlalchemy.engine import Engine

from atams.db import Base
from atams.logging import get_logger

# Register every model on Base.metadata
import app.models  # noqa: F401

logger = get_logger(__name__)


def create_tables(engine: Engine) -> None:
    """Create the hris schema (PostgreSQL only) and all tables if missing"""
    if engine.dialect.name != "sqlite":
        with engine.begin() as conn:
            conn.execute(text("CREATE SCHEMA IF NOT EXISTS hris"))
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ensured", extra={"extra_data": {"dialect": engine.dialect.name}})


def drop_tables(engine: Engine) -> None:
    Base.metadata.drop_all(bind=engine)
