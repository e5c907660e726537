"""
Database initialization.

Creates all tables without going through Alembic (local development).
"""

import logging

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

logger = logging.getLogger(__name__)


def init_db(engine: Engine | None = None) -> None:
    """Create every table registered on SQLModel.metadata."""
    import bloghub.db.base  # noqa: F401

    if engine is None:
        from bloghub.db.session import engine

    logger.info("Creating database tables on %s", engine.url.render_as_string(hide_password=True))
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialization complete")
