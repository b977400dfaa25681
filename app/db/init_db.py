"""
Database initialization.

Creates all tables (development and first start; production uses Alembic).
"""

import logging
from pathlib import Path

from sqlalchemy.engine import make_url
from sqlmodel import SQLModel

from app.db.session import engine

logger = logging.getLogger(__name__)


def _ensure_sqlite_directory() -> None:
    url = make_url(str(engine.url))
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def init_db() -> None:
    """
    Initialize database schema.

    - Creates the SQLite data directory if needed
    - Creates all SQLModel tables (idempotent)
    """

    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    _ensure_sqlite_directory()
    SQLModel.metadata.create_all(engine)
    logger.info("Database tables ready")


if __name__ == "__main__":
    init_db()
