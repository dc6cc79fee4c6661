"""
Database initialization.

Creates every adaptive-coach table that does not exist yet.  Production
databases should go through Alembic; this is meant for local sqlite files
and test databases.
"""

import logging

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from app.db.session import engine as default_engine

logger = logging.getLogger(__name__)


def init_db(engine: Engine | None = None) -> list[str]:
    """
    Create all SQLModel tables on ``engine`` (the application engine by
    default) and return the table names that are registered.
    """
    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    engine = engine or default_engine
    tables = sorted(SQLModel.metadata.tables)

    logger.info("Creating %d tables on %s", len(tables), engine.url.render_as_string(hide_password=True))
    SQLModel.metadata.create_all(engine)
    logger.info("Tables ready: %s", ", ".join(tables))
    return tables


if __name__ == "__main__":
    from app.core.logging import configure_logging

    configure_logging()
    init_db()
