import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from app.core.config import settings

logger = logging.getLogger(__name__)

# One bounded pool per process. Connections are only opened on first checkout,
# so importing this module never touches the database.
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,  # Verify connections before using them
    pool_size=settings.DB_POOL_SIZE,
    max_overflow=settings.DB_MAX_OVERFLOW,
    pool_timeout=settings.DB_POOL_TIMEOUT,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def run_query(db: Session, sql: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    """
    Execute raw SQL and return the rows as dictionaries.

    Statements that return no rows yield an empty list.
    """
    result = db.execute(text(sql), params or {})
    if not result.returns_rows:
        return []
    return [dict(row) for row in result.mappings()]


def init_db():
    """
    Initialize database.

    Alembic owns the schema ("alembic upgrade head"). Models are imported here
    so they register on Base; DB_AUTO_CREATE=true creates missing tables
    directly, which is handy for throwaway environments.
    """
    from app import models  # noqa: F401
    if settings.DB_AUTO_CREATE:
        logger.info("DB_AUTO_CREATE is set, creating missing tables")
        Base.metadata.create_all(bind=engine)


def close_db():
    """Release every pooled connection. Called once on shutdown."""
    engine.dispose()
