"""Database session management with connection pooling"""

import logging
from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from credit_sentinel.config import settings
from credit_sentinel.infrastructure.database.models import Base
from credit_sentinel.infrastructure.database.seed import seed_portfolio

logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> Engine:
    """Create an engine; pooled for server databases, thread-shareable for SQLite"""
    if database_url.startswith("sqlite"):
        return create_engine(database_url, connect_args={"check_same_thread": False})

    # Recycle connections after an hour to avoid stale ones
    return create_engine(
        database_url,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_recycle=settings.db_pool_recycle_seconds,
    )


engine = build_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency injection for database sessions"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(seed: bool = False) -> None:
    """Create tables and, on an empty store, load the demo portfolio"""
    Base.metadata.create_all(bind=engine)
    if not seed:
        return

    db = SessionLocal()
    try:
        created = seed_portfolio(db)
        db.commit()
        if created:
            logger.info("Seeded demo portfolio", extra={"loan_count": created})
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
