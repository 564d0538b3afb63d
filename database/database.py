"""Database helpers: engines, session factories and DB initialization.

Provides read/write session factories and an `init_db` helper that creates
tables and seeds the reference tables (meal types, foods, activity types)
when they are empty.
"""

import os
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from .models import ActivityType, Base, Food, MealType
from core.logger import get_logger
from data.reference_data import ACTIVITY_TYPES, FOODS, MEAL_TYPES

logger = get_logger("database")

# Read/Write partitioning pattern
# In production, set WRITE_DATABASE_URL and READ_DATABASE_URL to different DB instances.
# For SQLite this defaults to the same file but the interfaces are separated.
WRITE_DATABASE_URL = os.getenv("WRITE_DATABASE_URL", "sqlite:///fittrack.db")
READ_DATABASE_URL = os.getenv("READ_DATABASE_URL", WRITE_DATABASE_URL)


def _connect_args(url: str) -> dict:
    return {"check_same_thread": False} if url.startswith("sqlite") else {}


# Engines
write_engine = create_engine(WRITE_DATABASE_URL, connect_args=_connect_args(WRITE_DATABASE_URL))
read_engine = create_engine(READ_DATABASE_URL, connect_args=_connect_args(READ_DATABASE_URL))

# Session factories
WriteSessionLocal = sessionmaker(bind=write_engine)
ReadSessionLocal = sessionmaker(bind=read_engine)


def seed_reference_data(session: Session) -> None:
    """Insert meal types, foods and activity types into empty tables."""
    seeds = (
        (MealType, MEAL_TYPES),
        (Food, FOODS),
        (ActivityType, ACTIVITY_TYPES),
    )
    for model, rows in seeds:
        if session.query(model).count() == 0:
            session.add_all(model(**row) for row in rows)
            logger.info("Seeded %s %s rows", len(rows), model.__tablename__)
    session.commit()


def init_db(engine=None):
    """Create all tables and seed reference data.

    Args:
        engine: Engine to initialize; defaults to the write engine.
    """
    engine = engine or write_engine
    Base.metadata.create_all(bind=engine)
    session = Session(bind=engine)
    try:
        seed_reference_data(session)
    finally:
        session.close()


# Convenience generators for dependency injection
def get_write_session():
    """Yield a write-enabled SQLAlchemy session for the request scope."""
    db = WriteSessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_read_session():
    """Yield a read-only SQLAlchemy session for the request scope.

    Used for read endpoints where routing reads to a replica may be desired.
    """
    db = ReadSessionLocal()
    try:
        yield db
    finally:
        db.close()
