"""Database package: ORM models, session factories and seeding."""

from .database import (
    write_engine,
    read_engine,
    WriteSessionLocal,
    ReadSessionLocal,
    init_db,
    seed_reference_data,
    get_write_session,
    get_read_session,
)
from . import models

__all__ = [
    "write_engine",
    "read_engine",
    "WriteSessionLocal",
    "ReadSessionLocal",
    "init_db",
    "seed_reference_data",
    "get_write_session",
    "get_read_session",
    "models",
]
