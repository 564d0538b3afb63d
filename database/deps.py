"""FastAPI dependencies yielding request-scoped DB sessions.

Routers depend on `get_db_write` for mutating endpoints and `get_db_read`
for pure reads, so reads can be pointed at a replica via READ_DATABASE_URL.
"""

from .database import get_read_session, get_write_session


def get_db_write():
    """Yield a write-capable DB session for FastAPI dependency injection."""
    yield from get_write_session()


def get_db_read():
    """Yield a read-only DB session for FastAPI dependency injection."""
    yield from get_read_session()
