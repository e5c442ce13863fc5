from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from sqlalchemy.engine import Connection, CursorResult

from .connection import DatabaseConnection


@contextmanager
def db_transaction(conn_factory: DatabaseConnection) -> Iterator[Connection]:
    """Yield a connection inside a transaction: commit on success, rollback on error."""
    conn = conn_factory.connect()
    try:
        with conn.begin():
            yield conn
    finally:
        conn.close()


def fetchone(result: CursorResult) -> Optional[Dict[str, Any]]:
    row = result.mappings().first()
    return dict(row) if row else None
