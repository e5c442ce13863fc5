from __future__ import annotations

from typing import Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from ..core.constants import KV_TABLE
from ..core.exceptions import StorageError
from ..database.connection import DatabaseConnection
from ..database.sql_base import db_transaction, fetchone
from .repository import KeyValueStorage


class SQLKeyValueStorage(KeyValueStorage):
    """Key-value medium stored as rows of the kv_store table."""

    def __init__(self, conn_factory: DatabaseConnection, *, table: str = KV_TABLE):
        self._conn_factory = conn_factory
        self._table = table

    def read(self, key: str) -> Optional[str]:
        try:
            with db_transaction(self._conn_factory) as conn:
                result = conn.execute(
                    text(f"SELECT value FROM {self._table} WHERE storage_key = :key"),
                    {"key": key},
                )
                row = fetchone(result)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to read {key!r} from {self._table}") from e
        return row["value"] if row else None

    def write(self, key: str, value: str) -> None:
        try:
            with db_transaction(self._conn_factory) as conn:
                conn.execute(
                    text(
                        f"""
                        INSERT INTO {self._table} (storage_key, value)
                        VALUES (:key, :value)
                        ON CONFLICT (storage_key) DO UPDATE SET value = excluded.value
                        """
                    ),
                    {"key": key, "value": value},
                )
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to write {key!r} to {self._table}") from e
