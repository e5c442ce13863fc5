from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import STORAGE_VERSION
from .core.enums import StorageBackend
from .database.connection import DatabaseConnection
from .entries.service import SalarySheetService
from .entries.store import SalaryEntryStore
from .storage.memory_storage import InMemoryKeyValueStorage
from .storage.repository import KeyValueStorage
from .storage.sql_storage import SQLKeyValueStorage


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    storage: KeyValueStorage
    entry_store: SalaryEntryStore

    salary_sheet_service: SalarySheetService


def build_container(
    *,
    db_config: Optional[dict] = None,
    backend: str = StorageBackend.SQL.value,
    storage_key: str = STORAGE_VERSION,
) -> Container:
    backend = StorageBackend(str(backend).lower())

    conn: Optional[DatabaseConnection] = None
    storage: KeyValueStorage
    if backend == StorageBackend.MEMORY:
        storage = InMemoryKeyValueStorage()
    else:
        conn = DatabaseConnection.from_dict(db_config or {})
        storage = SQLKeyValueStorage(conn)

    entry_store = SalaryEntryStore(storage, storage_key=storage_key)
    salary_sheet_service = SalarySheetService(entry_store)

    return Container(
        conn=conn,
        storage=storage,
        entry_store=entry_store,
        salary_sheet_service=salary_sheet_service,
    )
