"""Entry store: per-employee salary history kept under one storage key.

Every public operation is self-contained: load the full mapping, query or
mutate it, and write it back if it changed. There is no lock between the load
and the write, so two writers race with last-write-wins on the whole mapping.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from ..common.month_key import month_sort_key
from ..common.validators import require_non_empty
from ..core.constants import STORAGE_VERSION
from ..core.exceptions import InvalidArgumentError, StorageCorruptError, StorageError
from ..storage.repository import KeyValueStorage
from .model import SalaryEntry
from .resolution import LatestBeforeResult, resolve_latest_before

logger = logging.getLogger(__name__)


def _raw_month_key(item: Any) -> tuple[int, ...]:
    return month_sort_key(item.get("month") if isinstance(item, dict) else None)


class SalaryEntryStore:
    def __init__(self, storage: KeyValueStorage, *, storage_key: str = STORAGE_VERSION):
        self._storage = storage
        self._storage_key = storage_key or STORAGE_VERSION

    @property
    def storage_key(self) -> str:
        return self._storage_key

    def _decode(self, raw: str) -> dict[str, Any]:
        try:
            parsed = json.loads(raw)
        except (ValueError, RecursionError) as e:
            raise StorageCorruptError(f"Invalid JSON under {self._storage_key!r}") from e
        if not isinstance(parsed, dict):
            raise StorageCorruptError(
                f"Expected an object under {self._storage_key!r}, got {type(parsed).__name__}"
            )
        return parsed

    def _load(self) -> dict[str, Any]:
        try:
            raw = self._storage.read(self._storage_key)
            if not raw:
                return {}
            return self._decode(raw)
        except StorageError as e:
            logger.warning("Failed to load saved data, treating as empty: %s", e)
            return {}

    def _save(self, payload: dict[str, Any]) -> None:
        self._storage.write(self._storage_key, json.dumps(payload, ensure_ascii=False))

    def get_all(self) -> dict[str, Any]:
        """Raw, unsorted snapshot of durable state."""
        return self._load()

    def get_entries(self, employee_id: str) -> list[SalaryEntry]:
        if not employee_id:
            return []
        history = self._load().get(employee_id)
        if not isinstance(history, list):
            return []

        entries: list[SalaryEntry] = []
        for item in history:
            if not isinstance(item, dict):
                logger.warning("Skipping malformed entry for %s: %r", employee_id, item)
                continue
            entries.append(SalaryEntry.from_dict(item))
        # sorted() is stable: equal or invalid months keep their stored order.
        return sorted(entries, key=lambda e: month_sort_key(e.month))

    def get_entry(self, employee_id: str, month: str) -> Optional[SalaryEntry]:
        if not employee_id or not month:
            return None
        for entry in self.get_entries(employee_id):
            if entry.month == month:
                return entry
        return None

    def get_latest(self, employee_id: str) -> Optional[SalaryEntry]:
        entries = self.get_entries(employee_id)
        return entries[-1] if entries else None

    def get_latest_before(self, employee_id: str, month: Optional[str]) -> Optional[SalaryEntry]:
        result: Optional[LatestBeforeResult] = resolve_latest_before(self.get_entries(employee_id), month)
        return result.entry if result else None

    def save_entry(self, employee_id: str, entry: SalaryEntry) -> SalaryEntry:
        """Insert or merge `entry` by month, then persist the whole mapping.

        Fields given on `entry` overwrite stored ones; fields left as None keep
        their stored value. Returns `entry` unchanged.
        """
        if entry is None:
            raise InvalidArgumentError("entry is required")
        require_non_empty(employee_id, "employee_id")
        require_non_empty(entry.month, "month")

        data = self._load()
        history = data.get(employee_id)
        if not isinstance(history, list):
            history = []
            data[employee_id] = history

        payload = entry.to_dict()
        for index, item in enumerate(history):
            if isinstance(item, dict) and item.get("month") == entry.month:
                history[index] = {**item, **payload}
                break
        else:
            history.append(payload)

        history.sort(key=_raw_month_key)
        self._save(data)
        return entry
