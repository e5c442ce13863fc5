from __future__ import annotations

from typing import Optional

from .repository import KeyValueStorage


class InMemoryKeyValueStorage(KeyValueStorage):
    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._values: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def write(self, key: str, value: str) -> None:
        self._values[key] = value
