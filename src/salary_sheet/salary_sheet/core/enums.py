from __future__ import annotations

from enum import Enum


class Resolution(str, Enum):
    """How a "latest before" lookup found its entry."""

    STRICTLY_BEFORE = "STRICTLY_BEFORE"
    FALLBACK_LATEST = "FALLBACK_LATEST"


class PrefillSource(str, Enum):
    """Where the values of a prefilled form came from."""

    EXACT = "EXACT"
    CARRY_FORWARD = "CARRY_FORWARD"
    BASELINE = "BASELINE"
    EMPTY = "EMPTY"


class StorageBackend(str, Enum):
    SQL = "sql"
    MEMORY = "memory"
