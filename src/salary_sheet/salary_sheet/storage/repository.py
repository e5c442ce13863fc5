from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStorage(Protocol):
    """Flat string-keyed text store backing the entry store.

    Note: the entry store depends on this interface only, so tests can swap in
    an in-memory fake for the durable medium.
    """

    def read(self, key: str) -> Optional[str]:
        """Return the text stored under key, or None if nothing was written."""

        raise NotImplementedError

    def write(self, key: str, value: str) -> None:
        """Replace the text stored under key (created on first write)."""

        raise NotImplementedError
