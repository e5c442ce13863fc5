from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional

_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$", re.ASCII)


@dataclass(frozen=True, order=True)
class MonthKey:
    """Calendar month parsed from "YYYY-MM".

    The month number is not range-checked: "2024-13" parses to (2024, 13).
    """

    year: int
    month: int

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


def parse_month(value: Any) -> Optional[MonthKey]:
    """Parse "YYYY-MM" into a MonthKey, or None for anything else."""
    if not value or not isinstance(value, str):
        return None
    # fullmatch: "$" alone would accept a trailing newline.
    match = _MONTH_RE.fullmatch(value)
    if not match:
        return None
    return MonthKey(year=int(match.group(1)), month=int(match.group(2)))


def month_sort_key(value: Any) -> tuple[int, ...]:
    """Sort key with invalid months placed before every valid one."""
    key = parse_month(value)
    if key is None:
        return (0,)
    return (1, key.year, key.month)


def compare_months(a: Any, b: Any) -> int:
    """Three-way compare: -1, 0 or 1. Invalid values compare as the earliest."""
    ka, kb = month_sort_key(a), month_sort_key(b)
    if ka < kb:
        return -1
    if ka > kb:
        return 1
    return 0
