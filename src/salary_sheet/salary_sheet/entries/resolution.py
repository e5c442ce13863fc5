from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..common.month_key import parse_month
from ..core.enums import Resolution
from .model import SalaryEntry


@dataclass(frozen=True)
class LatestBeforeResult:
    entry: SalaryEntry
    resolution: Resolution


def resolve_latest_before(entries: Sequence[SalaryEntry], month: Optional[str]) -> Optional[LatestBeforeResult]:
    """Find the entry with the greatest month strictly before `month`.

    `entries` must already be sorted ascending. An unparseable target, or a
    target not later than any stored month, falls back to the last entry.
    Entries whose own month is unparseable are never candidates.
    """
    if not entries:
        return None

    latest = LatestBeforeResult(entry=entries[-1], resolution=Resolution.FALLBACK_LATEST)

    target = parse_month(month)
    if target is None:
        return latest

    candidate: Optional[SalaryEntry] = None
    candidate_key = None
    for entry in entries:
        key = parse_month(entry.month)
        if key is None or key >= target:
            continue
        if candidate is None or key > candidate_key:
            candidate, candidate_key = entry, key

    if candidate is None:
        return latest
    return LatestBeforeResult(entry=candidate, resolution=Resolution.STRICTLY_BEFORE)
