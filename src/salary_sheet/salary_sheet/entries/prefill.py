from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from ..core.constants import EMPTY
from ..core.enums import PrefillSource
from .model import BASE_FIELDS, PERIOD_FIELDS, SalaryBaseline, SalaryEntry


@dataclass(frozen=True)
class Prefill:
    """Values to show in the entry form for a month."""

    source: PrefillSource
    carry_only_base: bool
    entry: SalaryEntry


def _blank(month: str) -> SalaryEntry:
    blanks = {name: EMPTY for name in BASE_FIELDS + PERIOD_FIELDS}
    return SalaryEntry(month=month, remarks=EMPTY, **blanks)


def derive_prefill(
    reference: Union[SalaryEntry, SalaryBaseline],
    month: str,
    *,
    carry_only_base: bool,
) -> SalaryEntry:
    """Build the form values for `month` from a reference entry.

    With carry_only_base, only the base fields are copied; period fields and
    remarks are blank. Without it, a SalaryEntry is returned as stored.
    """
    if not carry_only_base:
        if not isinstance(reference, SalaryEntry):
            raise TypeError("a baseline can only be carried with carry_only_base=True")
        return reference

    carried = {}
    for name in BASE_FIELDS:
        value = getattr(reference, name)
        carried[name] = EMPTY if value is None else value
    return replace(_blank(month), **carried)


def empty_prefill(month: str) -> SalaryEntry:
    return _blank(month)
