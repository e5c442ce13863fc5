from __future__ import annotations

from typing import Mapping, Optional

from ..common.validators import parse_amount, require_non_empty
from ..core.constants import EMPTY
from ..core.enums import PrefillSource
from ..core.exceptions import InvalidArgumentError
from .model import AMOUNT_FIELDS, BASE_FIELDS, FIELD_MAP, PERIOD_FIELDS, SalaryBaseline, SalaryEntry
from .prefill import Prefill, derive_prefill, empty_prefill
from .store import SalaryEntryStore


class SalarySheetService:
    """Use cases behind the salary form: prefill, row summary, submit."""

    def __init__(self, store: SalaryEntryStore):
        self._store = store

    def prefill(self, employee_id: str, month: str, *, baseline: Optional[SalaryBaseline] = None) -> Prefill:
        existing = self._store.get_entry(employee_id, month)
        if existing:
            return Prefill(
                source=PrefillSource.EXACT,
                carry_only_base=False,
                entry=derive_prefill(existing, month, carry_only_base=False),
            )

        reference = self._store.get_latest_before(employee_id, month)
        if reference:
            return Prefill(
                source=PrefillSource.CARRY_FORWARD,
                carry_only_base=True,
                entry=derive_prefill(reference, month, carry_only_base=True),
            )

        if baseline:
            return Prefill(
                source=PrefillSource.BASELINE,
                carry_only_base=True,
                entry=derive_prefill(baseline, month, carry_only_base=True),
            )

        return Prefill(source=PrefillSource.EMPTY, carry_only_base=True, entry=empty_prefill(month))

    def row_snapshot(self, employee_id: str, *, baseline: Optional[SalaryBaseline] = None) -> Optional[SalaryEntry]:
        """Values for the employee's summary row: latest entry, else the baseline."""
        latest = self._store.get_latest(employee_id)
        if latest:
            return latest
        if not baseline:
            return None
        values = {name: getattr(baseline, name) for name in BASE_FIELDS}
        values.update({name: EMPTY for name in PERIOD_FIELDS})
        return SalaryEntry(month=EMPTY, **values)

    def submit_form(self, employee_id: str, form: Mapping[str, Optional[str]]) -> SalaryEntry:
        """Save raw form text for a month and return the stored (merged) entry."""
        require_non_empty(employee_id, "employee_id")
        month = (form.get(FIELD_MAP["month"]) or "").strip()
        if not month:
            raise InvalidArgumentError("Please choose a month for this salary entry.")

        values: dict[str, object] = {}
        for name in AMOUNT_FIELDS:
            key = FIELD_MAP[name]
            if key in form:
                values[name] = parse_amount(form[key], key)
        if FIELD_MAP["remarks"] in form:
            values["remarks"] = (form[FIELD_MAP["remarks"]] or "").strip()

        entry = SalaryEntry(month=month, **values)
        self._store.save_entry(employee_id, entry)
        return self._store.get_entry(employee_id, month) or entry

