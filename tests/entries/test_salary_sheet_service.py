from __future__ import annotations

import pytest

from src.salary_sheet.salary_sheet.core.enums import PrefillSource
from src.salary_sheet.salary_sheet.core.exceptions import InvalidArgumentError
from src.salary_sheet.salary_sheet.entries.model import SalaryBaseline, SalaryEntry
from src.salary_sheet.salary_sheet.entries.prefill import derive_prefill
from src.salary_sheet.salary_sheet.entries.service import SalarySheetService
from src.salary_sheet.salary_sheet.entries.store import SalaryEntryStore
from src.salary_sheet.salary_sheet.storage.memory_storage import InMemoryKeyValueStorage


class RecordingStorage(InMemoryKeyValueStorage):
    def __init__(self):
        super().__init__()
        self.reads = 0
        self.writes = 0

    def read(self, key):
        self.reads += 1
        return super().read(key)

    def write(self, key, value):
        self.writes += 1
        super().write(key, value)


FULL_JAN = SalaryEntry(
    month="2024-01",
    basic_salary=1000,
    general_allowance=100,
    transport_allowance=50,
    special_allowance=25,
    attendance=22,
    overtime=5,
    production_target_allowance=80,
    remarks="jan",
)

BASELINE = SalaryBaseline(basic_salary=900, general_allowance=90, transport_allowance=None, special_allowance=0)


@pytest.fixture
def service():
    store = SalaryEntryStore(InMemoryKeyValueStorage())
    store.save_entry("E1", FULL_JAN)
    return SalarySheetService(store)


def test_prefill_exact_month_returns_stored_entry(service):
    prefill = service.prefill("E1", "2024-01")
    assert prefill.source == PrefillSource.EXACT
    assert prefill.carry_only_base is False
    assert prefill.entry == FULL_JAN


def test_prefill_new_month_carries_only_base_fields(service):
    prefill = service.prefill("E1", "2024-02", baseline=BASELINE)

    assert prefill.source == PrefillSource.CARRY_FORWARD
    assert prefill.carry_only_base is True
    assert prefill.entry == SalaryEntry(
        month="2024-02",
        basic_salary=1000,
        general_allowance=100,
        transport_allowance=50,
        special_allowance=25,
        attendance="",
        overtime="",
        production_target_allowance="",
        remarks="",
    )


def test_prefill_before_first_entry_carries_from_latest(service):
    prefill = service.prefill("E1", "2023-06")
    assert prefill.source == PrefillSource.CARRY_FORWARD
    assert prefill.entry.month == "2023-06"
    assert prefill.entry.basic_salary == 1000
    assert prefill.entry.overtime == ""


def test_prefill_without_history_uses_baseline(service):
    prefill = service.prefill("E2", "2024-02", baseline=BASELINE)
    assert prefill.source == PrefillSource.BASELINE
    assert prefill.carry_only_base is True
    assert prefill.entry.basic_salary == 900
    assert prefill.entry.transport_allowance == ""
    assert prefill.entry.special_allowance == 0
    assert prefill.entry.attendance == ""
    assert prefill.entry.remarks == ""


def test_prefill_without_history_or_baseline_is_blank(service):
    prefill = service.prefill("E2", "2024-02")
    assert prefill.source == PrefillSource.EMPTY
    assert prefill.entry.month == "2024-02"
    assert prefill.entry.basic_salary == ""
    assert prefill.entry.remarks == ""


def test_derive_prefill_flag_controls_carry():
    assert derive_prefill(FULL_JAN, "2024-05", carry_only_base=False) is FULL_JAN
    carried = derive_prefill(FULL_JAN, "2024-05", carry_only_base=True)
    assert carried.month == "2024-05"
    assert carried.general_allowance == 100
    assert carried.production_target_allowance == ""
    with pytest.raises(TypeError):
        derive_prefill(BASELINE, "2024-05", carry_only_base=False)


def test_row_snapshot_prefers_latest_entry(service):
    service.submit_form("E1", {"month": "2024-04", "basicSalary": "1300"})
    assert service.row_snapshot("E1", baseline=BASELINE).month == "2024-04"


def test_row_snapshot_falls_back_to_baseline(service):
    row = service.row_snapshot("E2", baseline=BASELINE)
    assert row.basic_salary == 900
    assert row.transport_allowance is None
    assert row.overtime == ""
    assert row.remarks is None
    assert service.row_snapshot("E2") is None


def test_submit_form_parses_and_merges(service):
    stored = service.submit_form(
        "E1",
        {"month": "2024-01", "overtime": "7.5", "remarks": "  revised  ", "attendance": ""},
    )
    assert stored.overtime == 7.5
    assert stored.attendance == ""
    assert stored.remarks == "revised"
    # untouched fields are preserved by the merge
    assert stored.basic_salary == 1000
    assert stored.production_target_allowance == 80


def test_submit_form_requires_month_before_any_io():
    storage = RecordingStorage()
    service = SalarySheetService(SalaryEntryStore(storage))
    with pytest.raises(InvalidArgumentError):
        service.submit_form("E1", {"month": "", "basicSalary": "1"})
    assert storage.reads == 0
    assert storage.writes == 0


def test_submit_form_rejects_non_numeric_amount():
    storage = RecordingStorage()
    service = SalarySheetService(SalaryEntryStore(storage))
    with pytest.raises(InvalidArgumentError):
        service.submit_form("E1", {"month": "2024-01", "basicSalary": "lots"})
    assert storage.writes == 0
