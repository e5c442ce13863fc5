from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from ..common.validators import Amount

# attribute name -> persisted (wire) key
FIELD_MAP: dict[str, str] = {
    "month": "month",
    "basic_salary": "basicSalary",
    "general_allowance": "generalAllowance",
    "transport_allowance": "transportAllowance",
    "special_allowance": "specialAllowance",
    "attendance": "attendance",
    "overtime": "overtime",
    "production_target_allowance": "productionTargetAllowance",
    "remarks": "remarks",
}

BASE_FIELDS: tuple[str, ...] = (
    "basic_salary",
    "general_allowance",
    "transport_allowance",
    "special_allowance",
)
PERIOD_FIELDS: tuple[str, ...] = ("attendance", "overtime", "production_target_allowance")
AMOUNT_FIELDS: tuple[str, ...] = BASE_FIELDS + PERIOD_FIELDS


@dataclass(frozen=True)
class SalaryEntry:
    """One employee's salary record for one month.

    None means "not specified": the field is not persisted and an upsert keeps
    the stored value. An explicit blank is EMPTY ("").
    """

    month: str
    basic_salary: Optional[Amount] = None
    general_allowance: Optional[Amount] = None
    transport_allowance: Optional[Amount] = None
    special_allowance: Optional[Amount] = None
    attendance: Optional[Amount] = None
    overtime: Optional[Amount] = None
    production_target_allowance: Optional[Amount] = None
    remarks: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                out[FIELD_MAP[f.name]] = value
        return out

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "SalaryEntry":
        month = raw.get("month")
        values = {name: raw.get(key) for name, key in FIELD_MAP.items() if name != "month"}
        return cls(month=month if isinstance(month, str) else "", **values)


@dataclass(frozen=True)
class SalaryBaseline:
    """Base-field values to fall back on when an employee has no history."""

    basic_salary: Optional[Amount] = None
    general_allowance: Optional[Amount] = None
    transport_allowance: Optional[Amount] = None
    special_allowance: Optional[Amount] = None
