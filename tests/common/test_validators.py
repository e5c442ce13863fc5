import pytest

from src.salary_sheet.salary_sheet.common.validators import parse_amount, require_non_empty
from src.salary_sheet.salary_sheet.core.exceptions import InvalidArgumentError


def test_require_non_empty_rejects_missing_values():
    for value in (None, "", 42):
        with pytest.raises(InvalidArgumentError):
            require_non_empty(value, "employee_id")
    assert require_non_empty("E1", "employee_id") == "E1"
    assert require_non_empty("  ", "employee_id") == "  "


def test_parse_amount_blank_is_empty():
    assert parse_amount("", "basicSalary") == ""
    assert parse_amount("  ", "basicSalary") == ""
    assert parse_amount(None, "basicSalary") == ""


def test_parse_amount_numbers():
    assert parse_amount(" 1500 ", "basicSalary") == 1500
    assert isinstance(parse_amount("1500", "basicSalary"), int)
    assert parse_amount("12.5", "overtime") == 12.5


@pytest.mark.parametrize("value", ["abc", "1,000", "1_000", "nan", "inf", "1e999", "\u0661\u0662", "0x10"])
def test_parse_amount_rejects_non_numeric(value):
    with pytest.raises(InvalidArgumentError):
        parse_amount(value, "basicSalary")


def test_parse_amount_accepts_signs_and_exponents():
    assert parse_amount("-5", "overtime") == -5
    assert parse_amount("+.5", "overtime") == 0.5
    assert parse_amount("1e3", "basicSalary") == 1000.0
