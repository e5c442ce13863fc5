from __future__ import annotations

import re
from typing import Optional, Union

from ..core.constants import EMPTY
from ..core.exceptions import InvalidArgumentError

Amount = Union[int, float, str]

_NUMBER_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not isinstance(value, str):
        raise InvalidArgumentError(f"{field_name} is required")
    return value


def parse_amount(value: Optional[str], field_name: str) -> Amount:
    """Convert raw form text: blank -> EMPTY, otherwise int or float."""
    if value is None:
        return EMPTY
    text = str(value).strip()
    if text == "":
        return EMPTY
    if not _NUMBER_RE.fullmatch(text):
        raise InvalidArgumentError(f"{field_name} must be a number, got {text!r}")
    try:
        return int(text)
    except ValueError:
        pass
    number = float(text)
    if number in (float("inf"), float("-inf")):
        raise InvalidArgumentError(f"{field_name} must be a finite number, got {text!r}")
    return number
