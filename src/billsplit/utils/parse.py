from __future__ import annotations

import re


DATE_TEMPLATE = "{year}年{month}月{day}日"

_DATE_PART = re.compile(r"^\d+$")


def parse_bill_date(value: str) -> tuple[int, int, int]:
    """
    Split a ``YYYY-MM-DD`` string into integer components.

    Only the shape is checked: three dash-separated numeric parts. Calendar
    correctness (month 13, February 30) is left to the caller.
    """
    parts = value.strip().split("-")
    if len(parts) != 3 or not all(_DATE_PART.match(part) for part in parts):
        raise ValueError(f"expected a YYYY-MM-DD date, got {value!r}")

    year, month, day = (int(part) for part in parts)
    return year, month, day


def format_date(value: str, template: str = DATE_TEMPLATE) -> str:
    year, month, day = parse_bill_date(value)
    return template.format(year=year, month=month, day=day)
