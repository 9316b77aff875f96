import pytest

from billsplit.utils.parse import format_date, parse_bill_date


def test_parse_bill_date():
    assert parse_bill_date("2024-05-09") == (2024, 5, 9)
    assert parse_bill_date(" 2023-12-31 ") == (2023, 12, 31)


@pytest.mark.parametrize("value", ["2024/05/09", "2024-05", "2024-05-09-01", "2024-May-09", ""])
def test_parse_bill_date_malformed(value):
    with pytest.raises(ValueError):
        parse_bill_date(value)


def test_format_date_strips_leading_zeros():
    assert format_date("2024-01-05") == "2024年1月5日"


def test_format_date_does_not_check_calendar():
    assert format_date("2024-13-40") == "2024年13月40日"


def test_format_date_custom_template():
    assert format_date("2024-01-05", "{year}.{month}.{day}") == "2024.1.5"
