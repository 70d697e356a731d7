from __future__ import annotations

from datetime import date

import pytest

from scheduler.domain.dates import (
    days_in_month,
    format_date,
    is_leap_year,
    parse_date,
    parse_search_date,
)
from scheduler.domain.errors import InvalidDate


def test_parse_and_format_date() -> None:
    assert parse_date("20240229") == date(2024, 2, 29)
    assert format_date(date(2024, 3, 5)) == "20240305"
    assert format_date(date(999, 1, 2)) == "09990102"
    assert format_date(parse_date("16890220")) == "16890220"


@pytest.mark.parametrize("value", ["", "20230229", "2024031", "202403155", "abcdefgh", "2024-3-1", " 20240301"])
def test_parse_date_rejects_invalid_values(value: str) -> None:
    with pytest.raises(InvalidDate) as exc_info:
        parse_date(value)
    assert exc_info.value.value == value


@pytest.mark.parametrize(
    ("year", "leap"),
    [(2024, True), (2023, False), (1900, False), (2000, True), (2100, False)],
)
def test_is_leap_year(year: int, leap: bool) -> None:
    assert is_leap_year(year) is leap


def test_days_in_month() -> None:
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, 2) == 28
    assert days_in_month(2024, 4) == 30
    assert days_in_month(2024, 12) == 31


def test_parse_search_date() -> None:
    assert parse_search_date("15.03.2024") == date(2024, 3, 15)
    assert parse_search_date("15/03/2024") is None
    assert parse_search_date("31.02.2024") is None
    assert parse_search_date("garden") is None
