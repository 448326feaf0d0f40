from __future__ import annotations

import datetime as dt
import logging

import pytest

from grove.dates import parse_date


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-01-15", dt.date(2024, 1, 15)),
        (" 2024-01-15 ", dt.date(2024, 1, 15)),
        ("January 15, 2024", dt.date(2024, 1, 15)),
        ("Jan 15, 2024", dt.date(2024, 1, 15)),
        ("March 1, 2024", dt.date(2024, 3, 1)),
        ("15/01/2024", dt.date(2024, 1, 15)),
        ("01/15/2024", dt.date(2024, 1, 15)),
    ],
)
def test_supported_formats(value: str, expected: dt.date) -> None:
    assert parse_date(value) == expected


@pytest.mark.parametrize("value", [None, "", "not a date", "13/25/2024", "2024-02-30"])
def test_unparseable_dates(value) -> None:
    assert parse_date(value) is None


def test_ambiguous_slash_date_reads_day_first(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="grove.dates"):
        assert parse_date("01/02/2024") == dt.date(2024, 2, 1)
    assert "Ambiguous date" in caplog.text


def test_same_day_and_month_is_not_ambiguous(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="grove.dates"):
        assert parse_date("05/05/2024") == dt.date(2024, 5, 5)
    assert "Ambiguous" not in caplog.text
