import datetime

import pytest

from services.academic_year import (
    AcademicYear,
    academic_year_options,
    default_academic_year,
    parse_academic_year,
    resolve_academic_year,
)


def test_default_from_july_onwards():
    assert default_academic_year(datetime.date(2024, 7, 1)) == "2024-2025"
    assert default_academic_year(datetime.date(2024, 12, 31)) == "2024-2025"


def test_default_before_july():
    assert default_academic_year(datetime.date(2025, 1, 1)) == "2024-2025"
    assert default_academic_year(datetime.date(2025, 6, 30)) == "2024-2025"


def test_resolve_uses_default_when_missing():
    today = datetime.date(2025, 3, 10)
    assert resolve_academic_year(None, today) == AcademicYear(2024, 2025)
    assert resolve_academic_year("", today) == AcademicYear(2024, 2025)


def test_resolve_explicit_label():
    year = resolve_academic_year("2023-2024", datetime.date(2025, 3, 10))
    assert year == AcademicYear(2023, 2024)
    assert year.label == "2023-2024"


@pytest.mark.parametrize("label", ["2024", "2024-", "-2025", "2024-2025-2026", "abcd-efgh", "2024/2025", "2024 - 2025"])
def test_malformed_labels(label):
    assert parse_academic_year(label) is None
    assert resolve_academic_year(label, datetime.date(2025, 3, 10)) is None


def test_calendar_year_for_months():
    year = AcademicYear(2024, 2025)
    assert [year.calendar_year_for(m) for m in (7, 8, 9, 10, 11, 12)] == [2024] * 6
    assert [year.calendar_year_for(m) for m in (1, 2, 3, 4, 5, 6)] == [2025] * 6


def test_year_options():
    assert academic_year_options(datetime.date(2025, 1, 15)) == [
        "2023-2024", "2024-2025", "2025-2026", "2026-2027", "2027-2028",
    ]


def test_overlong_year_halves_are_rejected():
    today = datetime.date(2025, 3, 10)
    assert resolve_academic_year("1" * 5000 + "-2025", today) is None
    assert resolve_academic_year("2024-" + "9" * 10, today) is None
    assert parse_academic_year("123456789-123456790") == AcademicYear(123456789, 123456790)
