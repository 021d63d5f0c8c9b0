"""
Calendar-date normalization shared by the month bucketer and the fee classifier.

Fee dates reach the engine as ``date``/``datetime`` objects from the ORM or as
ISO-8601 strings from other callers. Everything is reduced to a plain
``datetime.date`` here so both sides compare dates the same way.
"""
import datetime
from typing import Optional, Union

DateLike = Union[datetime.date, datetime.datetime, str, None]


class InvalidDateError(ValueError):
    """Raised when a value cannot be read as a calendar date."""


def to_calendar_date(value: DateLike) -> Optional[datetime.date]:
    """
    Normalize ``value`` to a ``datetime.date``.

    ``None`` and blank strings mean "no date" and return ``None``.
    Timestamps keep their own calendar day (no timezone conversion).
    Anything else that cannot be parsed raises ``InvalidDateError``.
    """
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        # fromisoformat() only understands a trailing "Z" from Python 3.11 on
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            if len(text) == 10:
                return datetime.date.fromisoformat(text)
            return datetime.datetime.fromisoformat(text).date()
        except ValueError as exc:
            raise InvalidDateError(f"Unparseable date: {value!r}") from exc
    raise InvalidDateError(f"Unsupported date value: {value!r}")


def same_month(day: datetime.date, year: int, month: int) -> bool:
    """True if ``day`` lies in calendar ``month`` (1-12) of ``year``."""
    return day.year == year and day.month == month
