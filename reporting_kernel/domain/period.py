"""
Report periods and calendar-month helpers.

All date-like inputs are first normalized to a plain calendar date by
``to_calendar_date``; ``month_of`` then derives the closed interval of the
calendar month.  Pure functions, zero I/O.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime

from reporting_kernel.exceptions import ValidationError

DateLike = date | datetime | str


def to_calendar_date(value: DateLike) -> date:
    """
    Reduce a date-like value to its calendar date.

    Accepts ``date``, ``datetime`` (naive or offset-aware, the local date as
    stored is kept) and ISO 8601 strings of either.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            if "T" in value:
                return datetime.fromisoformat(value).date()
            return date.fromisoformat(value)
        except ValueError as exc:
            raise ValidationError("date", f"{value!r} is not ISO 8601") from exc
    raise ValidationError("date", f"cannot derive a calendar date from {value!r}")


@dataclass(frozen=True, slots=True)
class ReportPeriod:
    """Closed date interval [start, end] covered by one report."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValidationError(
                "report period",
                f"end {self.end.isoformat()} is before start {self.start.isoformat()}",
            )

    def contains(self, check_date: date) -> bool:
        return self.start <= check_date <= self.end

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    @classmethod
    def for_month(cls, year: int, month: int) -> ReportPeriod:
        last_day = calendar.monthrange(year, month)[1]
        return cls(date(year, month, 1), date(year, month, last_day))

    def __str__(self) -> str:
        return f"{self.start.isoformat()}..{self.end.isoformat()}"


def month_of(value: DateLike) -> ReportPeriod:
    """Calendar month containing ``value``: first day to last day inclusive."""
    d = to_calendar_date(value)
    return ReportPeriod.for_month(d.year, d.month)
