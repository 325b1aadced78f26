"""
Report Configuration -- Value struct accumulated by the report builders.

Responsibility:
    Holds everything a report header and body need (customization ID,
    profile ID, period, reporter identity, items) as one immutable value,
    and decides whether that value is complete.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.  Defaults per report
    type live in the report modules (``default_*_configuration``).

Invariants enforced:
    - start_date and end_date hold plain calendar dates: datetimes and ISO
      strings are reduced to their date portion on the way in.
    - Completeness is checked in a fixed field order and stops at the first
      failure.  The diagnostics callback never influences the result.

Failure modes:
    - ValidationError from ``with_start_date``, ``with_end_date`` and
      ``with_month_of`` (and construction) for values that are not
      date-like.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import date

from reporting_kernel.domain.collection import ReportingItemCollection
from reporting_kernel.domain.diagnostics import Diagnostics
from reporting_kernel.domain.identifiers import has_text
from reporting_kernel.domain.item import ReportingItem
from reporting_kernel.domain.period import (
    DateLike,
    ReportPeriod,
    month_of,
    to_calendar_date,
)


def _calendar_date_or_none(value: DateLike | None) -> date | None:
    return None if value is None else to_calendar_date(value)


@dataclass(frozen=True)
class ReportConfiguration:
    """
    Immutable configuration of one report.

    Every ``with_*`` method returns a new value; the receiver is unchanged.
    Any field may be None until ``first_incomplete_field`` says otherwise.
    Dates given as datetimes or ISO strings are stored as calendar dates.
    """

    customization_id: str | None = None
    profile_id: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    reporter_id_scheme: str | None = None
    reporter_id: str | None = None
    items: ReportingItemCollection | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "start_date", _calendar_date_or_none(self.start_date))
        object.__setattr__(self, "end_date", _calendar_date_or_none(self.end_date))

    def with_customization_id(self, value: str | None) -> ReportConfiguration:
        return replace(self, customization_id=value)

    def with_profile_id(self, value: str | None) -> ReportConfiguration:
        return replace(self, profile_id=value)

    def with_start_date(self, value: DateLike | None) -> ReportConfiguration:
        return replace(self, start_date=value)

    def with_end_date(self, value: DateLike | None) -> ReportConfiguration:
        return replace(self, end_date=value)

    def with_period(self, period: ReportPeriod | None) -> ReportConfiguration:
        if period is None:
            return replace(self, start_date=None, end_date=None)
        return replace(self, start_date=period.start, end_date=period.end)

    def with_month_of(self, value: DateLike | None) -> ReportConfiguration:
        """Set start/end to the calendar month containing ``value``."""
        return self.with_period(None if value is None else month_of(value))

    def with_reporter_id_scheme(self, value: str | None) -> ReportConfiguration:
        return replace(self, reporter_id_scheme=value)

    def with_reporter_id(self, value: str | None) -> ReportConfiguration:
        return replace(self, reporter_id=value)

    def with_items(
        self,
        items: ReportingItemCollection | Iterable[ReportingItem] | None,
    ) -> ReportConfiguration:
        if items is not None and not isinstance(items, ReportingItemCollection):
            items = ReportingItemCollection(items)
        return replace(self, items=items)

    @property
    def period(self) -> ReportPeriod | None:
        """The report period, or None while incomplete or inverted."""
        if self.start_date is None or self.end_date is None:
            return None
        if self.end_date < self.start_date:
            return None
        return ReportPeriod(self.start_date, self.end_date)


def first_incomplete_field(
    config: ReportConfiguration,
    diagnostics: Diagnostics | None = None,
) -> str | None:
    """
    Name of the first missing or inconsistent field, or None if complete.

    Order: customization_id, profile_id, start_date, end_date, period
    (end before start), reporter_id_scheme, reporter_id, items.  The failing
    field is reported to ``diagnostics`` as a warning; success is reported as
    a trace.
    """

    def fail(field: str, message: str) -> str:
        if diagnostics is not None:
            diagnostics.warn(message, missing_field=field)
        return field

    if not has_text(config.customization_id):
        return fail("customization_id", "customization_id_missing")

    if not has_text(config.profile_id):
        return fail("profile_id", "profile_id_missing")

    if config.start_date is None:
        return fail("start_date", "start_date_missing")

    if config.end_date is None:
        return fail("end_date", "end_date_missing")

    if config.end_date < config.start_date:
        return fail("period", "start_date_after_end_date")

    if not has_text(config.reporter_id_scheme):
        return fail("reporter_id_scheme", "reporter_id_scheme_missing")

    if not has_text(config.reporter_id):
        return fail("reporter_id", "reporter_id_missing")

    if config.items is None:
        return fail("items", "reporting_items_missing")

    if diagnostics is not None:
        diagnostics.trace("report_configuration_complete")
    return None


def check_completeness(
    config: ReportConfiguration,
    diagnostics: Diagnostics | None = None,
) -> bool:
    """True if every mandatory field is present and the dates are ordered."""
    return first_incomplete_field(config, diagnostics) is None
