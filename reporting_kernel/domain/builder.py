"""
Report Builder -- Fluent accumulation, completeness check and assembly.

Responsibility:
    Base class of the per-report builders.  Accumulates a
    ``ReportConfiguration`` through chained setters, checks completeness
    with logging on request, and delegates assembly of the report object to
    the subclass.

Architecture position:
    Kernel > Domain.  Subclasses live in ``reporting_modules.<report>``.

Invariants enforced:
    - ``is_complete(False)`` and ``is_complete(True)`` agree for the same
      state; the flag only controls logging.
    - ``build()`` never returns a partial report.

Failure modes:
    - IncompleteConfigurationError from ``build()`` naming the first failing
      field.

Builders are single-owner accumulation objects: not safe for concurrent
mutation, cheap to create per report.  The configuration value they hold is
immutable, so ``configuration`` can be handed out safely.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, Self, TypeVar

from reporting_kernel.domain.collection import ReportingItemCollection
from reporting_kernel.domain.diagnostics import LoggerDiagnostics
from reporting_kernel.domain.item import ReportingItem
from reporting_kernel.domain.period import DateLike, ReportPeriod
from reporting_kernel.domain.report import ReportHeader
from reporting_kernel.domain.report_config import (
    ReportConfiguration,
    first_incomplete_field,
)
from reporting_kernel.exceptions import IncompleteConfigurationError
from reporting_kernel.logging_config import LogContext

ReportT = TypeVar("ReportT")


class ReportBuilder(ABC, Generic[ReportT]):
    """
    Fluent builder for one report type.

    Contract:
        Subclasses provide ``report_type``, a logger and ``_assemble``.
        ``_assemble`` is only called with a complete configuration.
    """

    report_type: str = "report"

    def __init__(self, configuration: ReportConfiguration):
        self._config = configuration

    @property
    @abstractmethod
    def logger(self) -> logging.Logger: ...

    @property
    def configuration(self) -> ReportConfiguration:
        return self._config

    # -----------------------------------------------------------------
    # Fluent setters (None clears a field)
    # -----------------------------------------------------------------

    def customization_id(self, value: str | None) -> Self:
        self._config = self._config.with_customization_id(value)
        return self

    def profile_id(self, value: str | None) -> Self:
        self._config = self._config.with_profile_id(value)
        return self

    def start_date(self, value: DateLike | None) -> Self:
        self._config = self._config.with_start_date(value)
        return self

    def end_date(self, value: DateLike | None) -> Self:
        self._config = self._config.with_end_date(value)
        return self

    def period(self, value: ReportPeriod | None) -> Self:
        self._config = self._config.with_period(value)
        return self

    def month_of(self, value: DateLike | None) -> Self:
        """Report on the calendar month containing ``value``."""
        self._config = self._config.with_month_of(value)
        return self

    def reporter_id_scheme(self, value: str | None) -> Self:
        self._config = self._config.with_reporter_id_scheme(value)
        return self

    def reporter_id(self, value: str | None) -> Self:
        """Reporting service provider ID, usually ``P[A-Z]{2}[0-9]{6}``."""
        self._config = self._config.with_reporter_id(value)
        return self

    def items(
        self,
        items: ReportingItemCollection | Iterable[ReportingItem] | None,
    ) -> Self:
        self._config = self._config.with_items(items)
        return self

    # -----------------------------------------------------------------
    # Completeness and build
    # -----------------------------------------------------------------

    def is_complete(self, log_failures: bool) -> bool:
        """Check if all mandatory fields are set, logging the failure if asked."""
        diagnostics = LoggerDiagnostics(self.logger) if log_failures else None
        return first_incomplete_field(self._config, diagnostics) is None

    def build(self) -> ReportT:
        """
        Build the report from the current configuration.

        Raises:
            IncompleteConfigurationError: if ``is_complete(True)`` is False.
        """
        config = self._config
        with LogContext.bind(report_type=self.report_type, reporter_id=config.reporter_id):
            if not self.is_complete(True):
                raise IncompleteConfigurationError(
                    self.report_type, first_incomplete_field(config)
                )

            report = self._assemble(config)
            self.logger.info(
                "report_built",
                extra={
                    "period_start": config.start_date,
                    "period_end": config.end_date,
                    "item_count": len(config.items),
                },
            )
            return report

    @staticmethod
    def _header(config: ReportConfiguration) -> ReportHeader:
        return ReportHeader(
            period=ReportPeriod(config.start_date, config.end_date),
            reporter_id=config.reporter_id,
            reporter_id_scheme=config.reporter_id_scheme,
        )

    @abstractmethod
    def _assemble(self, config: ReportConfiguration) -> ReportT:
        """Create the report object from a complete configuration."""
