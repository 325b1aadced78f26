"""
Builder for Peppol Transaction Statistics Reports (TSR 1.0).

Usage::

    report = (
        tsr_builder()
        .month_of(date(2023, 6, 15))
        .reporter_id("POP000001")
        .items(collection)
        .build()
    )
"""

from __future__ import annotations

from collections.abc import Sequence

from reporting_kernel.domain.aggregation import Dimension
from reporting_kernel.domain.builder import ReportBuilder
from reporting_kernel.domain.report_config import ReportConfiguration
from reporting_kernel.logging_config import get_logger
from reporting_modules.tsr.aggregation import tsr_subsets, tsr_total
from reporting_modules.tsr.config import SUBSET_DIMENSIONS, default_tsr_configuration
from reporting_modules.tsr.models import TransactionStatisticsReport


class TransactionStatisticsReportBuilder(ReportBuilder[TransactionStatisticsReport]):
    """
    The main builder class for TSR v1.0.

    Starts from ``default_tsr_configuration()``: customization ID, profile ID
    and reporter ID scheme are preset and may be overridden.
    """

    report_type = "TSR"
    logger = get_logger("modules.tsr.builder")

    def __init__(
        self,
        configuration: ReportConfiguration | None = None,
        subset_dimensions: Sequence[Dimension] = SUBSET_DIMENSIONS,
    ):
        super().__init__(
            configuration if configuration is not None else default_tsr_configuration()
        )
        self._subset_dimensions = tuple(subset_dimensions)

    def _assemble(self, config: ReportConfiguration) -> TransactionStatisticsReport:
        return TransactionStatisticsReport(
            customization_id=config.customization_id,
            profile_id=config.profile_id,
            header=self._header(config),
            total=tsr_total(config.items),
            subsets=tsr_subsets(config.items, self._subset_dimensions),
        )


def tsr_builder() -> TransactionStatisticsReportBuilder:
    """A new builder for TSR 1.0 reports."""
    return TransactionStatisticsReportBuilder()
