"""Builder for Peppol End User Statistics Reports (EUSR 1.1)."""

from __future__ import annotations

from reporting_kernel.domain.builder import ReportBuilder
from reporting_kernel.domain.report_config import ReportConfiguration
from reporting_kernel.logging_config import get_logger
from reporting_modules.eusr.aggregation import eusr_full_set, eusr_subsets
from reporting_modules.eusr.config import default_eusr_configuration
from reporting_modules.eusr.models import EndUserStatisticsReport


class EndUserStatisticsReportBuilder(ReportBuilder[EndUserStatisticsReport]):
    """
    The main builder class for EUSR v1.1.

    Same fluent interface and completeness rules as the TSR builder; the
    defaults come from ``default_eusr_configuration()``.
    """

    report_type = "EUSR"
    logger = get_logger("modules.eusr.builder")

    def __init__(self, configuration: ReportConfiguration | None = None):
        super().__init__(
            configuration if configuration is not None else default_eusr_configuration()
        )

    def _assemble(self, config: ReportConfiguration) -> EndUserStatisticsReport:
        return EndUserStatisticsReport(
            customization_id=config.customization_id,
            profile_id=config.profile_id,
            header=self._header(config),
            full_set=eusr_full_set(config.items),
            subsets=eusr_subsets(config.items),
        )


def eusr_builder() -> EndUserStatisticsReportBuilder:
    """A new builder for EUSR 1.1 reports."""
    return EndUserStatisticsReportBuilder()
