"""
EUSR configuration defaults.

Fixed identifiers mandated by the End User Statistics Report 1.1 schema,
the grouping dimensions and the pure default-configuration factory.
"""

from __future__ import annotations

from reporting_kernel.domain.aggregation import Dimension
from reporting_kernel.domain.identifiers import SERVICE_PROVIDER_ID_SCHEME
from reporting_kernel.domain.report_config import ReportConfiguration

CUSTOMIZATION_ID_V11 = (
    "urn:fdc:peppol.eu:edec:trns:end-user-statistics-reporting:1.1"
)
PROFILE_ID_V10 = "urn:fdc:peppol.eu:edec:bis:reporting:1.0"

# Key order is also the sort order of the subsets
SUBSET_DIMENSIONS: tuple[Dimension, ...] = (
    Dimension.END_USER_COUNTRY,
    Dimension.DOCUMENT_TYPE,
    Dimension.PROCESS,
    Dimension.DIRECTION,
)


def default_eusr_configuration() -> ReportConfiguration:
    return ReportConfiguration(
        customization_id=CUSTOMIZATION_ID_V11,
        profile_id=PROFILE_ID_V10,
        reporter_id_scheme=SERVICE_PROVIDER_ID_SCHEME,
    )
