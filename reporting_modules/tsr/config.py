"""
TSR configuration defaults.

Fixed identifiers mandated by the Transaction Statistics Report 1.0 schema
and the pure factory producing a builder's starting configuration.
"""

from __future__ import annotations

from reporting_kernel.domain.aggregation import Dimension
from reporting_kernel.domain.identifiers import SERVICE_PROVIDER_ID_SCHEME
from reporting_kernel.domain.report_config import ReportConfiguration

CUSTOMIZATION_ID_V10 = (
    "urn:fdc:peppol.eu:edec:trns:transaction-statistics-reporting:1.0"
)
PROFILE_ID_V10 = "urn:fdc:peppol.eu:edec:bis:reporting:1.0"

# The total carries everything; no per-group subsets
SUBSET_DIMENSIONS: tuple[Dimension, ...] = ()


def default_tsr_configuration() -> ReportConfiguration:
    """Customization ID, profile ID and reporter scheme preset; rest unset."""
    return ReportConfiguration(
        customization_id=CUSTOMIZATION_ID_V10,
        profile_id=PROFILE_ID_V10,
        reporter_id_scheme=SERVICE_PROVIDER_ID_SCHEME,
    )
