"""
End User Statistics Report Module (``reporting_modules.eusr``).

Responsibility
--------------
Builds EUSR 1.1.0 report objects: header, full set and one subset per
observed end-user country / document type / process / direction.

Invariants enforced
-------------------
* Per direction, the subsets' message counts add up to the full set.
* Subsets are ordered ascending by country, document type, process,
  direction regardless of input order.

Failure modes
-------------
* Incomplete builder -> ``IncompleteConfigurationError`` from ``build()``.
* Empty item collection -> all-zero full set, no subsets (not an error).
"""

from reporting_modules.eusr.aggregation import SUBSET_TYPE, eusr_full_set, eusr_subsets
from reporting_modules.eusr.builder import EndUserStatisticsReportBuilder, eusr_builder
from reporting_modules.eusr.config import (
    CUSTOMIZATION_ID_V11,
    PROFILE_ID_V10,
    SUBSET_DIMENSIONS,
    default_eusr_configuration,
)
from reporting_modules.eusr.models import (
    EndUserCounts,
    EndUserStatisticsReport,
    EndUserSubset,
)

__all__ = [
    "EndUserStatisticsReportBuilder",
    "eusr_builder",
    "CUSTOMIZATION_ID_V11",
    "PROFILE_ID_V10",
    "SUBSET_DIMENSIONS",
    "SUBSET_TYPE",
    "default_eusr_configuration",
    "eusr_full_set",
    "eusr_subsets",
    "EndUserCounts",
    "EndUserStatisticsReport",
    "EndUserSubset",
]
