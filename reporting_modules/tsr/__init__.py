"""
Transaction Statistics Report Module (``reporting_modules.tsr``).

Responsibility
--------------
Builds TSR 1.0.1 report objects: header, incoming/outgoing total and, when
configured, per-group subsets.

Invariants enforced
-------------------
* Total incoming = items with direction Receiving; total outgoing = items
  with direction Sending.
* Per direction, subset counts add up to the total.

Failure modes
-------------
* Incomplete builder -> ``IncompleteConfigurationError`` from ``build()``.
* Empty item collection -> total 0/0, no subsets (not an error).
"""

from reporting_modules.tsr.aggregation import tsr_subsets, tsr_total
from reporting_modules.tsr.builder import TransactionStatisticsReportBuilder, tsr_builder
from reporting_modules.tsr.config import (
    CUSTOMIZATION_ID_V10,
    PROFILE_ID_V10,
    SUBSET_DIMENSIONS,
    default_tsr_configuration,
)
from reporting_modules.tsr.models import (
    IncomingOutgoing,
    TransactionStatisticsReport,
    TransactionSubset,
)

__all__ = [
    # Builder
    "TransactionStatisticsReportBuilder",
    "tsr_builder",
    # Config
    "CUSTOMIZATION_ID_V10",
    "PROFILE_ID_V10",
    "SUBSET_DIMENSIONS",
    "default_tsr_configuration",
    # Aggregation
    "tsr_total",
    "tsr_subsets",
    # Models
    "IncomingOutgoing",
    "TransactionStatisticsReport",
    "TransactionSubset",
]
