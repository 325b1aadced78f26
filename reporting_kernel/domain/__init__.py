"""
Pure domain layer.

Value types, item collection, aggregation and the report builder framework,
with NO dependencies on:
- ORM (SQLAlchemy)
- Database
- I/O

All domain objects are immutable and deterministic, except the builders,
which are single-owner accumulators.
"""

from reporting_kernel.domain.aggregation import (
    Dimension,
    GroupAggregate,
    GroupCounts,
    aggregate,
    key_selector,
    reconciles,
)
from reporting_kernel.domain.builder import ReportBuilder
from reporting_kernel.domain.collection import ReportingItemCollection
from reporting_kernel.domain.diagnostics import Diagnostics, LoggerDiagnostics
from reporting_kernel.domain.identifiers import (
    DOCTYPE_SCHEME_BUSDOX,
    PARTICIPANT_SCHEME_ISO6523,
    PROCESS_SCHEME_CENBII,
    SERVICE_PROVIDER_ID_SCHEME,
    TRANSPORT_PROTOCOL_PEPPOL_AS4_V2,
    PeppolIdentifier,
)
from reporting_kernel.domain.item import Direction, ReportingItem, ReportingItemBuilder
from reporting_kernel.domain.period import ReportPeriod, month_of, to_calendar_date
from reporting_kernel.domain.report import ReportHeader, SubsetKey
from reporting_kernel.domain.report_config import (
    ReportConfiguration,
    check_completeness,
    first_incomplete_field,
)

__all__ = [
    # Items
    "Direction",
    "ReportingItem",
    "ReportingItemBuilder",
    "ReportingItemCollection",
    # Identifiers
    "PeppolIdentifier",
    "PARTICIPANT_SCHEME_ISO6523",
    "DOCTYPE_SCHEME_BUSDOX",
    "PROCESS_SCHEME_CENBII",
    "TRANSPORT_PROTOCOL_PEPPOL_AS4_V2",
    "SERVICE_PROVIDER_ID_SCHEME",
    # Periods
    "ReportPeriod",
    "month_of",
    "to_calendar_date",
    # Aggregation
    "Dimension",
    "GroupAggregate",
    "GroupCounts",
    "aggregate",
    "key_selector",
    "reconciles",
    # Reports
    "ReportHeader",
    "SubsetKey",
    "ReportConfiguration",
    "check_completeness",
    "first_incomplete_field",
    "ReportBuilder",
    # Diagnostics
    "Diagnostics",
    "LoggerDiagnostics",
]
