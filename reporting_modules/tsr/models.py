"""
Transaction Statistics Report Models (``reporting_modules.tsr.models``).

Frozen dataclass value objects mirroring the TSR 1.0.1 document:
CustomizationID, ProfileID, Header, Total and zero or more Subset elements.
Counts are Python ints and carry no upper bound.
"""

from __future__ import annotations

from dataclasses import dataclass

from reporting_kernel.domain.report import ReportHeader, SubsetKey


@dataclass(frozen=True)
class IncomingOutgoing:
    """Message counts by direction."""

    incoming: int
    outgoing: int


@dataclass(frozen=True)
class TransactionSubset:
    """One group: its type, its keys and its counts."""

    type: str
    keys: tuple[SubsetKey, ...]
    incoming: int
    outgoing: int


@dataclass(frozen=True)
class TransactionStatisticsReport:
    """Complete TSR, handed to the serializer as is."""

    customization_id: str
    profile_id: str
    header: ReportHeader
    total: IncomingOutgoing
    subsets: tuple[TransactionSubset, ...] = ()
