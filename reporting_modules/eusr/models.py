"""
End User Statistics Report Models (``reporting_modules.eusr.models``).

Frozen dataclass value objects mirroring the EUSR 1.1.0 document.  Every
count block carries the message counts (incoming/outgoing) and the number
of distinct end users that sent, received, or did either.

Invariants enforced
-------------------
* All models are ``frozen=True``.
* ``sending_or_receiving_end_users`` <= ``sending_end_users`` +
  ``receiving_end_users``.
"""

from __future__ import annotations

from dataclasses import dataclass

from reporting_kernel.domain.aggregation import GroupCounts
from reporting_kernel.domain.report import ReportHeader, SubsetKey, key_value


@dataclass(frozen=True)
class EndUserCounts:
    """Counts of one group, or of the full set."""

    incoming: int
    outgoing: int
    sending_end_users: int
    receiving_end_users: int
    sending_or_receiving_end_users: int

    @classmethod
    def from_group(cls, counts: GroupCounts) -> EndUserCounts:
        return cls(
            incoming=counts.incoming,
            outgoing=counts.outgoing,
            sending_end_users=counts.sending_end_users,
            receiving_end_users=counts.receiving_end_users,
            sending_or_receiving_end_users=counts.sending_or_receiving_end_users,
        )


@dataclass(frozen=True)
class EndUserSubset:
    """
    One (end-user country, document type, process, direction) group.

    ``keys`` are ordered like the grouping dimensions.
    """

    type: str
    keys: tuple[SubsetKey, ...]
    counts: EndUserCounts

    @property
    def end_user_country(self) -> str | None:
        return key_value(self.keys, "CC")

    @property
    def document_type(self) -> str | None:
        return key_value(self.keys, "DT")

    @property
    def process(self) -> str | None:
        return key_value(self.keys, "PR")

    @property
    def direction(self) -> str | None:
        return key_value(self.keys, "DIR")

    @property
    def incoming(self) -> int:
        return self.counts.incoming

    @property
    def outgoing(self) -> int:
        return self.counts.outgoing


@dataclass(frozen=True)
class EndUserStatisticsReport:
    """Complete EUSR, handed to the serializer as is."""

    customization_id: str
    profile_id: str
    header: ReportHeader
    full_set: EndUserCounts
    subsets: tuple[EndUserSubset, ...] = ()
