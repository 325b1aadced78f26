"""
Aggregation -- Grouping reporting items by dimension and counting per group.

Responsibility:
    Defines the grouping dimensions, derives group keys from items and turns
    an item collection into a deterministically ordered tuple of per-group
    counts.  Report modules choose which dimensions they group by.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.

Invariants enforced:
    - Each item lands in exactly one group: per direction, the group counts
      add up to the collection totals.
    - Output order is ascending lexicographic over the key fields in
      dimension order, independent of input order.
    - Counts are Python ints (no upper bound).

Failure modes:
    - An empty collection or an empty dimension tuple yields ``()``.  Neither
      is an error.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from operator import attrgetter
from typing import TYPE_CHECKING, Any

from reporting_kernel.domain.identifiers import PeppolIdentifier
from reporting_kernel.domain.item import Direction, ReportingItem

if TYPE_CHECKING:
    from reporting_kernel.domain.collection import ReportingItemCollection

GroupKey = tuple[Any, ...]
KeySelector = Callable[[ReportingItem], GroupKey]


class Dimension(str, Enum):
    """Attributes an item can be grouped by."""

    END_USER_COUNTRY = "end_user_country"
    DOCUMENT_TYPE = "document_type"
    PROCESS = "process"
    DIRECTION = "direction"
    TRANSPORT_PROTOCOL = "transport_protocol"


_EXTRACTORS: dict[Dimension, Callable[[ReportingItem], Any]] = {
    Dimension.END_USER_COUNTRY: attrgetter("end_user_country_code"),
    Dimension.DOCUMENT_TYPE: attrgetter("document_type_id"),
    Dimension.PROCESS: attrgetter("process_id"),
    Dimension.DIRECTION: attrgetter("direction"),
    Dimension.TRANSPORT_PROTOCOL: attrgetter("transport_protocol"),
}


@dataclass(frozen=True, slots=True)
class GroupCounts:
    """
    Counts for one group of items.

    ``incoming`` / ``outgoing`` count messages (Receiving / Sending).  The
    end-user fields count distinct end-user IDs per direction and overall.
    """

    incoming: int = 0
    outgoing: int = 0
    sending_end_users: int = 0
    receiving_end_users: int = 0
    sending_or_receiving_end_users: int = 0

    @property
    def total(self) -> int:
        return self.incoming + self.outgoing

    @classmethod
    def of(cls, items: Iterable[ReportingItem]) -> GroupCounts:
        incoming = 0
        outgoing = 0
        senders: set[str] = set()
        receivers: set[str] = set()
        for item in items:
            if item.direction is Direction.RECEIVING:
                incoming += 1
                receivers.add(item.end_user_id)
            else:
                outgoing += 1
                senders.add(item.end_user_id)
        return cls(
            incoming=incoming,
            outgoing=outgoing,
            sending_end_users=len(senders),
            receiving_end_users=len(receivers),
            sending_or_receiving_end_users=len(senders | receivers),
        )


@dataclass(frozen=True, slots=True)
class GroupAggregate:
    """One group: the dimensions, the key values in that order, the counts."""

    dimensions: tuple[Dimension, ...]
    key: GroupKey
    counts: GroupCounts

    def value_of(self, dimension: Dimension) -> Any:
        return self.key[self.dimensions.index(dimension)]


def key_selector(dimensions: Sequence[Dimension]) -> KeySelector:
    """Build the function deriving a group key for the given dimensions."""
    extractors = tuple(_EXTRACTORS[Dimension(d)] for d in dimensions)

    def select(item: ReportingItem) -> GroupKey:
        return tuple(extract(item) for extract in extractors)

    return select


def key_text(value: Any) -> str:
    """Text form of one key field, as used for ordering."""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def sort_key(key: GroupKey) -> tuple[tuple[str, str], ...]:
    # scheme breaks ties between identifiers whose URIs render identically
    return tuple(
        (key_text(v), v.scheme if isinstance(v, PeppolIdentifier) else "")
        for v in key
    )


def aggregate(
    collection: ReportingItemCollection,
    dimensions: Sequence[Dimension],
) -> tuple[GroupAggregate, ...]:
    """
    Group ``collection`` by ``dimensions`` and count each group.

    With no dimensions the whole collection is a single group, which is
    already the report total, so no subsets are produced.
    """
    dims = tuple(Dimension(d) for d in dimensions)
    if not dims:
        return ()

    counted = collection.count_by(key_selector(dims))
    return tuple(
        GroupAggregate(dimensions=dims, key=key, counts=counted[key])
        for key in sorted(counted, key=sort_key)
    )


def reconciles(
    aggregates: Iterable[GroupAggregate],
    total: GroupCounts,
) -> bool:
    """True if the group message counts add up to ``total`` per direction."""
    incoming = 0
    outgoing = 0
    for agg in aggregates:
        incoming += agg.counts.incoming
        outgoing += agg.counts.outgoing
    return incoming == total.incoming and outgoing == total.outgoing
