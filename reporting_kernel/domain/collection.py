"""
Item Collection -- Ordered, immutable batch of reporting items.

Responsibility:
    Holds the items of one reporting period and answers the aggregate
    queries the report builders need: direction totals, grouping and
    per-group counts.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.  The caller loads the
    items from the store before constructing the collection; the collection
    performs no date filtering.

Invariants enforced:
    - Read-only after construction (backed by a tuple).
    - An empty collection is legal and has all-zero aggregates.
    - Direction totals are computed once and memoized.

Failure modes:
    - ValidationError if an element is None or not a ReportingItem.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import cached_property

from reporting_kernel.domain.aggregation import GroupCounts, GroupKey, KeySelector
from reporting_kernel.domain.item import ReportingItem
from reporting_kernel.exceptions import ValidationError
from reporting_kernel.logging_config import get_logger

logger = get_logger("domain.collection")


class ReportingItemCollection:
    """
    Immutable batch of reporting items for one period.

    Contract:
        Construction copies the supplied iterable into a tuple and validates
        every element.  All queries are side-effect free.

    Non-goals:
        - Does NOT check that items belong to a particular period.
    """

    def __init__(self, items: Iterable[ReportingItem] = ()):
        if items is None:
            raise ValidationError("items", "must be an iterable, not None")
        materialized = tuple(items)
        for index, item in enumerate(materialized):
            if item is None:
                raise ValidationError(f"items[{index}]", "is None")
            if not isinstance(item, ReportingItem):
                raise ValidationError(
                    f"items[{index}]",
                    f"expected ReportingItem, got {type(item).__name__}",
                )
        self._items = materialized
        logger.debug("item_collection_created", extra={"item_count": len(materialized)})

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ReportingItem]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"<ReportingItemCollection items={len(self._items)}>"

    @property
    def items(self) -> tuple[ReportingItem, ...]:
        return self._items

    @property
    def is_empty(self) -> bool:
        return not self._items

    @cached_property
    def totals(self) -> GroupCounts:
        """Counts over the whole collection."""
        return GroupCounts.of(self._items)

    def total_incoming_count(self) -> int:
        """Number of items with direction Receiving."""
        return self.totals.incoming

    def total_outgoing_count(self) -> int:
        """Number of items with direction Sending."""
        return self.totals.outgoing

    def group_by(self, selector: KeySelector) -> dict[GroupKey, tuple[ReportingItem, ...]]:
        """
        Bucket the items by the key ``selector`` derives.

        Items keep their input order inside each bucket.
        """
        groups: dict[GroupKey, list[ReportingItem]] = {}
        for item in self._items:
            groups.setdefault(selector(item), []).append(item)
        return {key: tuple(members) for key, members in groups.items()}

    def count_by(self, selector: KeySelector) -> dict[GroupKey, GroupCounts]:
        return {
            key: GroupCounts.of(members)
            for key, members in self.group_by(selector).items()
        }
