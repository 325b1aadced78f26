"""
TSR aggregation: total plus optional per-group subsets.

By default TSR groups by nothing, so the report is its total.  Other
dimension tuples are accepted for the same framework that drives EUSR.
"""

from __future__ import annotations

from collections.abc import Sequence

from reporting_kernel.domain.aggregation import Dimension, aggregate
from reporting_kernel.domain.collection import ReportingItemCollection
from reporting_kernel.domain.report import subset_keys, subset_type
from reporting_modules.tsr.config import SUBSET_DIMENSIONS
from reporting_modules.tsr.models import IncomingOutgoing, TransactionSubset


def tsr_total(items: ReportingItemCollection) -> IncomingOutgoing:
    return IncomingOutgoing(
        incoming=items.total_incoming_count(),
        outgoing=items.total_outgoing_count(),
    )


def tsr_subsets(
    items: ReportingItemCollection,
    dimensions: Sequence[Dimension] = SUBSET_DIMENSIONS,
) -> tuple[TransactionSubset, ...]:
    groups = aggregate(items, dimensions)
    if not groups:
        return ()
    type_name = subset_type(groups[0].dimensions)
    return tuple(
        TransactionSubset(
            type=type_name,
            keys=subset_keys(group),
            incoming=group.counts.incoming,
            outgoing=group.counts.outgoing,
        )
        for group in groups
    )
