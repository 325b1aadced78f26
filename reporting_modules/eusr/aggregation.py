"""
EUSR aggregation: one subset per observed (country, document type, process,
direction) combination, sorted ascending by those key fields.
"""

from __future__ import annotations

from reporting_kernel.domain.aggregation import aggregate
from reporting_kernel.domain.collection import ReportingItemCollection
from reporting_kernel.domain.report import subset_keys, subset_type
from reporting_modules.eusr.config import SUBSET_DIMENSIONS
from reporting_modules.eusr.models import EndUserCounts, EndUserSubset

SUBSET_TYPE = subset_type(SUBSET_DIMENSIONS)


def eusr_full_set(items: ReportingItemCollection) -> EndUserCounts:
    return EndUserCounts.from_group(items.totals)


def eusr_subsets(items: ReportingItemCollection) -> tuple[EndUserSubset, ...]:
    return tuple(
        EndUserSubset(
            type=SUBSET_TYPE,
            keys=subset_keys(group),
            counts=EndUserCounts.from_group(group.counts),
        )
        for group in aggregate(items, SUBSET_DIMENSIONS)
    )
