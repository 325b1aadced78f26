"""
Pure function tests for reporting_kernel.domain.aggregation.

Covers ordering, reconciliation with the totals, empty inputs and counts
beyond the 32-bit range.
"""

from __future__ import annotations

import random

import pytest

from reporting_kernel.domain.aggregation import (
    Dimension,
    GroupCounts,
    aggregate,
    key_selector,
    reconciles,
    sort_key,
)
from reporting_kernel.domain.collection import ReportingItemCollection
from reporting_kernel.domain.identifiers import PeppolIdentifier, document_type_id
from reporting_kernel.domain.item import Direction

EUSR_DIMS = (
    Dimension.END_USER_COUNTRY,
    Dimension.DOCUMENT_TYPE,
    Dimension.PROCESS,
    Dimension.DIRECTION,
)


def _mixed(make_item):
    return [
        make_item(end_user_country_code="FI", direction=Direction.RECEIVING),
        make_item(end_user_country_code="DE", direction=Direction.SENDING),
        make_item(end_user_country_code="FI", direction=Direction.SENDING),
        make_item(end_user_country_code="AT", direction=Direction.RECEIVING),
        make_item(
            end_user_country_code="FI",
            direction=Direction.RECEIVING,
            document_type_id=document_type_id("credit-note"),
        ),
        make_item(end_user_country_code="DE", direction=Direction.SENDING),
    ]


class TestAggregate:
    def test_empty_collection(self):
        assert aggregate(ReportingItemCollection(), EUSR_DIMS) == ()

    def test_no_dimensions_means_no_subsets(self, make_item):
        items = ReportingItemCollection([make_item(), make_item()])
        assert aggregate(items, ()) == ()

    def test_groups_by_country_and_direction(self, make_item):
        items = ReportingItemCollection(_mixed(make_item))
        groups = aggregate(items, (Dimension.END_USER_COUNTRY, Dimension.DIRECTION))

        assert [g.key for g in groups] == [
            ("AT", Direction.RECEIVING),
            ("DE", Direction.SENDING),
            ("FI", Direction.RECEIVING),
            ("FI", Direction.SENDING),
        ]
        assert [(g.counts.incoming, g.counts.outgoing) for g in groups] == [
            (1, 0),
            (0, 2),
            (2, 0),
            (0, 1),
        ]

    def test_value_of(self, make_item):
        items = ReportingItemCollection([make_item(end_user_country_code="SE")])
        (group,) = aggregate(items, EUSR_DIMS)
        assert group.value_of(Dimension.END_USER_COUNTRY) == "SE"
        assert group.value_of(Dimension.DIRECTION) is Direction.SENDING

    def test_sorted_by_document_type_within_country(self, make_item):
        items = ReportingItemCollection(_mixed(make_item))
        groups = aggregate(items, EUSR_DIMS)
        fi_receiving = [
            g for g in groups
            if g.key[0] == "FI" and g.key[3] is Direction.RECEIVING
        ]
        doc_values = [g.key[1].uri for g in fi_receiving]
        assert doc_values == sorted(doc_values)

    def test_order_independent_of_input_order(self, make_item):
        items = _mixed(make_item)
        expected = aggregate(ReportingItemCollection(items), EUSR_DIMS)
        rng = random.Random(20230615)
        for _ in range(10):
            shuffled = items[:]
            rng.shuffle(shuffled)
            assert aggregate(ReportingItemCollection(shuffled), EUSR_DIMS) == expected

    def test_reconciles_with_totals(self, make_item):
        items = ReportingItemCollection(_mixed(make_item))
        for dims in [EUSR_DIMS, (Dimension.TRANSPORT_PROTOCOL,), (Dimension.PROCESS,)]:
            groups = aggregate(items, dims)
            assert reconciles(groups, items.totals)
            assert sum(g.counts.incoming for g in groups) == items.total_incoming_count()
            assert sum(g.counts.outgoing for g in groups) == items.total_outgoing_count()

    def test_reconciles_detects_mismatch(self, make_item):
        items = ReportingItemCollection(_mixed(make_item))
        groups = aggregate(items, EUSR_DIMS)
        assert not reconciles(groups[1:], items.totals)


class TestKeys:
    def test_key_selector_order_follows_dimensions(self, make_item):
        item = make_item(end_user_country_code="NO")
        select = key_selector((Dimension.DIRECTION, Dimension.END_USER_COUNTRY))
        assert select(item) == (Direction.SENDING, "NO")

    def test_unknown_dimension_rejected(self):
        with pytest.raises(ValueError):
            key_selector(("colour",))

    def test_sort_key_distinguishes_ambiguous_uris(self):
        a = PeppolIdentifier("x::y", "z")
        b = PeppolIdentifier("x", "y::z")
        assert a.uri == b.uri
        assert sort_key((a,)) != sort_key((b,))


class TestLargeCounts:
    def test_counts_are_unbounded_ints(self):
        big = 2**40
        counts = GroupCounts(incoming=big, outgoing=big + 1)
        assert counts.total == 2 * big + 1
        assert counts.total > 2**32
