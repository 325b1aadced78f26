"""
Tests for the Transaction Statistics Report builder.

Pure builder tests: items are constructed in memory, NO database required.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone

import pytest

from reporting_kernel.domain.aggregation import Dimension
from reporting_kernel.domain.collection import ReportingItemCollection
from reporting_kernel.domain.item import Direction
from reporting_kernel.domain.period import ReportPeriod
from reporting_kernel.domain.report_config import ReportConfiguration
from reporting_kernel.exceptions import IncompleteConfigurationError
from reporting_modules.render import render_to_dict
from reporting_modules.tsr import (
    CUSTOMIZATION_ID_V10,
    PROFILE_ID_V10,
    IncomingOutgoing,
    TransactionStatisticsReportBuilder,
    default_tsr_configuration,
    tsr_builder,
)


@pytest.fixture
def june_builder(make_item) -> TransactionStatisticsReportBuilder:
    return (
        tsr_builder()
        .month_of(date(2023, 6, 15))
        .reporter_id_scheme("PEPPOL")
        .reporter_id("POP000001")
        .items(ReportingItemCollection(make_item(direction=Direction.SENDING) for _ in range(3)))
    )


class TestDefaults:
    def test_default_configuration(self):
        config = default_tsr_configuration()
        assert config.customization_id == CUSTOMIZATION_ID_V10
        assert config.profile_id == PROFILE_ID_V10
        assert config.reporter_id_scheme == "CertSubjectCN"
        assert config.start_date is None
        assert config.items is None

    def test_factory_returns_fresh_values(self):
        assert default_tsr_configuration() == default_tsr_configuration()
        first = tsr_builder().reporter_id("POP000001")
        assert tsr_builder().configuration.reporter_id is None
        assert first.configuration.reporter_id == "POP000001"

    def test_new_builder_is_incomplete(self):
        builder = tsr_builder()
        assert not builder.is_complete(False)
        assert not builder.is_complete(True)


class TestBuild:
    def test_june_sending_only(self, june_builder):
        assert june_builder.is_complete(True)
        report = june_builder.build()

        assert report.total == IncomingOutgoing(incoming=0, outgoing=3)
        assert report.header.period == ReportPeriod(date(2023, 6, 1), date(2023, 6, 30))
        assert report.header.reporter_id == "POP000001"
        assert report.header.reporter_id_scheme == "PEPPOL"
        assert report.customization_id == CUSTOMIZATION_ID_V10
        assert report.profile_id == PROFILE_ID_V10
        assert report.subsets == ()

    def test_mixed_directions(self, june_builder, make_item):
        items = [make_item(direction=Direction.RECEIVING)] * 2 + [make_item()]
        report = june_builder.items(items).build()
        assert report.total == IncomingOutgoing(incoming=2, outgoing=1)

    def test_empty_collection_builds_zero_report(self, june_builder):
        report = june_builder.items(ReportingItemCollection()).build()
        assert report.total == IncomingOutgoing(incoming=0, outgoing=0)
        assert report.subsets == ()

    def test_build_is_repeatable(self, june_builder):
        assert june_builder.build() == june_builder.build()

    def test_overridden_identifiers_are_used(self, june_builder):
        report = june_builder.customization_id("urn:custom").profile_id("urn:profile").build()
        assert report.customization_id == "urn:custom"
        assert report.profile_id == "urn:profile"

    def test_explicit_dates(self, june_builder):
        report = (
            june_builder.start_date(date(2023, 6, 10)).end_date(date(2023, 6, 10)).build()
        )
        assert report.header.period.days == 1

    def test_month_of_datetime_and_string(self, june_builder):
        from_datetime = june_builder.month_of(
            datetime(2023, 6, 30, 23, 59, tzinfo=timezone.utc)
        ).build()
        from_string = june_builder.month_of("2023-06-01").build()
        assert from_datetime.header.period == from_string.header.period

    def test_datetime_dates_render_as_plain_dates(self, june_builder):
        june_builder.start_date(datetime(2023, 6, 1, 8, tzinfo=timezone.utc))
        june_builder.end_date(date(2023, 6, 30))
        assert june_builder.is_complete(False) is True

        june_builder.end_date("2023-06-30T17:45:00+03:00")
        report = june_builder.build()
        assert report.header.period == ReportPeriod(date(2023, 6, 1), date(2023, 6, 30))

        period = render_to_dict(report)["header"]["period"]
        assert period == {"start": "2023-06-01", "end": "2023-06-30"}
        assert "T" not in period["start"] + period["end"]

    def test_subsets_when_dimensions_given(self, make_item):
        items = [
            make_item(transport_protocol="peppol-transport-as4-v2_0"),
            make_item(transport_protocol="peppol-transport-as2-v1_0"),
            make_item(transport_protocol="peppol-transport-as2-v1_0", direction=Direction.RECEIVING),
        ]
        report = (
            TransactionStatisticsReportBuilder(subset_dimensions=[Dimension.TRANSPORT_PROTOCOL])
            .month_of(date(2023, 6, 1))
            .reporter_id("POP000001")
            .items(items)
            .build()
        )
        assert [s.type for s in report.subsets] == ["PerTP", "PerTP"]
        assert [s.keys[0].value for s in report.subsets] == [
            "peppol-transport-as2-v1_0",
            "peppol-transport-as4-v2_0",
        ]
        assert [(s.incoming, s.outgoing) for s in report.subsets] == [(1, 1), (0, 1)]
        assert sum(s.outgoing for s in report.subsets) == report.total.outgoing

    def test_builder_from_explicit_configuration(self, make_item):
        config = (
            default_tsr_configuration()
            .with_month_of(date(2023, 6, 15))
            .with_reporter_id("POP000002")
            .with_items([make_item()])
        )
        report = TransactionStatisticsReportBuilder(config).build()
        assert report.header.reporter_id == "POP000002"


class TestIncomplete:
    def test_end_date_unset(self, june_builder):
        june_builder.end_date(None)
        assert not june_builder.is_complete(True)
        with pytest.raises(IncompleteConfigurationError) as exc_info:
            june_builder.build()
        assert exc_info.value.field == "end_date"
        assert exc_info.value.report_type == "TSR"
        assert exc_info.value.code == "INCOMPLETE_CONFIGURATION"

    def test_inverted_period(self, june_builder):
        june_builder.start_date(date(2023, 7, 1))
        with pytest.raises(IncompleteConfigurationError) as exc_info:
            june_builder.build()
        assert exc_info.value.field == "period"

    def test_missing_items(self, june_builder):
        june_builder.items(None)
        with pytest.raises(IncompleteConfigurationError) as exc_info:
            june_builder.build()
        assert exc_info.value.field == "items"

    def test_empty_configuration(self):
        builder = TransactionStatisticsReportBuilder(ReportConfiguration())
        with pytest.raises(IncompleteConfigurationError) as exc_info:
            builder.build()
        assert exc_info.value.field == "customization_id"

    @pytest.mark.parametrize(
        "setter", ["customization_id", "profile_id", "reporter_id_scheme", "reporter_id"]
    )
    def test_flag_does_not_change_result(self, june_builder, setter):
        assert june_builder.is_complete(False) == june_builder.is_complete(True)
        getattr(june_builder, setter)(None)
        assert june_builder.is_complete(False) is False
        assert june_builder.is_complete(True) is False


class TestLogging:
    def test_failure_logged_only_when_asked(self, june_builder, caplog):
        june_builder.reporter_id(None)
        with caplog.at_level(logging.DEBUG, logger="reporting_kernel"):
            june_builder.is_complete(False)
            assert caplog.records == []

            june_builder.is_complete(True)

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert warnings[0].getMessage() == "reporter_id_missing"
        assert warnings[0].missing_field == "reporter_id"
        assert warnings[0].name == "reporting_kernel.modules.tsr.builder"

    def test_build_logs_report_built(self, june_builder, caplog):
        with caplog.at_level(logging.INFO, logger="reporting_kernel"):
            june_builder.build()
        built = [r for r in caplog.records if r.getMessage() == "report_built"]
        assert len(built) == 1
        assert built[0].item_count == 3
