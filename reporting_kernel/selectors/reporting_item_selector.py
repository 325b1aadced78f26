"""
Module: reporting_kernel.selectors.reporting_item_selector
Responsibility: Read reporting items of one period back out of the store.
Architecture position: Kernel > Selectors.

Invariants enforced:
    - Period filtering is inclusive on both ends and uses the item's own
      exchange date.
    - Results are ordered by exchange timestamp, then row id, so repeated
      loads return the same sequence.

Failure modes:
    - ValidationError if a stored row no longer forms a valid item.
"""

from collections.abc import Callable, Iterator

from sqlalchemy import func, select
from sqlalchemy.sql import Select

from reporting_kernel.domain.item import ReportingItem
from reporting_kernel.domain.period import ReportPeriod
from reporting_kernel.logging_config import get_logger
from reporting_kernel.models.reporting_item import ReportingItemRecord
from reporting_kernel.selectors.base import BaseSelector

logger = get_logger("selectors.reporting_item")


class ReportingItemSelector(BaseSelector):
    """Queries over stored reporting items."""

    def _period_filter(
        self,
        stmt: Select,
        period: ReportPeriod,
        service_provider_id: str | None,
    ) -> Select:
        stmt = stmt.where(
            ReportingItemRecord.exchange_date >= period.start,
            ReportingItemRecord.exchange_date <= period.end,
        )
        if service_provider_id is not None:
            stmt = stmt.where(
                ReportingItemRecord.service_provider_id == service_provider_id
            )
        return stmt

    def iter_items(
        self,
        period: ReportPeriod,
        service_provider_id: str | None = None,
    ) -> Iterator[ReportingItem]:
        stmt = self._period_filter(
            select(ReportingItemRecord), period, service_provider_id
        ).order_by(
            ReportingItemRecord.exchange_datetime_utc,
            ReportingItemRecord.id,
        )
        for record in self.session.scalars(stmt):
            yield record.to_item()

    def items_for_period(
        self,
        period: ReportPeriod,
        service_provider_id: str | None = None,
    ) -> list[ReportingItem]:
        """All items exchanged within ``period``, optionally for one provider."""
        items = list(self.iter_items(period, service_provider_id))
        logger.debug(
            "reporting_items_loaded",
            extra={
                "period_start": period.start,
                "period_end": period.end,
                "service_provider_id": service_provider_id,
                "item_count": len(items),
            },
        )
        return items

    def count_for_period(
        self,
        period: ReportPeriod,
        service_provider_id: str | None = None,
    ) -> int:
        stmt = self._period_filter(
            select(func.count(ReportingItemRecord.id)), period, service_provider_id
        )
        return self.session.scalar(stmt) or 0

    def for_each_item(
        self,
        period: ReportPeriod,
        consumer: Callable[[ReportingItem], None],
        service_provider_id: str | None = None,
    ) -> int:
        """Stream items of ``period`` into ``consumer``; returns how many."""
        count = 0
        for item in self.iter_items(period, service_provider_id):
            consumer(item)
            count += 1
        return count
