"""
ReportingItemStore -- store and load reporting items per period.

Responsibility:
    The storage collaborator of the aggregation engine.  Appends items as
    they are recorded and hands back the closed batch of one period as a
    ``ReportingItemCollection``.

Architecture position:
    Kernel > Services -- imperative shell.  Writes through the caller's
    session with ``flush()``; the caller (usually ``session_scope()``) owns
    commit and rollback.  Reads are delegated to ``ReportingItemSelector``.

Failure modes:
    - ReportingBackendError wrapping any SQLAlchemyError raised while
      storing or loading.  The original error is chained.
    - ValidationError propagates unchanged for malformed stored rows.

Usage::

    with session_scope() as session:
        store = ReportingItemStore(session)
        store.store(item, service_provider_id="POP000001")

    with session_scope() as session:
        items = ReportingItemStore(session).load_collection(month_of(today))
"""

from collections.abc import Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from reporting_kernel.domain.collection import ReportingItemCollection
from reporting_kernel.domain.item import ReportingItem
from reporting_kernel.domain.period import ReportPeriod
from reporting_kernel.exceptions import ReportingBackendError, ValidationError
from reporting_kernel.logging_config import get_logger
from reporting_kernel.models.reporting_item import ReportingItemRecord
from reporting_kernel.selectors.reporting_item_selector import ReportingItemSelector

logger = get_logger("services.reporting_item_store")


class ReportingItemStore:
    """
    Append-only store of reporting items.

    Contract:
        ``store``/``store_all`` flush but never commit.  Loading never
        mutates.

    Non-goals:
        - No deduplication; the collecting application records each
          exchange once.
        - No retries; callers decide whether a failed store is retried.
    """

    def __init__(self, session: Session):
        self._session = session
        self._selector = ReportingItemSelector(session)

    def store(
        self,
        item: ReportingItem,
        service_provider_id: str | None = None,
    ) -> None:
        """Persist one item, optionally tagged with the recording provider."""
        self.store_all((item,), service_provider_id)

    def store_all(
        self,
        items: Iterable[ReportingItem],
        service_provider_id: str | None = None,
    ) -> int:
        """Persist ``items``; returns how many were written."""
        records = []
        for index, item in enumerate(items):
            if not isinstance(item, ReportingItem):
                raise ValidationError(
                    f"items[{index}]", "expected ReportingItem"
                )
            records.append(ReportingItemRecord.from_item(item, service_provider_id))

        try:
            self._session.add_all(records)
            self._session.flush()
        except SQLAlchemyError as exc:
            raise ReportingBackendError("store", str(exc)) from exc

        logger.info(
            "reporting_items_stored",
            extra={
                "item_count": len(records),
                "service_provider_id": service_provider_id,
            },
        )
        return len(records)

    def load_items(
        self,
        period: ReportPeriod,
        service_provider_id: str | None = None,
    ) -> list[ReportingItem]:
        try:
            return self._selector.items_for_period(period, service_provider_id)
        except SQLAlchemyError as exc:
            raise ReportingBackendError("load", str(exc)) from exc

    def load_collection(
        self,
        period: ReportPeriod,
        service_provider_id: str | None = None,
    ) -> ReportingItemCollection:
        """The closed batch of ``period``, ready for a report builder."""
        return ReportingItemCollection(self.load_items(period, service_provider_id))

    def count(
        self,
        period: ReportPeriod,
        service_provider_id: str | None = None,
    ) -> int:
        try:
            return self._selector.count_for_period(period, service_provider_id)
        except SQLAlchemyError as exc:
            raise ReportingBackendError("count", str(exc)) from exc
