"""
Module: reporting_kernel.models.reporting_item
Responsibility: ORM persistence for reporting items, one row per recorded
    exchange.
Architecture position: Kernel > Models.  May import from db/base.py and the
    pure domain value types it converts to and from.

Invariants enforced:
    - Rows are written once and never updated (append-only store).
    - exchange_date holds the item's own calendar date (in its original UTC
      offset); period queries filter on it, inclusive on both ends.
    - The timestamp is stored in UTC next to its original offset so that
      ``to_item`` restores the exact value on backends without offset
      support.  Items only carry whole-minute offsets, so the minute column
      is exact.
"""

from datetime import UTC, date, datetime, timedelta, timezone

from sqlalchemy import Date, DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from reporting_kernel.db.base import Base
from reporting_kernel.domain.identifiers import PeppolIdentifier
from reporting_kernel.domain.item import ReportingItem


class ReportingItemRecord(Base):
    """
    Stored reporting item.

    Contract:
        ``from_item`` and ``to_item`` are inverses for every valid item.

    Non-goals:
        - No uniqueness constraint: the same exchange recorded twice is two
          rows, exactly as the collecting application reported it.
    """

    __tablename__ = "peppol_reporting_items"

    __table_args__ = (
        Index("idx_reporting_item_date", "exchange_date"),
        Index("idx_reporting_item_sp_date", "service_provider_id", "exchange_date"),
    )

    exchange_datetime_utc: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    exchange_offset_minutes: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )

    exchange_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
    )

    direction: Mapped[str] = mapped_column(String(10), nullable=False)

    sender_scheme: Mapped[str] = mapped_column(String(100), nullable=False)
    sender_value: Mapped[str] = mapped_column(String(255), nullable=False)
    receiver_scheme: Mapped[str] = mapped_column(String(100), nullable=False)
    receiver_value: Mapped[str] = mapped_column(String(255), nullable=False)
    document_type_scheme: Mapped[str] = mapped_column(String(100), nullable=False)
    document_type_value: Mapped[str] = mapped_column(String(500), nullable=False)
    process_scheme: Mapped[str] = mapped_column(String(100), nullable=False)
    process_value: Mapped[str] = mapped_column(String(255), nullable=False)

    transport_protocol: Mapped[str] = mapped_column(String(100), nullable=False)
    end_user_country_code: Mapped[str] = mapped_column(String(2), nullable=False)
    end_user_id: Mapped[str] = mapped_column(String(255), nullable=False)

    # Service provider the item was recorded for (multi-tenant stores)
    service_provider_id: Mapped[str | None] = mapped_column(
        String(64),
        nullable=True,
    )

    def __repr__(self) -> str:
        return (
            f"<ReportingItemRecord {self.exchange_date} {self.direction} "
            f"{self.end_user_country_code}>"
        )

    @classmethod
    def from_item(
        cls,
        item: ReportingItem,
        service_provider_id: str | None = None,
    ) -> "ReportingItemRecord":
        offset = item.exchange_datetime.utcoffset()
        return cls(
            exchange_datetime_utc=item.exchange_datetime.astimezone(UTC),
            exchange_offset_minutes=offset // timedelta(minutes=1),
            exchange_date=item.exchange_date,
            direction=item.direction.value,
            sender_scheme=item.sender_id.scheme,
            sender_value=item.sender_id.value,
            receiver_scheme=item.receiver_id.scheme,
            receiver_value=item.receiver_id.value,
            document_type_scheme=item.document_type_id.scheme,
            document_type_value=item.document_type_id.value,
            process_scheme=item.process_id.scheme,
            process_value=item.process_id.value,
            transport_protocol=item.transport_protocol,
            end_user_country_code=item.end_user_country_code,
            end_user_id=item.end_user_id,
            service_provider_id=service_provider_id,
        )

    def to_item(self) -> ReportingItem:
        """
        Rebuild the domain item.

        Raises:
            ValidationError: if the row holds data a ReportingItem rejects.
        """
        stored = self.exchange_datetime_utc
        if stored.tzinfo is None:
            stored = stored.replace(tzinfo=UTC)
        original_tz = timezone(timedelta(minutes=self.exchange_offset_minutes))
        return ReportingItem(
            exchange_datetime=stored.astimezone(original_tz),
            direction=self.direction,
            sender_id=PeppolIdentifier(self.sender_scheme, self.sender_value),
            receiver_id=PeppolIdentifier(self.receiver_scheme, self.receiver_value),
            document_type_id=PeppolIdentifier(
                self.document_type_scheme, self.document_type_value
            ),
            process_id=PeppolIdentifier(self.process_scheme, self.process_value),
            transport_protocol=self.transport_protocol,
            end_user_country_code=self.end_user_country_code,
            end_user_id=self.end_user_id,
        )
