"""
Reporting Item -- Immutable record of one Peppol transaction exchange.

Responsibility:
    Defines ``ReportingItem``, the single input value type of the aggregation
    engine, the ``Direction`` enum and a fluent ``ReportingItemBuilder``.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.  Items are created by
    the collecting application at transaction time, persisted by the store
    and loaded in bulk for aggregation.  They are never mutated.

Invariants enforced:
    - Every field is mandatory and validated at construction.
    - exchange_datetime is timezone-aware, with a UTC offset in whole minutes.
    - end_user_country_code is an ISO 3166 alpha-2 code (two upper-case letters).

Failure modes:
    - ValidationError naming the offending field.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Any

from reporting_kernel.domain.identifiers import (
    TRANSPORT_PROTOCOL_PEPPOL_AS4_V2,
    PeppolIdentifier,
    has_text,
)
from reporting_kernel.exceptions import ValidationError

_COUNTRY_CODE = re.compile(r"^[A-Z]{2}$")


class Direction(str, Enum):
    """Direction of an exchange as seen from the reporting service provider."""

    SENDING = "sending"  # outgoing
    RECEIVING = "receiving"  # incoming


@dataclass(frozen=True, slots=True)
class ReportingItem:
    """
    One recorded transaction exchange with its classifying attributes.

    Contract:
        All attributes are mandatory.  Identifiers are ``PeppolIdentifier``
        values; ``direction`` accepts a ``Direction`` or its string value and
        is normalized to the enum.

    Guarantees:
        - Immutable and hashable.
        - Passing construction means the item is structurally valid for
          every report type.
    """

    exchange_datetime: datetime
    direction: Direction
    sender_id: PeppolIdentifier
    receiver_id: PeppolIdentifier
    document_type_id: PeppolIdentifier
    process_id: PeppolIdentifier
    transport_protocol: str
    end_user_country_code: str
    end_user_id: str

    def __post_init__(self) -> None:
        if not isinstance(self.exchange_datetime, datetime):
            raise ValidationError("exchange_datetime", "must be a datetime")
        if self.exchange_datetime.utcoffset() is None:
            raise ValidationError("exchange_datetime", "must carry a UTC offset")
        if self.exchange_datetime.utcoffset() % timedelta(minutes=1):
            raise ValidationError("exchange_datetime", "UTC offset must be whole minutes")

        try:
            direction = Direction(self.direction)
        except ValueError:
            raise ValidationError(
                "direction", f"{self.direction!r} is not sending or receiving"
            ) from None
        object.__setattr__(self, "direction", direction)

        for name in ("sender_id", "receiver_id", "document_type_id", "process_id"):
            if not isinstance(getattr(self, name), PeppolIdentifier):
                raise ValidationError(name, "must be a scheme-qualified identifier")

        if not has_text(self.transport_protocol):
            raise ValidationError("transport_protocol", "must not be empty")
        if not isinstance(self.end_user_country_code, str) or not _COUNTRY_CODE.match(
            self.end_user_country_code
        ):
            raise ValidationError(
                "end_user_country_code",
                f"{self.end_user_country_code!r} is not an ISO 3166 alpha-2 code",
            )
        if not has_text(self.end_user_id):
            raise ValidationError("end_user_id", "must not be empty")

    @property
    def exchange_date(self) -> date:
        return self.exchange_datetime.date()

    @property
    def is_sending(self) -> bool:
        return self.direction is Direction.SENDING

    @property
    def is_receiving(self) -> bool:
        return self.direction is Direction.RECEIVING

    @staticmethod
    def builder() -> ReportingItemBuilder:
        return ReportingItemBuilder()

    def to_dict(self) -> dict[str, Any]:
        """Flat, JSON-compatible representation."""
        return {
            "exchange_datetime": self.exchange_datetime.isoformat(),
            "direction": self.direction.value,
            "sender_id": self.sender_id.uri,
            "receiver_id": self.receiver_id.uri,
            "document_type_id": self.document_type_id.uri,
            "process_id": self.process_id.uri,
            "transport_protocol": self.transport_protocol,
            "end_user_country_code": self.end_user_country_code,
            "end_user_id": self.end_user_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReportingItem:
        """Inverse of ``to_dict``.  Missing keys raise ValidationError."""
        try:
            raw_dt = data["exchange_datetime"]
            exchange_dt = (
                raw_dt if isinstance(raw_dt, datetime) else datetime.fromisoformat(raw_dt)
            )
            return cls(
                exchange_datetime=exchange_dt,
                direction=data["direction"],
                sender_id=PeppolIdentifier.parse(data["sender_id"]),
                receiver_id=PeppolIdentifier.parse(data["receiver_id"]),
                document_type_id=PeppolIdentifier.parse(data["document_type_id"]),
                process_id=PeppolIdentifier.parse(data["process_id"]),
                transport_protocol=data["transport_protocol"],
                end_user_country_code=data["end_user_country_code"],
                end_user_id=data["end_user_id"],
            )
        except KeyError as exc:
            raise ValidationError(str(exc.args[0]), "is missing") from exc
        except (TypeError, ValueError) as exc:
            raise ValidationError("exchange_datetime", str(exc)) from exc


class ReportingItemBuilder:
    """Fluent builder for ``ReportingItem``.  Single owner, not shared."""

    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}

    def exchange_datetime(self, value: datetime) -> ReportingItemBuilder:
        self._fields["exchange_datetime"] = value
        return self

    def direction(self, value: Direction) -> ReportingItemBuilder:
        self._fields["direction"] = value
        return self

    def direction_sending(self) -> ReportingItemBuilder:
        return self.direction(Direction.SENDING)

    def direction_receiving(self) -> ReportingItemBuilder:
        return self.direction(Direction.RECEIVING)

    def sender_id(self, value: PeppolIdentifier) -> ReportingItemBuilder:
        self._fields["sender_id"] = value
        return self

    def receiver_id(self, value: PeppolIdentifier) -> ReportingItemBuilder:
        self._fields["receiver_id"] = value
        return self

    def document_type_id(self, value: PeppolIdentifier) -> ReportingItemBuilder:
        self._fields["document_type_id"] = value
        return self

    def process_id(self, value: PeppolIdentifier) -> ReportingItemBuilder:
        self._fields["process_id"] = value
        return self

    def transport_protocol(self, value: str) -> ReportingItemBuilder:
        self._fields["transport_protocol"] = value
        return self

    def transport_protocol_peppol_as4_v2(self) -> ReportingItemBuilder:
        return self.transport_protocol(TRANSPORT_PROTOCOL_PEPPOL_AS4_V2)

    def end_user_country_code(self, value: str) -> ReportingItemBuilder:
        self._fields["end_user_country_code"] = value
        return self

    def end_user_id(self, value: str) -> ReportingItemBuilder:
        self._fields["end_user_id"] = value
        return self

    def build(self) -> ReportingItem:
        """
        Create the item.

        Raises:
            ValidationError: if a field was never set or is invalid.
        """
        for name in ReportingItem.__dataclass_fields__:
            if name not in self._fields:
                raise ValidationError(name, "is missing")
        return ReportingItem(**self._fields)
