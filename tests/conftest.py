"""
Pytest fixtures for the reporting test suite.

Provides:
- ``make_item``: factory for valid reporting items with overridable fields
- ``session``: SQLAlchemy session on a fresh in-memory SQLite store
- Logging reset between tests
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Generator

import pytest
from sqlalchemy.orm import Session

from reporting_kernel.db.engine import (
    create_tables,
    drop_tables,
    get_session,
    init_engine_from_url,
    reset_engine,
)
from reporting_kernel.domain.identifiers import (
    TRANSPORT_PROTOCOL_PEPPOL_AS4_V2,
    document_type_id,
    participant_id,
    process_id,
)
from reporting_kernel.domain.item import Direction, ReportingItem
from reporting_kernel.logging_config import LogContext, reset_logging

INVOICE_DOCTYPE = (
    "urn:oasis:names:specification:ubl:schema:xsd:Invoice-2::Invoice"
    "##urn:cen.eu:en16931:2017#compliant#urn:fdc:peppol.eu:2017:poacc:billing:3.0::2.1"
)
CREDIT_NOTE_DOCTYPE = (
    "urn:oasis:names:specification:ubl:schema:xsd:CreditNote-2::CreditNote"
    "##urn:cen.eu:en16931:2017#compliant#urn:fdc:peppol.eu:2017:poacc:billing:3.0::2.1"
)
BILLING_PROCESS = "urn:fdc:peppol.eu:2017:poacc:billing:01:1.0"

EXCHANGE_TIME = datetime(2023, 6, 15, 10, 30, tzinfo=timezone(timedelta(hours=2)))


@pytest.fixture(autouse=True)
def _clean_logging():
    """Reset logging state between tests."""
    reset_logging()
    LogContext.clear()
    yield
    LogContext.clear()
    reset_logging()


@pytest.fixture
def make_item() -> Callable[..., ReportingItem]:
    """Factory for valid items; keyword arguments override single fields."""

    def _make(**overrides: Any) -> ReportingItem:
        fields: dict[str, Any] = {
            "exchange_datetime": EXCHANGE_TIME,
            "direction": Direction.SENDING,
            "sender_id": participant_id("9915:sender"),
            "receiver_id": participant_id("9915:receiver"),
            "document_type_id": document_type_id(INVOICE_DOCTYPE),
            "process_id": process_id(BILLING_PROCESS),
            "transport_protocol": TRANSPORT_PROTOCOL_PEPPOL_AS4_V2,
            "end_user_country_code": "FI",
            "end_user_id": "end-user-1",
        }
        fields.update(overrides)
        return ReportingItem(**fields)

    return _make


@pytest.fixture
def invoice_doctype() -> str:
    """Document type value carried by ``make_item`` items by default."""
    return INVOICE_DOCTYPE


@pytest.fixture
def credit_note_doctype() -> str:
    return CREDIT_NOTE_DOCTYPE


@pytest.fixture
def session() -> Generator[Session, None, None]:
    """Session on a fresh in-memory SQLite database."""
    init_engine_from_url("sqlite://")
    create_tables()
    s = get_session()
    try:
        yield s
    finally:
        s.rollback()
        s.close()
        drop_tables()
        reset_engine()
