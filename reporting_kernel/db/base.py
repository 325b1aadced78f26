"""
Module: reporting_kernel.db.base
Responsibility: Declarative base for the reporting ORM models and the
    surrogate key every stored reporting item carries.
Architecture position: Kernel > DB.  Lowest-level import target of the
    storage side.  MUST NOT import from models/, services/, selectors/ or
    domain/.

Invariants enforced:
    - Row ids are uuid4 values stored as String(36), so the same schema
      works on SQLite and PostgreSQL.
    - Models declare their column types explicitly; the base adds nothing
      but the id column.
"""

from uuid import UUID, uuid4

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator


class UUIDString(TypeDecorator):
    """Python ``UUID`` bound as its 36 character text form."""

    impl = String(36)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return None if value is None else str(value)

    def process_result_value(self, value, dialect):
        return None if value is None else UUID(value)


class Base(DeclarativeBase):
    """Declarative base; ``id`` doubles as the store's tie-breaking sort key."""

    id: Mapped[UUID] = mapped_column(
        UUIDString(),
        primary_key=True,
        default=uuid4,
    )
