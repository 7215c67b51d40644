"""
Base Model Classes

Declarative base, shared column types and mixins for every MyPass model.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       └── TimestampMixin   ← Automatic created_at/updated_at

Identifiers:
============
Entities use 64-bit integer keys (BIGINT on PostgreSQL). SQLite only
auto-increments a column declared exactly as INTEGER PRIMARY KEY, so
`BigIntPK` falls back to INTEGER on that dialect.

Usage:
======
    from mypass.shared.models.base import Base, BigIntPK, TimestampMixin

    class Folder(Base):
        __tablename__ = "folders"
        id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
"""

from datetime import datetime, timezone

from sqlalchemy import BigInteger, DateTime, Integer, MetaData, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


BigIntPK = BigInteger().with_variant(Integer(), "sqlite")

# Deterministic constraint names keep Alembic migrations stable across dialects
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    All models in the application inherit from this class either directly
    or through TimestampMixin.
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class TimestampMixin:
    """
    Mixin that adds automatic timestamp tracking to models.

    - created_at: Set by the database on INSERT
    - updated_at: Set on INSERT, refreshed by SQLAlchemy on every UPDATE
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=utc_now,
        nullable=False,
    )
