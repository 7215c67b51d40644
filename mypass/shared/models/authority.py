"""
Authority Entity Model

A role label granted to users (ROLE_USER, ROLE_ADMIN).

SAMPLE AUTHORITY RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ name             │ "ROLE_USER"                                               │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from sqlalchemy import Column, ForeignKey, String, Table
from sqlalchemy.orm import Mapped, mapped_column

from mypass.shared.models.base import Base, BigIntPK


ROLE_USER = "ROLE_USER"
ROLE_ADMIN = "ROLE_ADMIN"


# Many-to-Many: users ↔ authorities
user_authority = Table(
    "user_authority",
    Base.metadata,
    Column("user_id", BigIntPK, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column(
        "authority_name",
        String(50),
        ForeignKey("authorities.name", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Authority(Base):
    """
    Authority (role) model.

    The name is the primary key; authorities have no other attributes.
    """

    __tablename__ = "authorities"

    name: Mapped[str] = mapped_column(String(50), primary_key=True)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Authority(name={self.name})>"
