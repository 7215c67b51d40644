"""
Secret Entity Model

An opaque credential record stored in exactly one folder.

SAMPLE SECRET RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 7                                                         │
│ name             │ "Bank portal"                                             │
│ username         │ "alice.l"                                                 │
│ password         │ "<opaque>"                                                │
│ url              │ "https://bank.example.com"                                │
│ notes            │ "PIN in the safe"                                         │
│ modified         │ 2024-01-15T10:30:00Z                                      │
│ folder_id        │ 42                                                        │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mypass.shared.models.base import Base, BigIntPK


if TYPE_CHECKING:
    from mypass.shared.models.folder import Folder


class Secret(Base):
    """
    Secret model.

    The payload fields (username, password, url, notes) are stored as given;
    the backend never interprets them.
    """

    __tablename__ = "secrets"

    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(100), nullable=False)

    username: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    password: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    url: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)

    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    modified: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    folder_id: Mapped[int] = mapped_column(
        BigIntPK,
        ForeignKey("folders.id"),
        nullable=False,
        index=True,
    )

    folder: Mapped["Folder"] = relationship(
        "Folder",
        back_populates="secrets",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Secret(id={self.id}, name={self.name}, folder_id={self.folder_id})>"
