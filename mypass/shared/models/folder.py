"""
Folder Entity Model

A named group of secrets, owned by one user and optionally shared with others.

Model Hierarchy:
================
    Folder
       ├── owner (User)               - Creator, stamped on creation
       ├── secrets (Secret[])         - Secrets stored in this folder
       └── shared_withs (User[])      - Users granted access besides the owner

SAMPLE FOLDER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 42                                                        │
│ name             │ "Finance"                                                 │
│ owner_id         │ 1001                                                      │
│ modified         │ 2024-01-15T10:30:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘

SAMPLE FOLDER_SHARED_WITH RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ folder_id        │ 42                                                        │
│ shared_with_id   │ 1002                                                      │
└──────────────────────────────────────────────────────────────────────────────┘

Relations are lazy by default; repositories pick what to load with
selectinload() options, since implicit lazy loading is not available on an
AsyncSession.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Column, DateTime, ForeignKey, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mypass.shared.models.base import Base, BigIntPK


if TYPE_CHECKING:
    from mypass.shared.models.secret import Secret
    from mypass.shared.models.user import User


# Many-to-Many: folders ↔ users they are shared with
folder_shared_with = Table(
    "folder_shared_with",
    Base.metadata,
    Column("folder_id", BigIntPK, ForeignKey("folders.id"), primary_key=True),
    Column("shared_with_id", BigIntPK, ForeignKey("users.id"), primary_key=True),
)


class Folder(Base):
    """
    Folder model.

    Attributes:
        id: Auto-incremented identifier
        name: Display name
        owner_id: Owning user, NULL when the owner could not be resolved at creation
        modified: Time of the last save

    Relationships:
        owner: Owning user
        secrets: Secrets in this folder (deleting a folder that still holds
            secrets is rejected by the store)
        shared_withs: Users the folder is shared with
    """

    __tablename__ = "folders"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # FIELDS
    # ═══════════════════════════════════════════════════════════════════════════

    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    owner_id: Mapped[Optional[int]] = mapped_column(
        BigIntPK,
        ForeignKey("users.id"),
        nullable=True,
        index=True,
    )

    modified: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    owner: Mapped[Optional["User"]] = relationship(
        "User",
        back_populates="owned_folders",
    )

    secrets: Mapped[list["Secret"]] = relationship(
        "Secret",
        back_populates="folder",
    )

    shared_withs: Mapped[list["User"]] = relationship(
        "User",
        secondary=folder_shared_with,
        back_populates="shared_folders",
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    @property
    def owner_login(self) -> Optional[str]:
        """Login of the owner, requires the owner relation to be loaded."""
        return self.owner.login if self.owner is not None else None

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Folder(id={self.id}, name={self.name}, owner_id={self.owner_id})>"
