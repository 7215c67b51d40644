"""
User Entity Model

Represents a registered application user.

Model Hierarchy:
================
    User
       ├── authorities (Authority[])   - Granted roles, always loaded with the user
       ├── owned_folders (Folder[])    - Folders this user created
       └── shared_folders (Folder[])   - Folders other users shared with this user

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 1001                                                      │
│ login            │ "alice"                                                   │
│ email            │ "alice@example.com"                                       │
│ password_hash    │ "$2b$12$..."                                              │
│ first_name       │ "Alice"                                                   │
│ last_name        │ "Liddell"                                                 │
│ activated        │ true                                                      │
│ created_at       │ 2024-01-01T00:00:00Z                                      │
│ updated_at       │ 2024-01-15T10:30:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mypass.shared.models.base import Base, BigIntPK, TimestampMixin
from mypass.shared.models.authority import Authority, user_authority


# TYPE_CHECKING block prevents circular imports while enabling type hints
if TYPE_CHECKING:
    from mypass.shared.models.folder import Folder


class User(Base, TimestampMixin):
    """
    User model representing a registered application user.

    Login and email are stored lower-cased and are both unique, so either
    one identifies a user when sharing a folder.

    Attributes:
        id: Auto-incremented identifier
        login: Unique login name
        email: Unique email address
        password_hash: Bcrypt hashed password
        activated: Inactive users cannot authenticate

    Relationships:
        authorities: Granted roles (selectin-loaded)
        owned_folders: Folders owned by this user
        shared_folders: Folders shared with this user
    """

    __tablename__ = "users"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # IDENTITY & AUTHENTICATION
    # ═══════════════════════════════════════════════════════════════════════════

    login: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
        index=True,
    )

    email: Mapped[str] = mapped_column(
        String(254),
        unique=True,
        nullable=False,
        index=True,
    )

    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    first_name: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    last_name: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    activated: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    # Many-to-Many: roles are tiny and needed on every lookup, load them eagerly
    authorities: Mapped[list[Authority]] = relationship(
        Authority,
        secondary=user_authority,
        lazy="selectin",
    )

    owned_folders: Mapped[list["Folder"]] = relationship(
        "Folder",
        back_populates="owner",
    )

    shared_folders: Mapped[list["Folder"]] = relationship(
        "Folder",
        secondary="folder_shared_with",
        back_populates="shared_withs",
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    @property
    def authority_names(self) -> list[str]:
        """Names of the granted authorities, sorted."""
        return sorted(authority.name for authority in self.authorities)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, login={self.login})>"
