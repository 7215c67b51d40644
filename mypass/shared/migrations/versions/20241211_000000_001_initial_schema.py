# pylint: skip-file
# ruff: noqa
"""Initial schema - users, authorities, folders, secrets

Revision ID: 001
Revises:
Create Date: 2024-12-11 00:00:00

Tables created:
- users: User accounts
- authorities: Role names (ROLE_USER, ROLE_ADMIN)
- user_authority: Junction table for granted roles
- folders: Named folders, each owned by one user
- folder_shared_with: Junction table for users a folder is shared with
- secrets: Credentials stored in a folder

Seed data:
- authorities ROLE_USER and ROLE_ADMIN
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


BigIntPK = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    """Upgrade database schema."""
    # Create users table
    op.create_table(
        "users",
        sa.Column("id", BigIntPK, primary_key=True, autoincrement=True),
        sa.Column("login", sa.String(50), nullable=False),
        sa.Column("email", sa.String(254), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("first_name", sa.String(50), nullable=True),
        sa.Column("last_name", sa.String(50), nullable=True),
        sa.Column("activated", sa.Boolean(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
    )
    op.create_index("ix_users_login", "users", ["login"], unique=True)
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    # Create authorities table
    authorities = op.create_table(
        "authorities",
        sa.Column("name", sa.String(50), nullable=False),
        sa.PrimaryKeyConstraint("name", name="pk_authorities"),
    )

    # Create user_authority junction table
    op.create_table(
        "user_authority",
        sa.Column("user_id", BigIntPK, nullable=False),
        sa.Column("authority_name", sa.String(50), nullable=False),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"],
            name="fk_user_authority_user_id_users",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["authority_name"], ["authorities.name"],
            name="fk_user_authority_authority_name_authorities",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("user_id", "authority_name", name="pk_user_authority"),
    )

    # Create folders table
    op.create_table(
        "folders",
        sa.Column("id", BigIntPK, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("owner_id", BigIntPK, nullable=True),
        sa.Column("modified", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], name="fk_folders_owner_id_users"),
        sa.PrimaryKeyConstraint("id", name="pk_folders"),
    )
    op.create_index("ix_folders_name", "folders", ["name"])
    op.create_index("ix_folders_owner_id", "folders", ["owner_id"])

    # Create folder_shared_with junction table
    op.create_table(
        "folder_shared_with",
        sa.Column("folder_id", BigIntPK, nullable=False),
        sa.Column("shared_with_id", BigIntPK, nullable=False),
        sa.ForeignKeyConstraint(
            ["folder_id"], ["folders.id"],
            name="fk_folder_shared_with_folder_id_folders",
        ),
        sa.ForeignKeyConstraint(
            ["shared_with_id"], ["users.id"],
            name="fk_folder_shared_with_shared_with_id_users",
        ),
        sa.PrimaryKeyConstraint("folder_id", "shared_with_id", name="pk_folder_shared_with"),
    )

    # Create secrets table
    op.create_table(
        "secrets",
        sa.Column("id", BigIntPK, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("username", sa.String(255), nullable=True),
        sa.Column("password", sa.Text(), nullable=True),
        sa.Column("url", sa.String(2048), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("modified", sa.DateTime(timezone=True), nullable=True),
        sa.Column("folder_id", BigIntPK, nullable=False),
        sa.ForeignKeyConstraint(["folder_id"], ["folders.id"], name="fk_secrets_folder_id_folders"),
        sa.PrimaryKeyConstraint("id", name="pk_secrets"),
    )
    op.create_index("ix_secrets_folder_id", "secrets", ["folder_id"])

    # Seed roles
    op.bulk_insert(authorities, [{"name": "ROLE_USER"}, {"name": "ROLE_ADMIN"}])


def downgrade() -> None:
    """Downgrade database schema."""
    op.drop_index("ix_secrets_folder_id", table_name="secrets")
    op.drop_table("secrets")
    op.drop_table("folder_shared_with")
    op.drop_index("ix_folders_owner_id", table_name="folders")
    op.drop_index("ix_folders_name", table_name="folders")
    op.drop_table("folders")
    op.drop_table("user_authority")
    op.drop_table("authorities")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_index("ix_users_login", table_name="users")
    op.drop_table("users")
