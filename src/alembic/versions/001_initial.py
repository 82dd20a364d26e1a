"""Initial migration

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel

from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

ACTIVE_STATUS_SQL = "status IN ('in_progress', 'stalled')"


def upgrade() -> None:
    # 1. Users
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("uuid", sa.Uuid(), nullable=False),
        sa.Column("email", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column("password_hash", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_uuid", "users", ["uuid"], unique=True)
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    # 2. Login sessions (one per user)
    op.create_table(
        "sessions",
        sa.Column("id", sqlmodel.sql.sqltypes.AutoString(length=36), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_sessions_user_id", "sessions", ["user_id"], unique=True)

    # 3. Artists and their alternate names
    op.create_table(
        "artists",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("url_name", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("death_year", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_artists_url_name", "artists", ["url_name"], unique=True)

    op.create_table(
        "artist_alternate_names",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("artist_id", sa.Integer(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("url_name", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.ForeignKeyConstraint(["artist_id"], ["artists.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_artist_alternate_names_artist_id", "artist_alternate_names", ["artist_id"]
    )
    op.create_index(
        "ix_artist_alternate_names_url_name", "artist_alternate_names", ["url_name"]
    )

    # 4. Ebooks and placeholders
    op.create_table(
        "ebooks",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("url_name", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_ebooks_url_name", "ebooks", ["url_name"], unique=True)

    op.create_table(
        "ebook_placeholders",
        sa.Column("ebook_id", sa.Integer(), nullable=False),
        sa.Column("is_in_progress", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.ForeignKeyConstraint(["ebook_id"], ["ebooks.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("ebook_id"),
    )

    # 5. Projects
    op.create_table(
        "projects",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("ebook_id", sa.Integer(), nullable=True),
        sa.Column(
            "status",
            sqlmodel.sql.sqltypes.AutoString(length=20),
            nullable=False,
            server_default="in_progress",
        ),
        sa.Column("producer_name", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column("producer_email", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column("discussion_url", sqlmodel.sql.sqltypes.AutoString(length=512), nullable=True),
        sa.Column("vcs_url", sqlmodel.sql.sqltypes.AutoString(length=512), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.Column("started_at", sa.DateTime(), nullable=True),
        sa.Column("ended_at", sa.DateTime(), nullable=True),
        sa.Column("manager_user_id", sa.Integer(), nullable=True),
        sa.Column("reviewer_user_id", sa.Integer(), nullable=True),
        sa.Column("last_commit_at", sa.DateTime(), nullable=True),
        sa.Column("last_discussion_at", sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(["ebook_id"], ["ebooks.id"]),
        sa.ForeignKeyConstraint(["manager_user_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["reviewer_user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_projects_ebook_id", "projects", ["ebook_id"])
    op.create_index("ix_projects_status", "projects", ["status"])
    op.create_index("ix_projects_manager_user_id", "projects", ["manager_user_id"])
    op.create_index("ix_projects_reviewer_user_id", "projects", ["reviewer_user_id"])

    # At most one in-progress or stalled project per ebook
    op.create_index(
        "ux_projects_active_ebook_id",
        "projects",
        ["ebook_id"],
        unique=True,
        postgresql_where=sa.text(ACTIVE_STATUS_SQL),
        sqlite_where=sa.text(ACTIVE_STATUS_SQL),
    )


def downgrade() -> None:
    op.drop_index("ux_projects_active_ebook_id", table_name="projects")
    op.drop_index("ix_projects_reviewer_user_id", table_name="projects")
    op.drop_index("ix_projects_manager_user_id", table_name="projects")
    op.drop_index("ix_projects_status", table_name="projects")
    op.drop_index("ix_projects_ebook_id", table_name="projects")
    op.drop_table("projects")
    op.drop_table("ebook_placeholders")
    op.drop_index("ix_ebooks_url_name", table_name="ebooks")
    op.drop_table("ebooks")
    op.drop_index("ix_artist_alternate_names_url_name", table_name="artist_alternate_names")
    op.drop_index("ix_artist_alternate_names_artist_id", table_name="artist_alternate_names")
    op.drop_table("artist_alternate_names")
    op.drop_index("ix_artists_url_name", table_name="artists")
    op.drop_table("artists")
    op.drop_index("ix_sessions_user_id", table_name="sessions")
    op.drop_table("sessions")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_index("ix_users_uuid", table_name="users")
    op.drop_table("users")
