"""create_isupipe_tables

Revision ID: 3f8d2c1a9b7e
Revises:
Create Date: 2026-10-18
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f8d2c1a9b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("display_name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_name"), "users", ["name"], unique=True)

    op.create_table(
        "themes",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("dark_mode", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_themes_user_id"), "themes", ["user_id"], unique=True)

    op.create_table(
        "tags",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    op.create_table(
        "livestreams",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("playlist_url", sa.String(length=255), nullable=False),
        sa.Column("thumbnail_url", sa.String(length=255), nullable=False),
        sa.Column("start_at", sa.BigInteger(), nullable=False),
        sa.Column("end_at", sa.BigInteger(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_livestreams_user_id"), "livestreams", ["user_id"], unique=False)

    op.create_table(
        "livestream_tags",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("livestream_id", sa.Integer(), nullable=False),
        sa.Column("tag_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["livestream_id"], ["livestreams.id"]),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_livestream_tags_livestream_id"), "livestream_tags", ["livestream_id"], unique=False)
    op.create_index(op.f("ix_livestream_tags_tag_id"), "livestream_tags", ["tag_id"], unique=False)

    op.create_table(
        "livestream_viewers_history",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("livestream_id", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
        sa.ForeignKeyConstraint(["livestream_id"], ["livestreams.id"]),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_livestream_viewers_history_livestream_id"),
        "livestream_viewers_history",
        ["livestream_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_livestream_viewers_history_user_id"),
        "livestream_viewers_history",
        ["user_id"],
        unique=False,
    )

    op.create_table(
        "reactions",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("livestream_id", sa.Integer(), nullable=False),
        sa.Column("emoji_name", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
        sa.ForeignKeyConstraint(["livestream_id"], ["livestreams.id"]),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_reactions_user_id"), "reactions", ["user_id"], unique=False)
    op.create_index(op.f("ix_reactions_livestream_id"), "reactions", ["livestream_id"], unique=False)
    op.create_index(op.f("ix_reactions_created_at"), "reactions", ["created_at"], unique=False)

    op.create_table(
        "livecomments",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("livestream_id", sa.Integer(), nullable=False),
        sa.Column("comment", sa.Text(), nullable=False),
        sa.Column("tip", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
        sa.ForeignKeyConstraint(["livestream_id"], ["livestreams.id"]),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_livecomments_user_id"), "livecomments", ["user_id"], unique=False)
    op.create_index(op.f("ix_livecomments_livestream_id"), "livecomments", ["livestream_id"], unique=False)

    op.create_table(
        "livecomment_reports",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("livestream_id", sa.Integer(), nullable=False),
        sa.Column("livecomment_id", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
        sa.ForeignKeyConstraint(["livecomment_id"], ["livecomments.id"]),
        sa.ForeignKeyConstraint(["livestream_id"], ["livestreams.id"]),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_livecomment_reports_livestream_id"),
        "livecomment_reports",
        ["livestream_id"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_livecomment_reports_livestream_id"), table_name="livecomment_reports")
    op.drop_table("livecomment_reports")
    op.drop_index(op.f("ix_livecomments_livestream_id"), table_name="livecomments")
    op.drop_index(op.f("ix_livecomments_user_id"), table_name="livecomments")
    op.drop_table("livecomments")
    op.drop_index(op.f("ix_reactions_created_at"), table_name="reactions")
    op.drop_index(op.f("ix_reactions_livestream_id"), table_name="reactions")
    op.drop_index(op.f("ix_reactions_user_id"), table_name="reactions")
    op.drop_table("reactions")
    op.drop_index(op.f("ix_livestream_viewers_history_user_id"), table_name="livestream_viewers_history")
    op.drop_index(op.f("ix_livestream_viewers_history_livestream_id"), table_name="livestream_viewers_history")
    op.drop_table("livestream_viewers_history")
    op.drop_index(op.f("ix_livestream_tags_tag_id"), table_name="livestream_tags")
    op.drop_index(op.f("ix_livestream_tags_livestream_id"), table_name="livestream_tags")
    op.drop_table("livestream_tags")
    op.drop_index(op.f("ix_livestreams_user_id"), table_name="livestreams")
    op.drop_table("livestreams")
    op.drop_table("tags")
    op.drop_index(op.f("ix_themes_user_id"), table_name="themes")
    op.drop_table("themes")
    op.drop_index(op.f("ix_users_name"), table_name="users")
    op.drop_table("users")
