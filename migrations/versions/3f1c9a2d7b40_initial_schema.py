"""initial_schema

Create the VidTube engagement schema:
- Users (a user is also a channel)
- Videos, Comments (flat, per video), Posts (short text posts)
- Reactions (likes on videos, comments and posts; one per actor per target)
- Subscriptions (one per subscriber per channel)

Comments and edges reference their parents by ID only. Dependent rows are
removed by the application after a parent delete.

Revision ID: 3f1c9a2d7b40
Revises:
Create Date: 2026-10-12 09:14:02.512930

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c9a2d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    ]


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=False),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )

    # ========================================================================
    # VIDEOS table
    # ========================================================================
    op.create_table(
        "videos",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("video_url", sa.Text(), nullable=False),
        sa.Column("thumbnail_url", sa.Text(), nullable=True),
        sa.Column("duration", sa.Float(), nullable=False, server_default="0"),
        sa.Column("views", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("is_published", sa.Boolean(), nullable=False, server_default="true"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("views >= 0", name="ck_videos_views_non_negative"),
    )
    op.create_index("idx_videos_owner_id", "videos", ["owner_id"])
    op.create_index(
        "idx_videos_published_created_at",
        "videos",
        ["is_published", sa.text("created_at DESC")],
    )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("video_id", sa.UUID(), nullable=False),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_comments_video_created_at",
        "comments",
        ["video_id", sa.text("created_at DESC")],
    )

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_posts_owner_created_at",
        "posts",
        ["owner_id", sa.text("created_at DESC")],
    )

    # ========================================================================
    # REACTIONS table
    # ========================================================================
    op.create_table(
        "reactions",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("actor_id", sa.UUID(), nullable=False),
        sa.Column("target_kind", sa.String(20), nullable=False),
        sa.Column("target_id", sa.UUID(), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "target_kind IN ('video', 'comment', 'post')",
            name="ck_reactions_target_kind",
        ),
        sa.UniqueConstraint(
            "actor_id", "target_kind", "target_id", name="uq_reaction_actor_target"
        ),
    )
    op.create_index("idx_reactions_target", "reactions", ["target_kind", "target_id"])
    op.create_index(
        "idx_reactions_actor_created_at",
        "reactions",
        ["actor_id", "target_kind", sa.text("created_at DESC")],
    )

    # ========================================================================
    # SUBSCRIPTIONS table
    # ========================================================================
    op.create_table(
        "subscriptions",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("subscriber_id", sa.UUID(), nullable=False),
        sa.Column("channel_id", sa.UUID(), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "subscriber_id", "channel_id", name="uq_subscription_subscriber_channel"
        ),
    )
    op.create_index(
        "idx_subscriptions_channel_created_at",
        "subscriptions",
        ["channel_id", sa.text("created_at DESC")],
    )
    op.create_index(
        "idx_subscriptions_subscriber_created_at",
        "subscriptions",
        ["subscriber_id", sa.text("created_at DESC")],
    )

    # Trigger function to update updated_at timestamp
    op.execute("""
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)

    for table in ("videos", "comments", "posts"):
        op.execute(f"""
            CREATE TRIGGER update_{table}_updated_at
            BEFORE UPDATE ON {table}
            FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
        """)


def downgrade() -> None:
    """Downgrade schema."""
    for table in ("videos", "comments", "posts"):
        op.execute(f"DROP TRIGGER IF EXISTS update_{table}_updated_at ON {table}")

    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")

    op.drop_table("subscriptions")
    op.drop_table("reactions")
    op.drop_table("posts")
    op.drop_table("comments")
    op.drop_table("videos")
    op.drop_table("users")
