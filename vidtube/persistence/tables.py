"""SQLAlchemy table definitions for VidTube.

These tables match the schema defined in Alembic migrations. Comments and
edges reference their parents by ID only; there are no foreign keys from
them, so dependent rows are removed by the cascade coordinator.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    Float,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (a user is also a channel)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("username", String(50), nullable=False, unique=True),
    Column("display_name", String(255), nullable=False),
    Column("avatar_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# VIDEOS TABLE
# ============================================================================
videos_table = Table(
    "videos",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("owner_id", UUID(as_uuid=True), nullable=False),
    Column("title", String(200), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("video_url", Text, nullable=False),
    Column("thumbnail_url", Text, nullable=True),
    Column("duration", Float, nullable=False, server_default="0"),
    Column("views", BigInteger, nullable=False, server_default="0"),
    Column("is_published", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("views >= 0", name="ck_videos_views_non_negative"),
)

Index("idx_videos_owner_id", videos_table.c.owner_id)
Index(
    "idx_videos_published_created_at",
    videos_table.c.is_published,
    videos_table.c.created_at.desc(),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("video_id", UUID(as_uuid=True), nullable=False),
    Column("owner_id", UUID(as_uuid=True), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_comments_video_created_at",
    comments_table.c.video_id,
    comments_table.c.created_at.desc(),
)

# ============================================================================
# POSTS TABLE (short text posts)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("owner_id", UUID(as_uuid=True), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_posts_owner_created_at", posts_table.c.owner_id, posts_table.c.created_at.desc()
)

# ============================================================================
# REACTIONS TABLE (likes on videos, comments and posts)
# ============================================================================
reactions_table = Table(
    "reactions",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("actor_id", UUID(as_uuid=True), nullable=False),
    Column("target_kind", String(20), nullable=False),  # 'video', 'comment', 'post'
    Column("target_id", UUID(as_uuid=True), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "target_kind IN ('video', 'comment', 'post')",
        name="ck_reactions_target_kind",
    ),
    # One reaction per actor per target
    UniqueConstraint(
        "actor_id", "target_kind", "target_id", name="uq_reaction_actor_target"
    ),
)

Index(
    "idx_reactions_target", reactions_table.c.target_kind, reactions_table.c.target_id
)
Index(
    "idx_reactions_actor_created_at",
    reactions_table.c.actor_id,
    reactions_table.c.target_kind,
    reactions_table.c.created_at.desc(),
)

# ============================================================================
# SUBSCRIPTIONS TABLE
# ============================================================================
subscriptions_table = Table(
    "subscriptions",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("subscriber_id", UUID(as_uuid=True), nullable=False),
    Column("channel_id", UUID(as_uuid=True), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # One subscription per subscriber per channel
    UniqueConstraint(
        "subscriber_id", "channel_id", name="uq_subscription_subscriber_channel"
    ),
)

Index(
    "idx_subscriptions_channel_created_at",
    subscriptions_table.c.channel_id,
    subscriptions_table.c.created_at.desc(),
)
Index(
    "idx_subscriptions_subscriber_created_at",
    subscriptions_table.c.subscriber_id,
    subscriptions_table.c.created_at.desc(),
)
