"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from vidtube.domain.model import Comment, Post, Reaction, Subscription, User, Video
from vidtube.domain.value import (
    CommentId,
    PostId,
    ReactionId,
    ReactionTargetKind,
    SubscriptionId,
    UserId,
    Username,
    VideoId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        display_name=row["display_name"],
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_video(row: Dict[str, Any]) -> Video:
    """Convert database row to Video domain model."""
    return Video(
        id=VideoId(_uuid(row["id"])),
        owner_id=UserId(_uuid(row["owner_id"])),
        title=row["title"],
        description=row.get("description") or "",
        video_url=row["video_url"],
        thumbnail_url=row.get("thumbnail_url"),
        duration=row["duration"],
        views=row["views"],
        is_published=row["is_published"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def video_to_dict(video: Video) -> Dict[str, Any]:
    """Convert Video domain model to database dict."""
    return video.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        video_id=VideoId(_uuid(row["video_id"])),
        owner_id=UserId(_uuid(row["owner_id"])),
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(_uuid(row["id"])),
        owner_id=UserId(_uuid(row["owner_id"])),
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_reaction(row: Dict[str, Any]) -> Reaction:
    """Convert database row to Reaction domain model."""
    return Reaction(
        id=ReactionId(_uuid(row["id"])),
        actor_id=UserId(_uuid(row["actor_id"])),
        target_kind=ReactionTargetKind(row["target_kind"]),
        target_id=_uuid(row["target_id"]),
        created_at=row["created_at"],
    )


def reaction_to_dict(reaction: Reaction) -> Dict[str, Any]:
    """Convert Reaction domain model to database dict.

    The target kind is stored as its plain string value.
    """
    data = reaction.model_dump()
    data["target_kind"] = reaction.target_kind.value
    return data


def row_to_subscription(row: Dict[str, Any]) -> Subscription:
    """Convert database row to Subscription domain model."""
    return Subscription(
        id=SubscriptionId(_uuid(row["id"])),
        subscriber_id=UserId(_uuid(row["subscriber_id"])),
        channel_id=UserId(_uuid(row["channel_id"])),
        created_at=row["created_at"],
    )


def subscription_to_dict(subscription: Subscription) -> Dict[str, Any]:
    """Convert Subscription domain model to database dict."""
    return subscription.model_dump()
