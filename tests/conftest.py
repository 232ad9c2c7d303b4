"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from typing import Optional
from uuid import uuid4

from vidtube.domain.model import Comment, Post, User, Video
from vidtube.domain.value import CommentId, PostId, UserId, Username, VideoId

# Fixed reference time so ordering assertions do not depend on the clock
BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


def make_user(username: str = "alice", **overrides) -> User:
    """Build a user with a fresh ID."""
    fields = {
        "id": UserId(uuid4()),
        "username": Username(username),
        "display_name": username.title(),
        "created_at": BASE_TIME,
    }
    fields.update(overrides)
    return User(**fields)


def make_video(
    owner_id: UserId,
    title: str = "Test Video",
    minutes_ago: int = 0,
    created_at: Optional[datetime] = None,
    **overrides,
) -> Video:
    """Build a video owned by ``owner_id``.

    ``minutes_ago`` shifts ``created_at`` back from BASE_TIME, so a larger
    value means an older video.
    """
    fields = {
        "id": VideoId(uuid4()),
        "owner_id": owner_id,
        "title": title,
        "video_url": "https://cdn.example.com/videos/test.mp4",
        "duration": 60.0,
        "created_at": created_at or BASE_TIME - timedelta(minutes=minutes_ago),
        "updated_at": created_at or BASE_TIME - timedelta(minutes=minutes_ago),
    }
    fields.update(overrides)
    return Video(**fields)


def make_comment(
    video_id: VideoId, owner_id: UserId, content: str = "Nice video", minutes_ago: int = 0
) -> Comment:
    """Build a comment on ``video_id``."""
    created_at = BASE_TIME - timedelta(minutes=minutes_ago)
    return Comment(
        id=CommentId(uuid4()),
        video_id=video_id,
        owner_id=owner_id,
        content=content,
        created_at=created_at,
        updated_at=created_at,
    )


def make_post(owner_id: UserId, content: str = "Hello", minutes_ago: int = 0) -> Post:
    """Build a post by ``owner_id``."""
    created_at = BASE_TIME - timedelta(minutes=minutes_ago)
    return Post(
        id=PostId(uuid4()),
        owner_id=owner_id,
        content=content,
        created_at=created_at,
        updated_at=created_at,
    )
