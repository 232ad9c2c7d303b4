"""Video entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from vidtube.domain.model.common import DomainModel
from vidtube.domain.value import UserId, VideoId


class Video(DomainModel):
    """Video entity.

    Media files live in external storage; only their URLs are kept here.
    Unpublished videos are visible to their owner only.
    """

    id: VideoId
    owner_id: UserId
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(default="", max_length=5000)
    video_url: str
    thumbnail_url: Optional[str] = None
    duration: float = Field(default=0.0, ge=0)  # Seconds
    views: int = Field(default=0, ge=0)
    is_published: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
