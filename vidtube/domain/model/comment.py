"""Comment entity."""

from datetime import datetime

from pydantic import Field

from vidtube.domain.model.common import DomainModel
from vidtube.domain.value import CommentId, UserId, VideoId


class Comment(DomainModel):
    """Comment on a video.

    Comments are flat (no replies) and are removed together with their video.
    """

    id: CommentId
    video_id: VideoId
    owner_id: UserId
    content: str = Field(min_length=1, max_length=5000)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
