"""Post entity."""

from datetime import datetime

from pydantic import Field

from vidtube.domain.model.common import DomainModel
from vidtube.domain.value import PostId, UserId


class Post(DomainModel):
    """Short text post published on a user's channel."""

    id: PostId
    owner_id: UserId
    content: str = Field(min_length=1, max_length=1000)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
