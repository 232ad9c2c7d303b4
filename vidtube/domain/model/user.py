"""User aggregate root.

A user is also a channel: videos and posts are owned by users, and
subscriptions point at users.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from vidtube.domain.model.common import DomainModel
from vidtube.domain.value import UserId, Username


class User(DomainModel):
    """User aggregate root.

    Account management lives in the auth service; this backend only reads
    the public profile fields.
    """

    id: UserId
    username: Username
    display_name: str = Field(min_length=1, max_length=100)
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
