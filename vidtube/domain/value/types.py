"""Domain value objects for VidTube.

Value objects are immutable and defined by their values, not identity.
"""

import math
import re
from enum import Enum
from uuid import UUID

from pydantic import Field, field_validator

from vidtube.domain.value.common import RootValueObject, ValueObject
from vidtube.domain.value.identifiers import UserId


class ReactionTargetKind(str, Enum):
    """Type of entity a reaction points at."""

    VIDEO = "video"
    COMMENT = "comment"
    POST = "post"


class ToggleState(str, Enum):
    """Outcome of a toggle: the edge is now present or absent."""

    ADDED = "added"
    REMOVED = "removed"


class StoreConsistency(str, Enum):
    """What a store does with a request's earlier writes when it fails."""

    # Every write in the request is rolled back together
    TRANSACTIONAL = "transactional"
    # Writes that already happened stay
    BEST_EFFORT = "best_effort"


class SortDirection(str, Enum):
    """Sort direction for listings."""

    ASC = "asc"
    DESC = "desc"


class VideoSortField(str, Enum):
    """Fields a video listing may be sorted by.

    Values match the ``sortBy`` query parameter the frontend sends.
    """

    CREATED_AT = "createdAt"
    TITLE = "title"
    VIEWS = "views"
    DURATION = "duration"


class Username(RootValueObject[str]):
    """Public username of a user (and their channel).

    Lowercase letters, digits, dots and underscores, 1-50 characters.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[a-z0-9_.]{1,50}$", v):
            raise ValueError(
                "Username must be 1-50 characters: lowercase letters, digits, '.' or '_'"
            )
        return v


class ReactionKey(ValueObject):
    """Natural key of a reaction edge: one edge per actor and target."""

    actor_id: UserId
    target_kind: ReactionTargetKind
    target_id: UUID

    def __str__(self) -> str:
        return f"{self.actor_id}->{self.target_kind.value}:{self.target_id}"


class SubscriptionKey(ValueObject):
    """Natural key of a subscription edge: one edge per subscriber and channel."""

    subscriber_id: UserId
    channel_id: UserId

    def __str__(self) -> str:
        return f"{self.subscriber_id}->channel:{self.channel_id}"


class PageRequest(ValueObject):
    """A 1-based page window over a listing."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)

    @classmethod
    def clamped(cls, page: int, limit: int, max_limit: int) -> "PageRequest":
        """Build a page request with ``limit`` clamped to ``max_limit``."""
        return cls(page=page, limit=min(limit, max_limit))

    @property
    def offset(self) -> int:
        """Number of items before this page."""
        return (self.page - 1) * self.limit

    def total_pages(self, total_items: int) -> int:
        """Number of pages needed for ``total_items``."""
        return math.ceil(total_items / self.limit) if total_items else 0
