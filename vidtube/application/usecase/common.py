"""Response models shared by the read use cases.

API payloads use camelCase keys. Models accept snake_case field names too,
so use cases build them with plain keyword arguments.
"""

from datetime import datetime
from typing import Generic, Optional, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from vidtube.config import PaginationSettings
from vidtube.domain.model import (
    ChannelView,
    CommentView,
    OwnerProfile,
    Page,
    PostView,
    VideoView,
)
from vidtube.domain.value import PageRequest, UserId


class APIModel(BaseModel):
    """Base for response models serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PageQuery(BaseModel):
    """Page window requested by a client."""

    page: int = Field(default=1, ge=1)
    # None means the configured default page size
    limit: Optional[int] = Field(default=None, ge=1)

    def to_page_request(self, settings: PaginationSettings) -> PageRequest:
        """Apply the configured default and clamp to the configured maximum."""
        limit = self.limit if self.limit is not None else settings.default_limit
        return PageRequest.clamped(self.page, limit, settings.max_limit)


class OwnerItem(APIModel):
    """Owner profile joined onto content."""

    id: str
    username: str
    display_name: str
    avatar_url: Optional[str] = None

    @classmethod
    def from_profile(cls, profile: Optional[OwnerProfile]) -> Optional["OwnerItem"]:
        if profile is None:
            return None
        return cls(
            id=str(profile.user_id),
            username=profile.username.root,
            display_name=profile.display_name,
            avatar_url=profile.avatar_url,
        )


class VideoItem(APIModel):
    """Video in a response."""

    id: str
    title: str
    description: str
    video_url: str
    thumbnail_url: Optional[str]
    duration: float
    views: int
    is_published: bool
    created_at: datetime
    owner: Optional[OwnerItem]
    like_count: int
    is_liked: bool

    @classmethod
    def from_view(cls, view: VideoView) -> "VideoItem":
        return cls(
            id=str(view.id),
            title=view.title,
            description=view.description,
            video_url=view.video_url,
            thumbnail_url=view.thumbnail_url,
            duration=view.duration,
            views=view.views,
            is_published=view.is_published,
            created_at=view.created_at,
            owner=OwnerItem.from_profile(view.owner),
            like_count=view.reaction_count,
            is_liked=view.viewer_has_reacted,
        )


class CommentItem(APIModel):
    """Comment in a response."""

    id: str
    video_id: str
    content: str
    created_at: datetime
    updated_at: datetime
    owner: Optional[OwnerItem]
    like_count: int
    is_liked: bool

    @classmethod
    def from_view(cls, view: CommentView) -> "CommentItem":
        return cls(
            id=str(view.id),
            video_id=str(view.video_id),
            content=view.content,
            created_at=view.created_at,
            updated_at=view.updated_at,
            owner=OwnerItem.from_profile(view.owner),
            like_count=view.reaction_count,
            is_liked=view.viewer_has_reacted,
        )


class PostItem(APIModel):
    """Post in a response."""

    id: str
    content: str
    created_at: datetime
    updated_at: datetime
    owner: Optional[OwnerItem]
    like_count: int
    is_liked: bool

    @classmethod
    def from_view(cls, view: PostView) -> "PostItem":
        return cls(
            id=str(view.id),
            content=view.content,
            created_at=view.created_at,
            updated_at=view.updated_at,
            owner=OwnerItem.from_profile(view.owner),
            like_count=view.reaction_count,
            is_liked=view.viewer_has_reacted,
        )


class ChannelItem(APIModel):
    """Channel in a response."""

    id: str
    username: str
    display_name: str
    avatar_url: Optional[str] = None
    subscriber_count: int
    is_subscribed: bool

    @classmethod
    def from_view(cls, view: ChannelView) -> "ChannelItem":
        return cls(
            id=str(view.profile.user_id),
            username=view.profile.username.root,
            display_name=view.profile.display_name,
            avatar_url=view.profile.avatar_url,
            subscriber_count=view.subscriber_count,
            is_subscribed=view.viewer_is_subscribed,
        )


T = TypeVar("T")


class PageResponse(APIModel, Generic[T]):
    """Paginated response envelope."""

    docs: list[T]
    total_docs: int
    limit: int
    total_pages: int
    current_page: int
    has_next_page: bool
    has_prev_page: bool
    next_page: Optional[int] = None
    prev_page: Optional[int] = None

    @classmethod
    def from_page(cls, page: Page, docs: list[T], **extra):
        """Wrap the converted ``docs`` of ``page`` in the envelope."""
        return cls(
            docs=docs,
            total_docs=page.total_items,
            limit=page.page_size,
            total_pages=page.total_pages,
            current_page=page.page,
            has_next_page=page.has_next,
            has_prev_page=page.has_prev,
            next_page=page.page + 1 if page.has_next else None,
            prev_page=page.page - 1 if page.has_prev else None,
            **extra,
        )


def parse_user_id(value: Optional[str]) -> Optional[UserId]:
    """Convert an optional user ID string to a UserId."""
    return UserId(UUID(value)) if value else None
