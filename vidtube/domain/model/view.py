"""Aggregated read views.

Views are computed on every read from entities plus the edge store and are
never persisted. Only the fields declared here leave the aggregation engine.
"""

from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import Field

from vidtube.domain.model.common import DomainModel
from vidtube.domain.model.user import User
from vidtube.domain.value import CommentId, PageRequest, PostId, UserId, Username, VideoId


class OwnerProfile(DomainModel):
    """Public projection of a user, joined onto owned content."""

    user_id: UserId
    username: Username
    display_name: str
    avatar_url: Optional[str] = None


class VideoView(DomainModel):
    """Video with like count and viewer flag."""

    id: VideoId
    title: str
    description: str
    video_url: str
    thumbnail_url: Optional[str]
    duration: float
    views: int
    is_published: bool
    created_at: datetime
    owner: Optional[OwnerProfile]
    reaction_count: int = Field(ge=0)
    viewer_has_reacted: bool = False


class CommentView(DomainModel):
    """Comment with like count and viewer flag."""

    id: CommentId
    video_id: VideoId
    content: str
    created_at: datetime
    updated_at: datetime
    owner: Optional[OwnerProfile]
    reaction_count: int = Field(ge=0)
    viewer_has_reacted: bool = False


class PostView(DomainModel):
    """Post with like count and viewer flag."""

    id: PostId
    content: str
    created_at: datetime
    updated_at: datetime
    owner: Optional[OwnerProfile]
    reaction_count: int = Field(ge=0)
    viewer_has_reacted: bool = False


class ChannelView(DomainModel):
    """Channel with subscriber count and viewer subscription flag."""

    profile: OwnerProfile
    subscriber_count: int = Field(ge=0)
    viewer_is_subscribed: bool = False


class ChannelProfile(DomainModel):
    """Channel page header."""

    profile: OwnerProfile
    subscriber_count: int = Field(ge=0)
    subscribed_to_count: int = Field(ge=0)
    viewer_is_subscribed: bool = False


class ChannelStats(DomainModel):
    """Dashboard totals for a channel owner."""

    channel_id: UserId
    total_subscribers: int = Field(ge=0)
    total_videos: int = Field(ge=0)
    total_views: int = Field(ge=0)
    total_likes: int = Field(ge=0)


T = TypeVar("T")


class Page(DomainModel, Generic[T]):
    """One page of an ordered listing.

    ``total_items`` counts the whole match, not just this page.
    """

    items: list[T]
    page: int
    page_size: int
    total_items: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, items: list[T], request: PageRequest, total_items: int) -> "Page[T]":
        """Assemble a page from a slice and the pre-slice total."""
        total_pages = request.total_pages(total_items)
        return cls(
            items=items,
            page=request.page,
            page_size=request.limit,
            total_items=total_items,
            total_pages=total_pages,
            has_next=request.page < total_pages,
            has_prev=request.page > 1,
        )


def owner_profile(user: User) -> OwnerProfile:
    """Project a user onto its public profile."""
    return OwnerProfile(
        user_id=user.id,
        username=user.username,
        display_name=user.display_name,
        avatar_url=user.avatar_url,
    )
