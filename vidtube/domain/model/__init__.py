"""Domain model entities for VidTube."""

from vidtube.domain.model.comment import Comment
from vidtube.domain.model.post import Post
from vidtube.domain.model.reaction import Reaction
from vidtube.domain.model.subscription import Subscription
from vidtube.domain.model.toggle import CascadeReport, ToggleResult
from vidtube.domain.model.user import User
from vidtube.domain.model.video import Video
from vidtube.domain.model.view import (
    ChannelProfile,
    ChannelStats,
    ChannelView,
    CommentView,
    OwnerProfile,
    Page,
    PostView,
    VideoView,
)

__all__ = [
    "User",
    "Video",
    "Comment",
    "Post",
    "Reaction",
    "Subscription",
    "ToggleResult",
    "CascadeReport",
    "OwnerProfile",
    "VideoView",
    "CommentView",
    "PostView",
    "ChannelView",
    "ChannelProfile",
    "ChannelStats",
    "Page",
]
