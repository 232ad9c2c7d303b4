"""Domain services."""

from .aggregation_service import AggregationService
from .base import Service
from .cascade_service import CascadeService
from .comment_service import CommentService
from .jwt_service import JWTService
from .post_service import PostService
from .reaction_service import ReactionService
from .subscription_service import SubscriptionService
from .toggle import toggle_edge
from .user_service import UserService
from .video_service import VideoService

__all__ = [
    "AggregationService",
    "CascadeService",
    "CommentService",
    "JWTService",
    "PostService",
    "ReactionService",
    "Service",
    "SubscriptionService",
    "UserService",
    "VideoService",
    "toggle_edge",
]
