"""Domain layer DI providers."""

from dishka import Scope, provide

from vidtube.config import AuthSettings
from vidtube.domain.repository import (
    CommentRepository,
    PostRepository,
    ReactionRepository,
    SubscriptionRepository,
    UserRepository,
    VideoRepository,
)
from vidtube.domain.service import (
    AggregationService,
    CascadeService,
    CommentService,
    JWTService,
    PostService,
    ReactionService,
    SubscriptionService,
    UserService,
    VideoService,
)
from vidtube.domain.value import StoreConsistency
from vidtube.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_video_service(self, video_repository: VideoRepository) -> VideoService:
        """Provide video domain service."""
        return VideoService(video_repository=video_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_reaction_service(
        self,
        reaction_repository: ReactionRepository,
        user_service: UserService,
        video_service: VideoService,
        comment_service: CommentService,
        post_service: PostService,
    ) -> ReactionService:
        """Provide reaction domain service."""
        return ReactionService(
            reaction_repository=reaction_repository,
            user_service=user_service,
            video_service=video_service,
            comment_service=comment_service,
            post_service=post_service,
        )

    @provide
    def get_subscription_service(
        self,
        subscription_repository: SubscriptionRepository,
        user_service: UserService,
    ) -> SubscriptionService:
        """Provide subscription domain service."""
        return SubscriptionService(
            subscription_repository=subscription_repository,
            user_service=user_service,
        )

    @provide
    def get_cascade_service(
        self,
        reaction_repository: ReactionRepository,
        comment_repository: CommentRepository,
        video_repository: VideoRepository,
        post_repository: PostRepository,
        consistency: StoreConsistency,
    ) -> CascadeService:
        """Provide cascade coordinator."""
        return CascadeService(
            reaction_repository=reaction_repository,
            comment_repository=comment_repository,
            video_repository=video_repository,
            post_repository=post_repository,
            consistency=consistency,
        )

    @provide
    def get_aggregation_service(
        self,
        video_repository: VideoRepository,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        reaction_repository: ReactionRepository,
        subscription_repository: SubscriptionRepository,
        user_service: UserService,
        video_service: VideoService,
    ) -> AggregationService:
        """Provide aggregation engine."""
        return AggregationService(
            video_repository=video_repository,
            comment_repository=comment_repository,
            post_repository=post_repository,
            reaction_repository=reaction_repository,
            subscription_repository=subscription_repository,
            user_service=user_service,
            video_service=video_service,
        )
