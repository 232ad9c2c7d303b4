"""Application layer DI providers."""

from dishka import Scope, provide

from vidtube.application.usecase.channel import (
    GetChannelProfileUseCase,
    GetChannelStatsUseCase,
)
from vidtube.application.usecase.comment import (
    DeleteCommentUseCase,
    ListVideoCommentsUseCase,
)
from vidtube.application.usecase.post import DeletePostUseCase, ListUserPostsUseCase
from vidtube.application.usecase.reaction import ToggleReactionUseCase
from vidtube.application.usecase.subscription import (
    ListChannelSubscribersUseCase,
    ListSubscribedChannelsUseCase,
    ToggleSubscriptionUseCase,
)
from vidtube.application.usecase.video import (
    DeleteVideoUseCase,
    GetVideoUseCase,
    ListLikedVideosUseCase,
    ListVideosUseCase,
)
from vidtube.config import PaginationSettings
from vidtube.domain.service import (
    AggregationService,
    CascadeService,
    CommentService,
    PostService,
    ReactionService,
    SubscriptionService,
    UserService,
    VideoService,
)
from vidtube.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Toggle use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_reaction_use_case(
        self, reaction_service: ReactionService
    ) -> ToggleReactionUseCase:
        """Provide toggle reaction use case."""
        return ToggleReactionUseCase(reaction_service=reaction_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_subscription_use_case(
        self, subscription_service: SubscriptionService
    ) -> ToggleSubscriptionUseCase:
        """Provide toggle subscription use case."""
        return ToggleSubscriptionUseCase(subscription_service=subscription_service)

    # Delete use cases
    @provide(scope=Scope.REQUEST)
    def get_delete_video_use_case(
        self, video_service: VideoService, cascade_service: CascadeService
    ) -> DeleteVideoUseCase:
        """Provide delete video use case."""
        return DeleteVideoUseCase(
            video_service=video_service, cascade_service=cascade_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService, cascade_service: CascadeService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, cascade_service=cascade_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(
        self, post_service: PostService, cascade_service: CascadeService
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            post_service=post_service, cascade_service=cascade_service
        )

    # Read use cases
    @provide(scope=Scope.REQUEST)
    def get_list_videos_use_case(
        self,
        aggregation_service: AggregationService,
        pagination_settings: PaginationSettings,
    ) -> ListVideosUseCase:
        """Provide list videos use case."""
        return ListVideosUseCase(
            aggregation_service=aggregation_service,
            pagination_settings=pagination_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_video_use_case(
        self, aggregation_service: AggregationService
    ) -> GetVideoUseCase:
        """Provide get video use case."""
        return GetVideoUseCase(aggregation_service=aggregation_service)

    @provide(scope=Scope.REQUEST)
    def get_list_liked_videos_use_case(
        self,
        aggregation_service: AggregationService,
        pagination_settings: PaginationSettings,
    ) -> ListLikedVideosUseCase:
        """Provide list liked videos use case."""
        return ListLikedVideosUseCase(
            aggregation_service=aggregation_service,
            pagination_settings=pagination_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_video_comments_use_case(
        self,
        aggregation_service: AggregationService,
        pagination_settings: PaginationSettings,
    ) -> ListVideoCommentsUseCase:
        """Provide list video comments use case."""
        return ListVideoCommentsUseCase(
            aggregation_service=aggregation_service,
            pagination_settings=pagination_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_user_posts_use_case(
        self,
        aggregation_service: AggregationService,
        user_service: UserService,
        pagination_settings: PaginationSettings,
    ) -> ListUserPostsUseCase:
        """Provide list user posts use case."""
        return ListUserPostsUseCase(
            aggregation_service=aggregation_service,
            user_service=user_service,
            pagination_settings=pagination_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_subscribed_channels_use_case(
        self,
        aggregation_service: AggregationService,
        pagination_settings: PaginationSettings,
    ) -> ListSubscribedChannelsUseCase:
        """Provide list subscribed channels use case."""
        return ListSubscribedChannelsUseCase(
            aggregation_service=aggregation_service,
            pagination_settings=pagination_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_channel_subscribers_use_case(
        self,
        aggregation_service: AggregationService,
        pagination_settings: PaginationSettings,
    ) -> ListChannelSubscribersUseCase:
        """Provide list channel subscribers use case."""
        return ListChannelSubscribersUseCase(
            aggregation_service=aggregation_service,
            pagination_settings=pagination_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_channel_profile_use_case(
        self, aggregation_service: AggregationService
    ) -> GetChannelProfileUseCase:
        """Provide get channel profile use case."""
        return GetChannelProfileUseCase(aggregation_service=aggregation_service)

    @provide(scope=Scope.REQUEST)
    def get_get_channel_stats_use_case(
        self, aggregation_service: AggregationService
    ) -> GetChannelStatsUseCase:
        """Provide get channel stats use case."""
        return GetChannelStatsUseCase(aggregation_service=aggregation_service)
