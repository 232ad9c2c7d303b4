"""Read-time aggregation engine.

Every listing follows the same pipeline: fetch the ordered base slice, join
owner profiles in one batch, count reactions in one batch, resolve the
viewer's flags in one batch, then project into views. Totals come from a
count over the unsliced set so that page metadata does not depend on what
the slice happened to contain.
"""

from typing import Optional, Sequence
from uuid import UUID

import logfire

from vidtube.domain.error import NotAuthorizedError
from vidtube.domain.model import (
    ChannelProfile,
    ChannelStats,
    ChannelView,
    Comment,
    CommentView,
    OwnerProfile,
    Page,
    Post,
    PostView,
    Video,
    VideoView,
)
from vidtube.domain.model.view import owner_profile
from vidtube.domain.repository import (
    CommentRepository,
    PostRepository,
    ReactionRepository,
    SubscriptionRepository,
    VideoRepository,
)
from vidtube.domain.value import (
    PageRequest,
    ReactionTargetKind,
    SortDirection,
    UserId,
    VideoId,
    VideoSortField,
)

from .base import Service
from .user_service import UserService
from .video_service import VideoService


class AggregationService(Service):
    """Builds enriched, paginated read views over entities and edges."""

    def __init__(
        self,
        video_repository: VideoRepository,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        reaction_repository: ReactionRepository,
        subscription_repository: SubscriptionRepository,
        user_service: UserService,
        video_service: VideoService,
    ) -> None:
        """Initialize aggregation service.

        Args:
            video_repository: Video repository
            comment_repository: Comment repository
            post_repository: Post repository
            reaction_repository: Reaction edge store
            subscription_repository: Subscription edge store
            user_service: User domain service
            video_service: Video domain service
        """
        self.video_repository = video_repository
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.reaction_repository = reaction_repository
        self.subscription_repository = subscription_repository
        self.user_service = user_service
        self.video_service = video_service

    async def list_videos(
        self,
        request: PageRequest,
        viewer_id: Optional[UserId] = None,
        owner_id: Optional[UserId] = None,
        sort_field: VideoSortField = VideoSortField.CREATED_AT,
        sort_direction: SortDirection = SortDirection.DESC,
    ) -> Page[VideoView]:
        """List videos, optionally for one owner.

        Unpublished videos are only listed when the viewer asks for their
        own channel. An unknown owner yields an empty page.

        Args:
            request: Page window
            viewer_id: Viewer for personalization (None when anonymous)
            owner_id: Only list this user's videos
            sort_field: Field to sort by
            sort_direction: Sort direction

        Returns:
            Page of video views
        """
        with logfire.span(
            "aggregation.list_videos",
            page=request.page,
            limit=request.limit,
            owner_id=str(owner_id) if owner_id else None,
        ):
            published_only = owner_id is None or owner_id != viewer_id

            total = await self.video_repository.count(
                owner_id=owner_id, published_only=published_only
            )
            videos = await self.video_repository.find_all(
                owner_id=owner_id,
                published_only=published_only,
                sort_field=sort_field,
                sort_direction=sort_direction,
                limit=request.limit,
                offset=request.offset,
            )
            items = await self._video_views(videos, viewer_id)
            return Page[VideoView].build(items, request, total)

    async def get_video(
        self, video_id: VideoId, viewer_id: Optional[UserId] = None
    ) -> VideoView:
        """Get one video with its like count and the viewer's flag.

        Raises:
            NotFoundError: If the video does not exist
            NotAuthorizedError: If the video is unpublished and the viewer
                is not its owner
        """
        with logfire.span("aggregation.get_video", video_id=str(video_id)):
            video = await self.video_service.get_by_id(video_id)
            if not video.is_published and video.owner_id != viewer_id:
                raise NotAuthorizedError(
                    "video", str(video_id), str(viewer_id), "view"
                )
            [view] = await self._video_views([video], viewer_id)
            return view

    async def list_video_comments(
        self,
        video_id: VideoId,
        request: PageRequest,
        viewer_id: Optional[UserId] = None,
    ) -> Page[CommentView]:
        """List a video's comments, newest first.

        Raises:
            NotFoundError: If the video does not exist
        """
        with logfire.span(
            "aggregation.list_video_comments",
            video_id=str(video_id),
            page=request.page,
            limit=request.limit,
        ):
            await self.video_service.get_by_id(video_id)

            total = await self.comment_repository.count_by_video(video_id)
            comments = await self.comment_repository.find_by_video(
                video_id, limit=request.limit, offset=request.offset
            )
            items = await self._comment_views(comments, viewer_id)
            return Page[CommentView].build(items, request, total)

    async def list_user_posts(
        self,
        user_id: UserId,
        request: PageRequest,
        viewer_id: Optional[UserId] = None,
    ) -> Page[PostView]:
        """List a user's posts, newest first.

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span(
            "aggregation.list_user_posts",
            user_id=str(user_id),
            page=request.page,
            limit=request.limit,
        ):
            await self.user_service.get_by_id(user_id)

            total = await self.post_repository.count_by_owner(user_id)
            posts = await self.post_repository.find_by_owner(
                user_id, limit=request.limit, offset=request.offset
            )
            items = await self._post_views(posts, viewer_id)
            return Page[PostView].build(items, request, total)

    async def list_liked_videos(
        self, viewer_id: UserId, request: PageRequest
    ) -> Page[VideoView]:
        """List the videos a viewer liked, most recently liked first.

        The base set is the viewer's reaction edges. Edges whose video is
        gone, or has been unpublished by someone else, are skipped rather
        than failing the page. Page totals count edges, so such a page can
        hold fewer items than its size.

        Raises:
            NotFoundError: If the viewer does not exist
        """
        with logfire.span(
            "aggregation.list_liked_videos",
            viewer_id=str(viewer_id),
            page=request.page,
            limit=request.limit,
        ):
            await self.user_service.get_by_id(viewer_id)

            total = await self.reaction_repository.count_by_actor(
                viewer_id, ReactionTargetKind.VIDEO
            )
            reactions = await self.reaction_repository.find_by_actor(
                viewer_id,
                ReactionTargetKind.VIDEO,
                limit=request.limit,
                offset=request.offset,
            )
            video_ids = [VideoId(r.target_id) for r in reactions]
            found = await self.video_repository.find_by_ids(video_ids)

            videos = []
            for video_id in video_ids:
                video = found.get(video_id)
                if video is None:
                    logfire.warn(
                        "Skipping dangling reaction",
                        viewer_id=str(viewer_id),
                        video_id=str(video_id),
                    )
                    continue
                if not video.is_published and video.owner_id != viewer_id:
                    continue
                videos.append(video)

            items = await self._video_views(videos, viewer_id)
            return Page[VideoView].build(items, request, total)

    async def list_subscribed_channels(
        self,
        subscriber_id: UserId,
        request: PageRequest,
        viewer_id: Optional[UserId] = None,
    ) -> Page[ChannelView]:
        """List the channels a user subscribes to, most recent first.

        Raises:
            NotFoundError: If the subscriber does not exist
        """
        with logfire.span(
            "aggregation.list_subscribed_channels",
            subscriber_id=str(subscriber_id),
            page=request.page,
            limit=request.limit,
        ):
            await self.user_service.get_by_id(subscriber_id)

            total = await self.subscription_repository.count_by_subscriber(
                subscriber_id
            )
            subscriptions = await self.subscription_repository.find_by_subscriber(
                subscriber_id, limit=request.limit, offset=request.offset
            )
            items = await self._channel_views(
                [s.channel_id for s in subscriptions], viewer_id
            )
            return Page[ChannelView].build(items, request, total)

    async def list_channel_subscribers(
        self,
        channel_id: UserId,
        request: PageRequest,
        viewer_id: Optional[UserId] = None,
    ) -> Page[ChannelView]:
        """List a channel's subscribers, most recent first.

        ``total_items`` of the page is the channel's subscriber count.

        Raises:
            NotFoundError: If the channel does not exist
        """
        with logfire.span(
            "aggregation.list_channel_subscribers",
            channel_id=str(channel_id),
            page=request.page,
            limit=request.limit,
        ):
            await self.user_service.get_by_id(channel_id)

            total = await self.subscription_repository.count_by_channel(channel_id)
            subscriptions = await self.subscription_repository.find_by_channel(
                channel_id, limit=request.limit, offset=request.offset
            )
            items = await self._channel_views(
                [s.subscriber_id for s in subscriptions], viewer_id
            )
            return Page[ChannelView].build(items, request, total)

    async def get_channel_profile(
        self, channel_id: UserId, viewer_id: Optional[UserId] = None
    ) -> ChannelProfile:
        """Get a channel's header: profile, counts and the viewer's flag.

        Raises:
            NotFoundError: If the channel does not exist
        """
        with logfire.span("aggregation.get_channel_profile", channel_id=str(channel_id)):
            user = await self.user_service.get_by_id(channel_id)

            subscriber_count = await self.subscription_repository.count_by_channel(
                channel_id
            )
            subscribed_to_count = (
                await self.subscription_repository.count_by_subscriber(channel_id)
            )
            viewer_is_subscribed = False
            if viewer_id is not None:
                subscribed = (
                    await self.subscription_repository.find_subscribed_channel_ids(
                        viewer_id, [channel_id]
                    )
                )
                viewer_is_subscribed = channel_id in subscribed

            return ChannelProfile(
                profile=owner_profile(user),
                subscriber_count=subscriber_count,
                subscribed_to_count=subscribed_to_count,
                viewer_is_subscribed=viewer_is_subscribed,
            )

    async def get_channel_stats(
        self, channel_id: UserId, actor_id: UserId
    ) -> ChannelStats:
        """Get dashboard totals for a channel.

        Only the channel owner may read them.

        Raises:
            NotFoundError: If the channel does not exist
            NotAuthorizedError: If the actor is not the channel owner
        """
        with logfire.span("aggregation.get_channel_stats", channel_id=str(channel_id)):
            await self.user_service.get_by_id(channel_id)
            if actor_id != channel_id:
                raise NotAuthorizedError(
                    "channel", str(channel_id), str(actor_id), "view stats of"
                )

            video_ids = await self.video_repository.find_ids_by_owner(channel_id)
            like_counts = await self._count_reactions(
                ReactionTargetKind.VIDEO, video_ids
            )

            return ChannelStats(
                channel_id=channel_id,
                total_subscribers=await self.subscription_repository.count_by_channel(
                    channel_id
                ),
                total_videos=len(video_ids),
                total_views=await self.video_repository.sum_views_by_owner(channel_id),
                total_likes=sum(like_counts.values()),
            )

    async def _count_reactions(
        self, kind: ReactionTargetKind, ids: Sequence[UUID]
    ) -> dict[UUID, int]:
        if not ids:
            return {}
        return await self.reaction_repository.count_by_targets(kind, list(ids))

    async def _viewer_reacted(
        self, viewer_id: Optional[UserId], kind: ReactionTargetKind, ids: Sequence[UUID]
    ) -> set[UUID]:
        if viewer_id is None or not ids:
            return set()
        return await self.reaction_repository.find_reacted_target_ids(
            viewer_id, kind, list(ids)
        )

    async def _owners(self, owner_ids: Sequence[UserId]) -> dict[UserId, OwnerProfile]:
        return await self.user_service.get_profiles(owner_ids)

    async def _video_views(
        self, videos: Sequence[Video], viewer_id: Optional[UserId]
    ) -> list[VideoView]:
        ids = [v.id for v in videos]
        owners = await self._owners([v.owner_id for v in videos])
        counts = await self._count_reactions(ReactionTargetKind.VIDEO, ids)
        reacted = await self._viewer_reacted(viewer_id, ReactionTargetKind.VIDEO, ids)

        return [
            VideoView(
                id=v.id,
                title=v.title,
                description=v.description,
                video_url=v.video_url,
                thumbnail_url=v.thumbnail_url,
                duration=v.duration,
                views=v.views,
                is_published=v.is_published,
                created_at=v.created_at,
                owner=owners.get(v.owner_id),
                reaction_count=counts.get(v.id, 0),
                viewer_has_reacted=v.id in reacted,
            )
            for v in videos
        ]

    async def _comment_views(
        self, comments: Sequence[Comment], viewer_id: Optional[UserId]
    ) -> list[CommentView]:
        ids = [c.id for c in comments]
        owners = await self._owners([c.owner_id for c in comments])
        counts = await self._count_reactions(ReactionTargetKind.COMMENT, ids)
        reacted = await self._viewer_reacted(viewer_id, ReactionTargetKind.COMMENT, ids)

        return [
            CommentView(
                id=c.id,
                video_id=c.video_id,
                content=c.content,
                created_at=c.created_at,
                updated_at=c.updated_at,
                owner=owners.get(c.owner_id),
                reaction_count=counts.get(c.id, 0),
                viewer_has_reacted=c.id in reacted,
            )
            for c in comments
        ]

    async def _post_views(
        self, posts: Sequence[Post], viewer_id: Optional[UserId]
    ) -> list[PostView]:
        ids = [p.id for p in posts]
        owners = await self._owners([p.owner_id for p in posts])
        counts = await self._count_reactions(ReactionTargetKind.POST, ids)
        reacted = await self._viewer_reacted(viewer_id, ReactionTargetKind.POST, ids)

        return [
            PostView(
                id=p.id,
                content=p.content,
                created_at=p.created_at,
                updated_at=p.updated_at,
                owner=owners.get(p.owner_id),
                reaction_count=counts.get(p.id, 0),
                viewer_has_reacted=p.id in reacted,
            )
            for p in posts
        ]

    async def _channel_views(
        self, channel_ids: Sequence[UserId], viewer_id: Optional[UserId]
    ) -> list[ChannelView]:
        """Project channels in the given order, skipping deleted users."""
        if not channel_ids:
            return []

        profiles = await self._owners(channel_ids)
        counts = await self.subscription_repository.count_by_channels(
            list(channel_ids)
        )
        subscribed: set[UserId] = set()
        if viewer_id is not None:
            subscribed = await self.subscription_repository.find_subscribed_channel_ids(
                viewer_id, list(channel_ids)
            )

        views = []
        for channel_id in channel_ids:
            profile = profiles.get(channel_id)
            if profile is None:
                logfire.warn("Skipping dangling subscription", channel_id=str(channel_id))
                continue
            views.append(
                ChannelView(
                    profile=profile,
                    subscriber_count=counts.get(channel_id, 0),
                    viewer_is_subscribed=channel_id in subscribed,
                )
            )
        return views
