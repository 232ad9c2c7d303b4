"""Reaction edge.

A reaction (like) links an actor to exactly one target: a video, a comment
or a post. The target kind is an explicit tag, never inferred.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from vidtube.domain.model.common import DomainModel
from vidtube.domain.value import ReactionId, ReactionKey, ReactionTargetKind, UserId


class Reaction(DomainModel):
    """Reaction edge.

    Business rules:
    - One reaction per actor per target (enforced by the edge store)
    - Removed when the target is deleted (cascade)
    """

    id: ReactionId
    actor_id: UserId
    target_kind: ReactionTargetKind
    target_id: UUID  # VideoId, CommentId or PostId depending on target_kind
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def key(self) -> ReactionKey:
        """Natural key of this edge."""
        return ReactionKey(
            actor_id=self.actor_id,
            target_kind=self.target_kind,
            target_id=self.target_id,
        )
