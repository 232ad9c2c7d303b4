"""Toggle reaction use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from vidtube.application.usecase.base import BaseUseCase
from vidtube.application.usecase.common import APIModel
from vidtube.domain.error import ValidationError
from vidtube.domain.model import Reaction
from vidtube.domain.service import ReactionService
from vidtube.domain.value import ReactionTargetKind, ToggleState, UserId


class ToggleReactionRequest(BaseModel):
    """Toggle reaction request."""

    actor_id: str  # User ID from authenticated user
    target_kind: str  # Raw path segment, validated by the use case
    target_id: str  # UUID string


class ReactionEdgeItem(APIModel):
    """Reaction edge in a response."""

    id: str
    actor_id: str
    target_kind: ReactionTargetKind
    target_id: str
    created_at: datetime

    @classmethod
    def from_edge(cls, edge: Reaction) -> "ReactionEdgeItem":
        return cls(
            id=str(edge.id),
            actor_id=str(edge.actor_id),
            target_kind=edge.target_kind,
            target_id=str(edge.target_id),
            created_at=edge.created_at,
        )


class ToggleReactionResponse(APIModel):
    """Toggle reaction response.

    ``edge`` is the created or removed edge. It is None when a concurrent
    request removed the edge first.
    """

    state: ToggleState
    edge: Optional[ReactionEdgeItem] = None
    target_kind: ReactionTargetKind
    target_id: str
    is_liked: bool


class ToggleReactionUseCase(BaseUseCase):
    """Use case for liking or unliking a video, comment or post."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize toggle reaction use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: ToggleReactionRequest) -> ToggleReactionResponse:
        """Execute toggle reaction flow.

        Args:
            request: Toggle reaction request

        Returns:
            The new reaction state

        Raises:
            ValidationError: If the target kind is unknown
            NotFoundError: If the actor or the target does not exist
        """
        try:
            target_kind = ReactionTargetKind(request.target_kind)
        except ValueError as e:
            raise ValidationError(
                f"Unknown reaction target kind: {request.target_kind}"
            ) from e

        result = await self.reaction_service.toggle(
            actor_id=UserId(UUID(request.actor_id)),
            target_kind=target_kind,
            target_id=UUID(request.target_id),
        )

        return ToggleReactionResponse(
            state=result.state,
            edge=ReactionEdgeItem.from_edge(result.edge) if result.edge else None,
            target_kind=target_kind,
            target_id=request.target_id,
            is_liked=result.state == ToggleState.ADDED,
        )
