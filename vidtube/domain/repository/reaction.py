"""Reaction repository interface."""

from abc import abstractmethod
from typing import Sequence
from uuid import UUID

from vidtube.domain.model.reaction import Reaction
from vidtube.domain.repository.edge import EdgeRepository
from vidtube.domain.value import ReactionKey, ReactionTargetKind, UserId


class ReactionRepository(EdgeRepository[ReactionKey, Reaction]):
    """Repository for reaction edges.

    Every query is scoped by target kind so that ids of different entity
    types never mix.
    """

    @abstractmethod
    async def count_by_target(
        self, target_kind: ReactionTargetKind, target_id: UUID
    ) -> int:
        """Count reactions on one target.

        Args:
            target_kind: Kind of the target
            target_id: ID of the target

        Returns:
            Number of reactions
        """
        pass

    @abstractmethod
    async def count_by_targets(
        self, target_kind: ReactionTargetKind, target_ids: Sequence[UUID]
    ) -> dict[UUID, int]:
        """Count reactions on many targets (batch query).

        Args:
            target_kind: Kind of the targets
            target_ids: IDs of the targets

        Returns:
            Mapping of target ID to count; targets without reactions map to 0
        """
        pass

    @abstractmethod
    async def find_reacted_target_ids(
        self,
        actor_id: UserId,
        target_kind: ReactionTargetKind,
        target_ids: Sequence[UUID],
    ) -> set[UUID]:
        """Find which of the given targets an actor has reacted to (batch query).

        Args:
            actor_id: The actor's user ID
            target_kind: Kind of the targets
            target_ids: IDs to check

        Returns:
            Subset of ``target_ids`` the actor reacted to
        """
        pass

    @abstractmethod
    async def find_by_actor(
        self,
        actor_id: UserId,
        target_kind: ReactionTargetKind,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Reaction]:
        """Find an actor's reactions, most recent first.

        Args:
            actor_id: The actor's user ID
            target_kind: Kind of targets to include
            limit: Maximum number of reactions to return
            offset: Number of reactions to skip

        Returns:
            Reactions ordered by creation time descending, then ID ascending
        """
        pass

    @abstractmethod
    async def count_by_actor(
        self, actor_id: UserId, target_kind: ReactionTargetKind
    ) -> int:
        """Count an actor's reactions on targets of one kind."""
        pass

    @abstractmethod
    async def delete_all_by_target(
        self, target_kind: ReactionTargetKind, target_id: UUID
    ) -> int:
        """Delete every reaction on one target.

        Returns:
            Number of reactions deleted
        """
        pass

    @abstractmethod
    async def delete_all_by_targets(
        self, target_kind: ReactionTargetKind, target_ids: Sequence[UUID]
    ) -> int:
        """Delete every reaction on many targets.

        Returns:
            Number of reactions deleted
        """
        pass

    @abstractmethod
    async def find_target_ids(self, target_kind: ReactionTargetKind) -> set[UUID]:
        """Find the distinct targets of one kind that have reactions.

        Used by the orphan sweep.
        """
        pass
