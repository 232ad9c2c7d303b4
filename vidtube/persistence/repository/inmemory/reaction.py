"""In-memory reaction repository for testing.

Edges are indexed by natural key. No method awaits between reading and
writing the index, so each call is atomic with respect to other tasks on
the event loop.
"""

from typing import Optional, Sequence
from uuid import UUID

from vidtube.domain.error import ConflictError
from vidtube.domain.model.reaction import Reaction
from vidtube.domain.repository.reaction import ReactionRepository
from vidtube.domain.value import ReactionKey, ReactionTargetKind, UserId

from ._ordering import newest_first


class InMemoryReactionRepository(ReactionRepository):
    """In-memory implementation of ReactionRepository for testing."""

    def __init__(self) -> None:
        self._reactions: dict[ReactionKey, Reaction] = {}

    def _on_targets(
        self, target_kind: ReactionTargetKind, target_ids: set[UUID]
    ) -> list[Reaction]:
        return [
            r
            for r in self._reactions.values()
            if r.target_kind == target_kind and r.target_id in target_ids
        ]

    async def add_if_absent(self, edge: Reaction) -> bool:
        """Insert the reaction unless the key is taken."""
        if edge.key in self._reactions:
            return False
        self._reactions[edge.key] = edge
        return True

    async def remove_if_present(self, key: ReactionKey) -> Optional[Reaction]:
        """Delete the reaction with this key and return it."""
        return self._reactions.pop(key, None)

    async def exists(self, key: ReactionKey) -> bool:
        """Check whether the reaction exists."""
        return key in self._reactions

    async def find_by_key(self, key: ReactionKey) -> Optional[Reaction]:
        """Find the reaction with this key."""
        return self._reactions.get(key)

    async def save(self, edge: Reaction) -> Reaction:
        """Insert a reaction.

        Raises:
            ConflictError: If the key is taken
        """
        if edge.key in self._reactions:
            raise ConflictError("Reaction", str(edge.key))
        self._reactions[edge.key] = edge
        return edge

    async def count_by_target(
        self, target_kind: ReactionTargetKind, target_id: UUID
    ) -> int:
        """Count reactions on one target."""
        return len(self._on_targets(target_kind, {target_id}))

    async def count_by_targets(
        self, target_kind: ReactionTargetKind, target_ids: Sequence[UUID]
    ) -> dict[UUID, int]:
        """Count reactions on many targets."""
        counts = {target_id: 0 for target_id in target_ids}
        for reaction in self._on_targets(target_kind, set(target_ids)):
            counts[reaction.target_id] += 1
        return counts

    async def find_reacted_target_ids(
        self,
        actor_id: UserId,
        target_kind: ReactionTargetKind,
        target_ids: Sequence[UUID],
    ) -> set[UUID]:
        """Find which of the given targets an actor has reacted to."""
        return {
            r.target_id
            for r in self._on_targets(target_kind, set(target_ids))
            if r.actor_id == actor_id
        }

    async def find_by_actor(
        self,
        actor_id: UserId,
        target_kind: ReactionTargetKind,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Reaction]:
        """Find an actor's reactions, most recent first."""
        reactions = [
            r
            for r in self._reactions.values()
            if r.actor_id == actor_id and r.target_kind == target_kind
        ]
        return newest_first(reactions)[offset : offset + limit]

    async def count_by_actor(
        self, actor_id: UserId, target_kind: ReactionTargetKind
    ) -> int:
        """Count an actor's reactions on targets of one kind."""
        return sum(
            1
            for r in self._reactions.values()
            if r.actor_id == actor_id and r.target_kind == target_kind
        )

    async def delete_all_by_target(
        self, target_kind: ReactionTargetKind, target_id: UUID
    ) -> int:
        """Delete every reaction on one target."""
        return await self.delete_all_by_targets(target_kind, [target_id])

    async def delete_all_by_targets(
        self, target_kind: ReactionTargetKind, target_ids: Sequence[UUID]
    ) -> int:
        """Delete every reaction on many targets."""
        doomed = self._on_targets(target_kind, set(target_ids))
        for reaction in doomed:
            del self._reactions[reaction.key]
        return len(doomed)

    async def find_target_ids(self, target_kind: ReactionTargetKind) -> set[UUID]:
        """Find the distinct targets of one kind that have reactions."""
        return {
            r.target_id for r in self._reactions.values() if r.target_kind == target_kind
        }
