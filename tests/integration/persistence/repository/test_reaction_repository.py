"""Integration tests for PostgresReactionRepository.

Require a migrated PostgreSQL at DATABASE__URL. Run with ``pytest -m integration``.
"""

import asyncio
from datetime import datetime
from uuid import uuid4

import pytest

from vidtube.domain.error import ConflictError
from vidtube.domain.model import Reaction
from vidtube.domain.repository import ReactionRepository
from vidtube.domain.value import ReactionId, ReactionTargetKind, UserId
from tests.di import build_test_container
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

integration_env = create_env_fixture(unmock={"persistence"})


def _reaction(actor_id: UserId, target_id) -> Reaction:
    return Reaction(
        id=ReactionId(uuid4()),
        actor_id=actor_id,
        target_kind=ReactionTargetKind.VIDEO,
        target_id=target_id,
        created_at=datetime.now(),
    )


class TestReactionRepositoryIntegration:
    """Uniqueness is enforced by the table's unique constraint."""

    @pytest.mark.asyncio
    async def test_add_if_absent_and_remove_if_present(self, integration_env):
        repo = await integration_env.get(ReactionRepository)
        edge = _reaction(UserId(uuid4()), uuid4())

        assert await repo.add_if_absent(edge) is True
        assert await repo.add_if_absent(_reaction(edge.actor_id, edge.target_id)) is False
        assert await repo.count_by_target(edge.target_kind, edge.target_id) == 1

        removed = await repo.remove_if_present(edge.key)
        assert removed is not None
        assert removed.id == edge.id
        assert await repo.remove_if_present(edge.key) is None

    @pytest.mark.asyncio
    async def test_save_duplicate_raises_conflict(self, integration_env):
        repo = await integration_env.get(ReactionRepository)
        edge = await repo.save(_reaction(UserId(uuid4()), uuid4()))

        with pytest.raises(ConflictError):
            await repo.save(_reaction(edge.actor_id, edge.target_id))

        # The savepoint rollback keeps the session usable
        assert await repo.exists(edge.key)

    @pytest.mark.asyncio
    async def test_bulk_count_and_delete(self, integration_env):
        repo = await integration_env.get(ReactionRepository)
        target_a, target_b = uuid4(), uuid4()
        for _ in range(3):
            await repo.save(_reaction(UserId(uuid4()), target_a))
        await repo.save(_reaction(UserId(uuid4()), target_b))

        counts = await repo.count_by_targets(ReactionTargetKind.VIDEO, [target_a, target_b])
        assert counts[target_a] == 3
        assert counts[target_b] == 1

        removed = await repo.delete_all_by_targets(
            ReactionTargetKind.VIDEO, [target_a, target_b]
        )
        assert removed == 4

    @pytest.mark.asyncio
    async def test_concurrent_add_if_absent_creates_one_edge(self):
        """Separate sessions racing on one key: exactly one insert wins."""
        container = build_test_container(unmock={"persistence"})
        actor_id, target_id = UserId(uuid4()), uuid4()

        async def attempt() -> bool:
            async with container() as request_container:
                repo = await request_container.get(ReactionRepository)
                return await repo.add_if_absent(_reaction(actor_id, target_id))

        try:
            results = await asyncio.gather(*(attempt() for _ in range(5)))
        finally:
            await container.close()

        assert results.count(True) == 1
