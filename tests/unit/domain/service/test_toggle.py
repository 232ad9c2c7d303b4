"""Unit tests for toggle_edge."""

import asyncio
from datetime import datetime
from typing import Optional
from uuid import uuid4

import pytest

from vidtube.domain.model import Reaction
from vidtube.domain.service import toggle_edge
from vidtube.domain.value import (
    ReactionId,
    ReactionKey,
    ReactionTargetKind,
    ToggleState,
    UserId,
)
from vidtube.persistence.repository.inmemory import InMemoryReactionRepository


def _key() -> ReactionKey:
    return ReactionKey(
        actor_id=UserId(uuid4()),
        target_kind=ReactionTargetKind.VIDEO,
        target_id=uuid4(),
    )


def _factory(key: ReactionKey):
    return lambda: Reaction(
        id=ReactionId(uuid4()),
        actor_id=key.actor_id,
        target_kind=key.target_kind,
        target_id=key.target_id,
        created_at=datetime.now(),
    )


class InterleavingReactionRepository(InMemoryReactionRepository):
    """Yields to the event loop before every write, like a network store."""

    async def add_if_absent(self, edge: Reaction) -> bool:
        await asyncio.sleep(0)
        return await super().add_if_absent(edge)

    async def remove_if_present(self, key: ReactionKey) -> Optional[Reaction]:
        await asyncio.sleep(0)
        return await super().remove_if_present(key)


class ScriptedReactionRepository(InMemoryReactionRepository):
    """Replays fixed answers to simulate a concurrent writer."""

    def __init__(self, removals: list[Optional[Reaction]], add_result: bool) -> None:
        super().__init__()
        self.removals = removals
        self.add_result = add_result
        self.remove_calls = 0

    async def add_if_absent(self, edge: Reaction) -> bool:
        return self.add_result

    async def remove_if_present(self, key: ReactionKey) -> Optional[Reaction]:
        self.remove_calls += 1
        return self.removals.pop(0)


class TestToggleParity:
    """Sequential toggles alternate between added and removed."""

    @pytest.mark.asyncio
    async def test_first_toggle_adds_edge(self):
        repo = InMemoryReactionRepository()
        key = _key()

        result = await toggle_edge(repo, key, _factory(key))

        assert result.state == ToggleState.ADDED
        assert result.edge is not None
        assert result.edge.key == key
        assert await repo.exists(key)

    @pytest.mark.asyncio
    async def test_second_toggle_removes_the_same_edge(self):
        repo = InMemoryReactionRepository()
        key = _key()

        added = await toggle_edge(repo, key, _factory(key))
        removed = await toggle_edge(repo, key, _factory(key))

        assert removed.state == ToggleState.REMOVED
        assert removed.edge.id == added.edge.id
        assert not await repo.exists(key)

    @pytest.mark.asyncio
    async def test_odd_number_of_toggles_leaves_one_edge(self):
        repo = InMemoryReactionRepository()
        key = _key()

        states = [(await toggle_edge(repo, key, _factory(key))).state for _ in range(5)]

        assert states == [
            ToggleState.ADDED,
            ToggleState.REMOVED,
            ToggleState.ADDED,
            ToggleState.REMOVED,
            ToggleState.ADDED,
        ]
        assert await repo.count_by_target(key.target_kind, key.target_id) == 1


class TestToggleRace:
    """Concurrent toggles on one key never produce duplicates."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("concurrency", [2, 3, 8, 25])
    async def test_concurrent_toggles_leave_zero_or_one_edge(self, concurrency):
        repo = InterleavingReactionRepository()
        key = _key()

        results = await asyncio.gather(
            *(toggle_edge(repo, key, _factory(key)) for _ in range(concurrency))
        )

        count = await repo.count_by_target(key.target_kind, key.target_id)
        assert count in (0, 1)
        assert all(r.state in (ToggleState.ADDED, ToggleState.REMOVED) for r in results)

        # Every reported outcome is accounted for in the final store state
        added = sum(1 for r in results if r.state == ToggleState.ADDED)
        removed = sum(
            1 for r in results if r.state == ToggleState.REMOVED and r.edge is not None
        )
        assert added - removed == count

    @pytest.mark.asyncio
    async def test_lost_creation_race_retries_removal_once(self):
        key = _key()
        concurrent_edge = _factory(key)()
        repo = ScriptedReactionRepository(
            removals=[None, concurrent_edge], add_result=False
        )

        result = await toggle_edge(repo, key, _factory(key))

        assert result.state == ToggleState.REMOVED
        assert result.edge == concurrent_edge
        assert repo.remove_calls == 2

    @pytest.mark.asyncio
    async def test_edge_created_and_removed_concurrently_reports_removed(self):
        key = _key()
        repo = ScriptedReactionRepository(removals=[None, None], add_result=False)

        result = await toggle_edge(repo, key, _factory(key))

        assert result.state == ToggleState.REMOVED
        assert result.edge is None
        # No further retries after the single retried removal
        assert repo.remove_calls == 2
