"""Idempotent edge toggling.

The edge stores offer atomic ``remove_if_present`` and ``add_if_absent`` but
no atomic compare-and-toggle, so a toggle is two steps with a window in
between. Losing the creation race is resolved by exactly one retried removal.
"""

from typing import Callable, TypeVar

import logfire

from vidtube.domain.model.toggle import ToggleResult
from vidtube.domain.repository.edge import EdgeRepository
from vidtube.domain.value import ToggleState

K = TypeVar("K")
E = TypeVar("E")


async def toggle_edge(
    repository: EdgeRepository[K, E],
    key: K,
    new_edge: Callable[[], E],
) -> ToggleResult:
    """Flip the edge identified by ``key``.

    1. Remove the edge if present -> removed.
    2. Otherwise create it -> added.
    3. If creation found the key taken, a concurrent request created it
       after step 1; remove once more -> removed.
    4. If that removal also finds nothing, another request removed it in
       turn. The edge is observed absent -> removed with no edge.

    Args:
        repository: Edge store holding the edge
        key: Natural key of the edge
        new_edge: Factory for the edge to create if absent

    Returns:
        Toggle result with the created or deleted edge
    """
    removed = await repository.remove_if_present(key)
    if removed is not None:
        return ToggleResult(state=ToggleState.REMOVED, edge=removed)

    edge = new_edge()
    if await repository.add_if_absent(edge):
        return ToggleResult(state=ToggleState.ADDED, edge=edge)

    logfire.info("Toggle lost creation race, retrying removal", key=str(key))
    removed = await repository.remove_if_present(key)
    if removed is not None:
        return ToggleResult(state=ToggleState.REMOVED, edge=removed)

    logfire.warn("Edge created and removed concurrently during toggle", key=str(key))
    return ToggleResult(state=ToggleState.REMOVED, edge=None)
