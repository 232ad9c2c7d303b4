"""Edge store interface shared by reactions and subscriptions."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

K = TypeVar("K")
E = TypeVar("E")


class EdgeRepository(ABC, Generic[K, E]):
    """Store of edges identified by a natural key.

    Implementations guarantee at most one edge per key even when identical
    requests race. The guarantee must come from the storage layer (a unique
    constraint or an equivalent atomic operation), never from a separate
    read followed by a write in the caller.
    """

    @abstractmethod
    async def add_if_absent(self, edge: E) -> bool:
        """Insert the edge unless one with the same key exists.

        Args:
            edge: Edge to insert

        Returns:
            True if this call created the edge, False if the key was taken
        """
        pass

    @abstractmethod
    async def remove_if_present(self, key: K) -> Optional[E]:
        """Delete the edge with this key if there is one.

        Args:
            key: Natural key of the edge

        Returns:
            The deleted edge, or None if nothing was deleted by this call
        """
        pass

    @abstractmethod
    async def exists(self, key: K) -> bool:
        """Check whether an edge with this key exists."""
        pass

    @abstractmethod
    async def find_by_key(self, key: K) -> Optional[E]:
        """Find the edge with this key."""
        pass

    @abstractmethod
    async def save(self, edge: E) -> E:
        """Insert an edge.

        Unlike ``add_if_absent`` this treats a duplicate key as an error.

        Args:
            edge: Edge to insert

        Returns:
            The saved edge

        Raises:
            ConflictError: If an edge with the same key already exists
        """
        pass
