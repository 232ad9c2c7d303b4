"""Ordering shared by the in-memory repositories."""

from typing import Callable, Iterable, TypeVar

T = TypeVar("T")


def newest_first(items: Iterable[T]) -> list[T]:
    """Order by ``created_at`` descending, ties by ``id`` ascending."""
    return sort_stable(items, key=lambda item: item.created_at, descending=True)


def sort_stable(
    items: Iterable[T], key: Callable[[T], object], descending: bool
) -> list[T]:
    """Sort by ``key`` with ties broken by ``id`` ascending.

    ``list.sort`` is stable, also with ``reverse=True``, so sorting by ID
    first and by the key second keeps ID order within equal keys.
    """
    ordered = sorted(items, key=lambda item: item.id)
    ordered.sort(key=key, reverse=descending)
    return ordered
