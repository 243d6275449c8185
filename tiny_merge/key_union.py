"""Set unions across the per-input collections of a merge."""

from collections.abc import Callable, Hashable, Iterable
from typing import Any, TypeVar

from tiny_merge.mapping_row import base_name

T = TypeVar("T", bound=Hashable)


def union(collections: Iterable[Iterable[T]]) -> list[T]:
    """Return the distinct items of all collections in first-seen order."""
    seen: dict[T, None] = {}
    for collection in collections:
        for item in collection:
            seen.setdefault(item, None)
    return list(seen)


def key_union(
    collections: Iterable[Iterable[Any]], key: Callable[[Any], Any] = base_name
) -> list[Any]:
    """Return every distinct key across all collections, sorted.

    Keys must be orderable; method keys are (name, descriptor) tuples.
    """
    return sorted({key(row) for collection in collections for row in collection})
