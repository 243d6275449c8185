"""Logic for building the merged name row of an entity."""

from collections.abc import Iterable

from tiny_merge.mapping_row import MappingRow


def merge_names(key: str, rows: Iterable[MappingRow | None]) -> tuple[str, ...]:
    """Build the merged name row for ``key`` from one slot per input.

    - Column 0 is ``key``.
    - Every present row adds its non-base columns in input order; an empty
      name is replaced by ``key``.
    - Absent rows add nothing, and columns are never deduplicated.
    """
    merged = [key]
    for row in rows:
        if row is None:
            continue
        merged.extend(name or key for name in row.names[1:])
    return tuple(merged)
