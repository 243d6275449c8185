"""Logic for merging the methods and fields of one class across inputs."""

from collections.abc import Sequence

from tiny_merge.errors import DataConsistencyError
from tiny_merge.key_union import union
from tiny_merge.merge_names import merge_names
from tiny_merge.models import (
    TinyField,
    TinyLocalVariable,
    TinyMethod,
    TinyMethodParameter,
)


def _placeholder_method() -> TinyMethod:
    return TinyMethod(descriptor=None, names=())


def merge_methods(
    key: tuple[str, str], methods: Sequence[TinyMethod | None]
) -> TinyMethod:
    """Merge the methods sharing ``key`` (name, descriptor), one slot per input."""
    name = key[0]
    merged_names = merge_names(name, methods)
    slots = [m if m is not None else _placeholder_method() for m in methods]

    descriptor = next((m.descriptor for m in slots if m.descriptor is not None), None)
    if descriptor is None:
        raise DataConsistencyError(key)

    # Annotations for the same index are kept side by side, not merged.
    parameters = tuple(
        TinyMethodParameter(p.lv_index, tuple(p.names), tuple(p.comments))
        for m in slots
        for p in m.parameters
    )
    local_variables = tuple(
        TinyLocalVariable(
            v.lv_index,
            v.lv_start_offset,
            v.lv_table_index,
            tuple(v.names),
            tuple(v.comments),
        )
        for m in slots
        for v in m.local_variables
    )
    comments = tuple(union(m.comments for m in slots))
    return TinyMethod(descriptor, merged_names, parameters, local_variables, comments)


def merge_fields(key: str, fields: Sequence[TinyField | None]) -> TinyField:
    """Merge the fields named ``key``, one slot per input."""
    merged_names = merge_names(key, fields)
    present = [f for f in fields if f is not None]
    comments = tuple(union(f.comments for f in present))

    if not present or not present[0].descriptor:
        raise DataConsistencyError(key)
    return TinyField(present[0].descriptor, merged_names, comments)
