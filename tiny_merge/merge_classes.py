"""Logic for merging one class across inputs, members included."""

from collections.abc import Sequence

from tiny_merge.key_union import key_union, union
from tiny_merge.merge_members import merge_fields, merge_methods
from tiny_merge.merge_names import merge_names
from tiny_merge.models import TinyClass


def merge_classes(key: str, classes: Sequence[TinyClass]) -> TinyClass:
    """Merge the classes matched under ``key``, one per input.

    Inputs lacking the class are expected to have been given a stand-in
    by the enclosing-class resolver already.
    """
    merged_names = merge_names(key, classes)
    comments = tuple(union(c.comments for c in classes))

    method_keys = key_union((c.methods for c in classes), key=lambda m: m.key)
    methods_by_input = [c.methods_by_key() for c in classes]
    methods = tuple(
        merge_methods(k, [by_key.get(k) for by_key in methods_by_input])
        for k in method_keys
    )

    field_keys = key_union(c.fields for c in classes)
    fields_by_input = [c.fields_by_key() for c in classes]
    fields = tuple(
        merge_fields(k, [by_key.get(k) for by_key in fields_by_input])
        for k in field_keys
    )

    return TinyClass(merged_names, methods, fields, comments)
