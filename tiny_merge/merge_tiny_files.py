"""Merge several tiny files that share a base namespace into one.

Every entity is aligned across inputs by its name in the base namespace
(namespace 0). The merged file carries the union of all namespaces; each
input contributes its own name columns, in input order, to every row.

Example, two inputs sharing ``intermediary``::

    intermediary  named             |  intermediary  official
    c class_1     pkg/Thing         |  c class_1     a

merge into::

    intermediary  named             official
    c class_1     pkg/Thing         a
"""

import logging
from collections.abc import Sequence

from tiny_merge.enclosing_class import match_enclosing_class_if_needed
from tiny_merge.errors import MergeConfigurationError
from tiny_merge.key_union import key_union
from tiny_merge.merge_classes import merge_classes
from tiny_merge.merge_headers import merge_headers
from tiny_merge.models import TinyFile

logger = logging.getLogger(__name__)


def validate_inputs(
    files: Sequence[TinyFile], sources: Sequence[str] | None = None
) -> None:
    """Check that the files can be merged, raising MergeConfigurationError if not."""
    if len(files) < 2:
        msg = f"At least 2 tiny files are needed to merge, got {len(files)}."
        raise MergeConfigurationError(msg)
    names = list(sources) if sources else [f"input #{i + 1}" for i in range(len(files))]

    base_namespace: str | None = None
    for name, tiny_file in zip(names, files, strict=True):
        namespaces = tiny_file.header.namespaces
        if len(namespaces) < 2:
            msg = f"{name} must have at least 2 namespaces."
            raise MergeConfigurationError(msg)
        if base_namespace is None:
            base_namespace = namespaces[0]
        elif namespaces[0] != base_namespace:
            msg = (
                "The input tiny files must have the same namespace as the first "
                f"column. ({name} has {namespaces[0]} instead of {base_namespace})"
            )
            raise MergeConfigurationError(msg)


def merge_tiny_files(
    files: Sequence[TinyFile],
    sources: Sequence[str] | None = None,
    *,
    sort_classes: bool = True,
) -> TinyFile:
    """Merge ``files`` into a new TinyFile; the inputs are left untouched.

    ``sources`` names the inputs in error messages. With ``sort_classes``
    off, merged classes follow the first-seen order of their keys.
    """
    validate_inputs(files, sources)

    header = merge_headers([f.header for f in files])
    if sort_classes:
        class_keys = key_union(f.classes for f in files)
    else:
        class_keys = list(dict.fromkeys(c.key for f in files for c in f.classes))

    classes_by_input = [f.classes_by_key() for f in files]
    merged = []
    for key in class_keys:
        classes = [
            match_enclosing_class_if_needed(key, by_key.get(key), by_key)
            for by_key in classes_by_input
        ]
        merged.append(merge_classes(key, classes))

    logger.info(
        "Merged %d files into %d classes with namespaces %s",
        len(files),
        len(merged),
        ", ".join(header.namespaces),
    )
    return TinyFile(header, tuple(merged))
