"""Best-effort names for nested classes that an input does not map."""

import logging
from collections.abc import Mapping

from tiny_merge.models import TinyClass

logger = logging.getLogger(__name__)

INNER_CLASS_SEPARATOR = "$"


def match_enclosing_class(
    key: str, classes_by_key: Mapping[str, TinyClass], namespace_index: int = 1
) -> str:
    """Derive a name for ``key`` from its closest mapped enclosing class.

    ``net/minecraft/class_1$class_2$class_3`` with ``net/minecraft/class_1``
    mapped to ``a/Outer`` resolves to ``a/Outer$class_2$class_3``. The longest
    mapped prefix wins. Falls back to ``key`` when no enclosing class carries
    a name at ``namespace_index``.
    """
    parts = key.split(INNER_CLASS_SEPARATOR)
    while parts and not parts[-1]:
        parts.pop()
    for i in range(len(parts) - 2, -1, -1):
        enclosing = INNER_CLASS_SEPARATOR.join(parts[: i + 1])
        match = classes_by_key.get(enclosing)
        if match is None or len(match.names) <= namespace_index:
            continue
        mapped = match.names[namespace_index]
        if mapped:
            return mapped + INNER_CLASS_SEPARATOR + INNER_CLASS_SEPARATOR.join(
                parts[i + 1 :]
            )
    return key


def match_enclosing_class_if_needed(
    key: str, tiny_class: TinyClass | None, classes_by_key: Mapping[str, TinyClass]
) -> TinyClass:
    """Return ``tiny_class``, or a two-column stand-in when the input lacks ``key``.

    The stand-in has no members or comments; it only supplies a name.
    """
    if tiny_class is not None:
        return tiny_class
    resolved = match_enclosing_class(key, classes_by_key)
    logger.debug("Resolved missing class %s as %s", key, resolved)
    return TinyClass(names=(key, resolved))
