"""Logic for merging the headers of several tiny files."""

from collections.abc import Sequence

from tiny_merge.models import ESCAPED_NAMES_PROPERTY, TinyHeader


def merge_headers(headers: Sequence[TinyHeader]) -> TinyHeader:
    """Union the namespaces of all headers in first-seen order.

    Version and properties come from the first header, except that
    ``escaped-names`` is kept if any input declares it: names read from such
    an input may hold tabs or newlines that must be escaped on output.
    """
    first = headers[0]
    namespaces = list(first.namespaces)
    for header in headers[1:]:
        for namespace in header.namespaces:
            if namespace not in namespaces:
                namespaces.append(namespace)
    properties = dict(first.properties)
    if any(h.escaped_names for h in headers):
        properties.setdefault(ESCAPED_NAMES_PROPERTY, None)
    # TODO: reconcile versions and properties that differ between inputs
    return TinyHeader(
        namespaces=tuple(namespaces),
        major_version=first.major_version,
        minor_version=first.minor_version,
        properties=properties,
    )
