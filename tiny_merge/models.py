"""Data models for the contents of a tiny v2 mapping file."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

ESCAPED_NAMES_PROPERTY = "escaped-names"


@dataclass(frozen=True)
class TinyHeader:
    """Namespace list, format version and header properties."""

    namespaces: tuple[str, ...]
    major_version: int = 2
    minor_version: int = 0
    properties: Mapping[str, str | None] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "namespaces", tuple(self.namespaces))
        object.__setattr__(self, "properties", dict(self.properties))

    @property
    def base_namespace(self) -> str:
        return self.namespaces[0]

    @property
    def escaped_names(self) -> bool:
        return ESCAPED_NAMES_PROPERTY in self.properties


@dataclass(frozen=True)
class TinyMethodParameter:
    """A parameter annotation of a method, identified by its local variable index."""

    lv_index: int
    names: tuple[str, ...]
    comments: tuple[str, ...] = ()


@dataclass(frozen=True)
class TinyLocalVariable:
    """A local variable annotation of a method."""

    lv_index: int
    lv_start_offset: int
    lv_table_index: int
    names: tuple[str, ...]
    comments: tuple[str, ...] = ()


@dataclass(frozen=True)
class TinyMethod:
    """A method row; ``descriptor`` is expressed in the base namespace.

    ``descriptor`` is None only for placeholders standing in for a method
    that an input does not have.
    """

    descriptor: str | None
    names: tuple[str, ...]
    parameters: tuple[TinyMethodParameter, ...] = ()
    local_variables: tuple[TinyLocalVariable, ...] = ()
    comments: tuple[str, ...] = ()

    @property
    def key(self) -> tuple[str, str | None]:
        """Overloads share a name, so methods are identified by name and descriptor."""
        return (self.names[0], self.descriptor)


@dataclass(frozen=True)
class TinyField:
    """A field row; ``descriptor`` is expressed in the base namespace."""

    descriptor: str
    names: tuple[str, ...]
    comments: tuple[str, ...] = ()

    @property
    def key(self) -> str:
        return self.names[0]


@dataclass(frozen=True)
class TinyClass:
    """A class row with its members.

    The base-namespace name is a slash separated path; nested classes
    separate their segments with ``$``.
    """

    names: tuple[str, ...]
    methods: tuple[TinyMethod, ...] = ()
    fields: tuple[TinyField, ...] = ()
    comments: tuple[str, ...] = ()

    @property
    def key(self) -> str:
        return self.names[0]

    def methods_by_key(self) -> dict[tuple[str, str | None], TinyMethod]:
        return {m.key: m for m in self.methods}

    def fields_by_key(self) -> dict[str, TinyField]:
        return {f.key: f for f in self.fields}


@dataclass(frozen=True)
class TinyFile:
    """A whole mapping file: header plus classes in file order."""

    header: TinyHeader
    classes: tuple[TinyClass, ...] = ()

    def classes_by_key(self) -> dict[str, TinyClass]:
        return {c.key: c for c in self.classes}
