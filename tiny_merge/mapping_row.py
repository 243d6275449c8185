"""The capability shared by every named element of a tiny file."""

from typing import Protocol


class MappingRow(Protocol):
    """Anything with one name per namespace, the base-namespace name first."""

    @property
    def names(self) -> tuple[str, ...]: ...


def base_name(row: MappingRow) -> str:
    """Return the name of a row in the base namespace."""
    return row.names[0]
