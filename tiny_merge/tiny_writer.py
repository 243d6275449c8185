"""Writer for the tiny v2 mapping format."""

from pathlib import Path

from tiny_merge.escaping import escape
from tiny_merge.models import TinyClass, TinyFile, TinyMethod


class TinyWriter:
    """Renders a TinyFile back to tiny v2 text.

    Name rows are written as wide as they were built. With ``pad_columns``
    rows narrower than the header are filled with empty names.
    """

    def __init__(self, tiny_file: TinyFile, *, pad_columns: bool = False) -> None:
        self.tiny_file = tiny_file
        self.pad_columns = pad_columns
        self.width = len(tiny_file.header.namespaces)
        self.escaped_names = tiny_file.header.escaped_names
        self.lines: list[str] = []

    def render(self) -> str:
        self.lines = []
        header = self.tiny_file.header
        self._line(
            0,
            "tiny",
            str(header.major_version),
            str(header.minor_version),
            *header.namespaces,
        )
        for key, value in header.properties.items():
            if value is None:
                self._line(1, key)
            else:
                self._line(1, key, value)
        for tiny_class in self.tiny_file.classes:
            self._class(tiny_class)
        return "\n".join(self.lines) + "\n"

    def _line(self, depth: int, *fields: str) -> None:
        self.lines.append("\t" * depth + "\t".join(fields))

    def _names(self, names: tuple[str, ...]) -> list[str]:
        row = list(names)
        if self.pad_columns and len(row) < self.width:
            row.extend([""] * (self.width - len(row)))
        if self.escaped_names:
            row = [escape(n) for n in row]
        return row

    def _comments(self, depth: int, comments: tuple[str, ...]) -> None:
        for comment in comments:
            self._line(depth, "c", escape(comment))

    def _class(self, tiny_class: TinyClass) -> None:
        self._line(0, "c", *self._names(tiny_class.names))
        self._comments(1, tiny_class.comments)
        for method in tiny_class.methods:
            self._method(method)
        for field in tiny_class.fields:
            self._line(1, "f", field.descriptor, *self._names(field.names))
            self._comments(2, field.comments)

    def _method(self, method: TinyMethod) -> None:
        self._line(1, "m", method.descriptor or "", *self._names(method.names))
        self._comments(2, method.comments)
        for parameter in method.parameters:
            self._line(2, "p", str(parameter.lv_index), *self._names(parameter.names))
            self._comments(3, parameter.comments)
        for variable in method.local_variables:
            self._line(
                2,
                "v",
                str(variable.lv_index),
                str(variable.lv_start_offset),
                str(variable.lv_table_index),
                *self._names(variable.names),
            )
            self._comments(3, variable.comments)


def render_tiny(tiny_file: TinyFile, *, pad_columns: bool = False) -> str:
    """Render ``tiny_file`` as tiny v2 text."""
    return TinyWriter(tiny_file, pad_columns=pad_columns).render()


def write_tiny_file(
    tiny_file: TinyFile, path: str | Path, *, pad_columns: bool = False
) -> None:
    """Write ``tiny_file`` to ``path`` as UTF-8 with ``\\n`` line endings."""
    p = Path(path)
    if not p.parent.exists():
        p.parent.mkdir(parents=True, exist_ok=True)
    text = render_tiny(tiny_file, pad_columns=pad_columns)
    p.write_text(text, encoding="utf-8", newline="\n")
