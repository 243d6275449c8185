"""Reader for the tiny v2 mapping format.

A file starts with a header line, optionally followed by properties, then
class blocks. Nesting is expressed with leading tabs::

    tiny	2	0	intermediary	named
    	escaped-names
    c	net/minecraft/class_1	net/minecraft/pkg/Thing
    	c	A class comment.
    	m	(I)V	method_1	setCount
    		p	1		count
    		v	2	5	0		tmp
    	f	I	field_1	count
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tiny_merge.errors import TinyFormatError
from tiny_merge.escaping import unescape
from tiny_merge.models import (
    TinyClass,
    TinyField,
    TinyFile,
    TinyHeader,
    TinyLocalVariable,
    TinyMethod,
    TinyMethodParameter,
)

MAGIC = "tiny"
SUPPORTED_MAJOR_VERSION = 2


@dataclass(frozen=True)
class _Line:
    number: int
    depth: int
    fields: list[str]

    @property
    def tag(self) -> str:
        return self.fields[0]


def read_tiny_file(path: str | Path) -> TinyFile:
    """Read and parse a tiny v2 file from disk."""
    p = Path(path)
    return parse_tiny(p.read_text(encoding="utf-8"), source=str(p))


def parse_tiny(text: str, source: str = "<string>") -> TinyFile:
    """Parse tiny v2 text; ``source`` is used in error messages."""
    return _Parser(text, source).parse()


class _Parser:
    def __init__(self, text: str, source: str) -> None:
        self.source = source
        self.lines: list[_Line] = []
        for number, raw in enumerate(text.split("\n"), start=1):
            raw = raw.rstrip("\r")
            if not raw.strip():
                continue
            body = raw.lstrip("\t")
            self.lines.append(_Line(number, len(raw) - len(body), body.split("\t")))
        self.pos = 0
        self.escaped_names = False

    def error(self, message: str, line: _Line | None = None) -> TinyFormatError:
        return TinyFormatError(message, self.source, line.number if line else 0)

    def parse(self) -> TinyFile:
        header = self._header()
        self.escaped_names = header.escaped_names
        classes = []
        for line in self._children(0):
            if line.tag != "c":
                raise self.error(f"unexpected top-level record {line.tag!r}", line)
            classes.append(self._class(line))
        return TinyFile(header, tuple(classes))

    def _children(self, depth: int):
        """Yield the following lines nested exactly ``depth`` tabs deep."""
        while self.pos < len(self.lines):
            line = self.lines[self.pos]
            if line.depth < depth:
                return
            if line.depth > depth:
                raise self.error(
                    f"unexpected indentation (expected {depth} tabs)", line
                )
            self.pos += 1
            yield line

    def _header(self) -> TinyHeader:
        if not self.lines:
            raise self.error("empty file")
        line = self.lines[0]
        self.pos = 1
        if line.depth != 0 or line.tag != MAGIC or len(line.fields) < 4:
            raise self.error("missing tiny v2 header", line)
        major = self._int(line.fields[1], line)
        minor = self._int(line.fields[2], line)
        if major != SUPPORTED_MAJOR_VERSION:
            raise self.error(f"unsupported major version {major}", line)

        properties: dict[str, str | None] = {}
        for prop in self._children(1):
            properties[prop.tag] = prop.fields[1] if len(prop.fields) > 1 else None
        return TinyHeader(tuple(line.fields[3:]), major, minor, properties)

    def _int(self, value: str, line: _Line) -> int:
        try:
            return int(value)
        except ValueError:
            raise self.error(f"expected an integer, got {value!r}", line) from None

    def _names(
        self, fields: list[str], line: _Line, *, keyed: bool = True
    ) -> tuple[str, ...]:
        # Parameters and locals may leave the base-namespace name blank.
        if not fields or (keyed and not fields[0]):
            raise self.error("missing name in the base namespace", line)
        if not self.escaped_names:
            return tuple(fields)
        try:
            return tuple(unescape(f) for f in fields)
        except ValueError as e:
            raise self.error(str(e), line) from None

    def _comment(self, line: _Line) -> str:
        if len(line.fields) != 2:
            raise self.error("malformed comment", line)
        try:
            return unescape(line.fields[1])
        except ValueError as e:
            raise self.error(str(e), line) from None

    def _comments_only(self, depth: int) -> tuple[str, ...]:
        comments = []
        for line in self._children(depth):
            if line.tag != "c":
                raise self.error(f"unexpected record {line.tag!r}", line)
            comments.append(self._comment(line))
        return tuple(comments)

    def _class(self, line: _Line) -> TinyClass:
        names = self._names(line.fields[1:], line)
        methods, fields, comments = [], [], []
        for child in self._children(1):
            if child.tag == "m":
                methods.append(self._method(child))
            elif child.tag == "f":
                fields.append(self._field(child))
            elif child.tag == "c":
                comments.append(self._comment(child))
            else:
                raise self.error(f"unexpected class member {child.tag!r}", child)
        return TinyClass(names, tuple(methods), tuple(fields), tuple(comments))

    def _descriptor(self, line: _Line) -> str:
        if len(line.fields) < 3 or not line.fields[1]:
            raise self.error("missing descriptor", line)
        return line.fields[1]

    def _method(self, line: _Line) -> TinyMethod:
        descriptor = self._descriptor(line)
        names = self._names(line.fields[2:], line)
        parameters, local_variables, comments = [], [], []
        for child in self._children(2):
            if child.tag == "p":
                if len(child.fields) < 3:
                    raise self.error("malformed parameter", child)
                parameters.append(
                    TinyMethodParameter(
                        self._int(child.fields[1], child),
                        self._names(child.fields[2:], child, keyed=False),
                        self._comments_only(3),
                    )
                )
            elif child.tag == "v":
                if len(child.fields) < 5:
                    raise self.error("malformed local variable", child)
                local_variables.append(
                    TinyLocalVariable(
                        self._int(child.fields[1], child),
                        self._int(child.fields[2], child),
                        self._int(child.fields[3], child),
                        self._names(child.fields[4:], child, keyed=False),
                        self._comments_only(3),
                    )
                )
            elif child.tag == "c":
                comments.append(self._comment(child))
            else:
                raise self.error(f"unexpected method member {child.tag!r}", child)
        return TinyMethod(
            descriptor,
            names,
            tuple(parameters),
            tuple(local_variables),
            tuple(comments),
        )

    def _field(self, line: _Line) -> TinyField:
        descriptor = self._descriptor(line)
        names = self._names(line.fields[2:], line)
        return TinyField(descriptor, names, self._comments_only(2))
