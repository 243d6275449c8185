"""Tests for writing tiny v2 files."""

from pathlib import Path

from tiny_merge.models import (
    TinyClass,
    TinyField,
    TinyFile,
    TinyHeader,
    TinyLocalVariable,
    TinyMethod,
    TinyMethodParameter,
)
from tiny_merge.tiny_reader import parse_tiny
from tiny_merge.tiny_writer import render_tiny, write_tiny_file


def _sample() -> TinyFile:
    return TinyFile(
        TinyHeader(("intermediary", "named", "official")),
        (
            TinyClass(
                ("net/minecraft/class_1", "net/minecraft/Thing", "a"),
                methods=(
                    TinyMethod(
                        "(I)V",
                        ("method_1", "setCount", "a"),
                        parameters=(TinyMethodParameter(1, ("", "count"), ("New.",)),),
                        local_variables=(TinyLocalVariable(2, 5, 0, ("", "tmp")),),
                        comments=("Sets\tthe count.",),
                    ),
                ),
                fields=(TinyField("I", ("field_1", "count")),),
                comments=("A thing.",),
            ),
        ),
    )


def test_render_layout() -> None:
    """Verify record order, indentation and comment escaping."""
    assert render_tiny(_sample()) == "\n".join(
        [
            "tiny\t2\t0\tintermediary\tnamed\tofficial",
            "c\tnet/minecraft/class_1\tnet/minecraft/Thing\ta",
            "\tc\tA thing.",
            "\tm\t(I)V\tmethod_1\tsetCount\ta",
            "\t\tc\tSets\\tthe count.",
            "\t\tp\t1\t\tcount",
            "\t\t\tc\tNew.",
            "\t\tv\t2\t5\t0\t\ttmp",
            "\tf\tI\tfield_1\tcount",
            "",
        ]
    )


def test_rows_keep_their_width_by_default() -> None:
    """Verify that a narrow row is written as is."""
    lines = render_tiny(_sample()).splitlines()
    assert "\tf\tI\tfield_1\tcount" in lines


def test_pad_columns() -> None:
    """Verify that narrow rows are padded to the header width on request."""
    lines = render_tiny(_sample(), pad_columns=True).splitlines()
    assert "\tf\tI\tfield_1\tcount\t" in lines
    assert "\t\tp\t1\t\tcount\t" in lines


def test_properties_and_escaped_names() -> None:
    """Verify that names are escaped when the header asks for it."""
    header = TinyHeader(("a", "b"), 2, 0, {"escaped-names": None, "k": "v"})
    tiny_file = TinyFile(header, (TinyClass(("x", "has\ttab")),))
    text = render_tiny(tiny_file)
    assert text == "tiny\t2\t0\ta\tb\n\tescaped-names\n\tk\tv\nc\tx\thas\\ttab\n"
    assert parse_tiny(text) == tiny_file


def test_written_file_reads_back(tmp_path: Path) -> None:
    """Verify that the writer output is accepted by the reader."""
    path = tmp_path / "out" / "merged.tiny"
    write_tiny_file(_sample(), path)
    assert parse_tiny(path.read_text(encoding="utf-8")) == _sample()
