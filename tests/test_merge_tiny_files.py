"""Tests for merging whole tiny files."""

import pytest

from tiny_merge.errors import MergeConfigurationError
from tiny_merge.merge_tiny_files import merge_tiny_files, validate_inputs
from tiny_merge.models import TinyClass, TinyField, TinyFile, TinyHeader, TinyMethod

DESC = "(Lnet/minecraft/class_124;)V"


def _file(namespaces: tuple[str, ...], *classes: TinyClass) -> TinyFile:
    return TinyFile(TinyHeader(namespaces), classes)


@pytest.fixture
def named() -> TinyFile:
    return _file(
        ("intermediary", "named"),
        TinyClass(
            ("net/minecraft/class_123", "net/minecraft/somePkg/someClass"),
            methods=(TinyMethod(DESC, ("method_1234", "someMethod")),),
            comments=("Some class.",),
        ),
        TinyClass(("net/minecraft/class_200", "net/minecraft/Only")),
    )


@pytest.fixture
def official() -> TinyFile:
    return _file(
        ("intermediary", "official"),
        TinyClass(
            ("net/minecraft/class_123", "a"),
            methods=(TinyMethod(DESC, ("method_1234", "a")),),
        ),
    )


def test_two_column_merge(named: TinyFile, official: TinyFile) -> None:
    """Verify the intermediary/named + intermediary/official example."""
    merged = merge_tiny_files([named, official])
    assert merged.header.namespaces == ("intermediary", "named", "official")

    cls = merged.classes_by_key()["net/minecraft/class_123"]
    assert cls.names == (
        "net/minecraft/class_123",
        "net/minecraft/somePkg/someClass",
        "a",
    )
    (method,) = cls.methods
    assert method.descriptor == DESC
    assert method.names == ("method_1234", "someMethod", "a")


def test_unmatched_class_falls_back_to_key(named: TinyFile, official: TinyFile) -> None:
    """Verify that a class unknown to an input is named after its own key."""
    merged = merge_tiny_files([named, official])
    cls = merged.classes_by_key()["net/minecraft/class_200"]
    assert cls.names == (
        "net/minecraft/class_200",
        "net/minecraft/Only",
        "net/minecraft/class_200",
    )


def test_nested_class_uses_enclosing_class() -> None:
    """Verify that a missing inner class borrows its outer class's name."""
    a = _file(("base", "x"), TinyClass(("a/B", "a/B")), TinyClass(("a/B$C", "a/B$C")))
    b = _file(("base", "y"), TinyClass(("a/B", "x/y/Renamed")))
    merged = merge_tiny_files([a, b])
    assert merged.classes_by_key()["a/B$C"].names == ("a/B$C", "a/B$C", "x/y/Renamed$C")


def test_class_keys_are_complete_and_sorted() -> None:
    """Verify that every input class appears exactly once in the output."""
    a = _file(("base", "x"), TinyClass(("z/Z", "1")), TinyClass(("a/A", "2")))
    b = _file(("base", "y"), TinyClass(("m/M", "3")), TinyClass(("a/A", "4")))
    merged = merge_tiny_files([a, b])
    assert [c.key for c in merged.classes] == ["a/A", "m/M", "z/Z"]


def test_unsorted_output_keeps_first_seen_order() -> None:
    """Verify the class order when sorting is switched off."""
    a = _file(("base", "x"), TinyClass(("z/Z", "1")), TinyClass(("a/A", "2")))
    b = _file(("base", "y"), TinyClass(("m/M", "3")))
    merged = merge_tiny_files([a, b], sort_classes=False)
    assert [c.key for c in merged.classes] == ["z/Z", "a/A", "m/M"]


def test_base_names_equal_keys(named: TinyFile, official: TinyFile) -> None:
    """Verify that every merged row starts with the key it was merged under."""
    merged = merge_tiny_files([named, official])
    for cls in merged.classes:
        assert cls.names[0] == cls.key != ""
        for method in cls.methods:
            assert method.names[0] == method.key[0] != ""
        for field in cls.fields:
            assert field.names[0] == field.key != ""


def test_merging_a_file_with_itself_keeps_comments_once(named: TinyFile) -> None:
    """Verify that comment union is idempotent."""
    once = merge_tiny_files([named, named])
    twice = merge_tiny_files([named, named, named])
    key = "net/minecraft/class_123"
    assert once.classes_by_key()[key].comments == ("Some class.",)
    assert twice.classes_by_key()[key].comments == ("Some class.",)


def test_three_way_merge_with_fields() -> None:
    """Verify a merge of three inputs with a field missing from one of them."""
    a = _file(
        ("i", "named"),
        TinyClass(("c", "C"), fields=(TinyField("I", ("f", "count")),)),
    )
    b = _file(("i", "official"), TinyClass(("c", "a")))
    c = _file(
        ("i", "srg"),
        TinyClass(("c", "C_1"), fields=(TinyField("I", ("f", "")),)),
    )
    merged = merge_tiny_files([a, b, c])
    assert merged.header.namespaces == ("i", "named", "official", "srg")
    (cls,) = merged.classes
    assert cls.names == ("c", "C", "a", "C_1")
    assert cls.fields == (TinyField("I", ("f", "count", "f")),)


def test_inputs_are_not_modified(named: TinyFile, official: TinyFile) -> None:
    """Verify that merging builds new objects instead of touching the inputs."""
    merged = merge_tiny_files([named, official])
    originals = named.classes + official.classes
    assert all(c is not o for c in merged.classes for o in originals)
    assert named.classes[0].names == (
        "net/minecraft/class_123",
        "net/minecraft/somePkg/someClass",
    )


def test_validate_requires_two_namespaces() -> None:
    """Verify that a single-namespace input is rejected with its name."""
    files = [_file(("base", "x")), _file(("base",))]
    with pytest.raises(MergeConfigurationError, match="b.tiny must have at least 2"):
        validate_inputs(files, ["a.tiny", "b.tiny"])


def test_validate_requires_same_base_namespace() -> None:
    """Verify that a base namespace mismatch is reported."""
    files = [_file(("intermediary", "named")), _file(("official", "intermediary"))]
    with pytest.raises(MergeConfigurationError) as excinfo:
        merge_tiny_files(files, ["a.tiny", "b.tiny"])
    message = str(excinfo.value)
    assert "b.tiny has official instead of intermediary" in message


def test_validate_requires_two_inputs() -> None:
    """Verify that merging a lone file is refused."""
    with pytest.raises(MergeConfigurationError):
        validate_inputs([_file(("base", "x"))])
