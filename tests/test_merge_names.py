"""Tests for building merged name rows."""

from tiny_merge.merge_names import merge_names
from tiny_merge.models import TinyClass, TinyField


def test_columns_follow_input_order() -> None:
    """Verify that each input adds its own columns after the key."""
    rows = [TinyClass(("k", "named")), TinyClass(("k", "official"))]
    assert merge_names("k", rows) == ("k", "named", "official")


def test_blank_names_are_filled_with_key() -> None:
    """Verify that an empty name never reaches the output."""
    rows = [TinyField("I", ("f", "")), TinyField("I", ("f", "b"))]
    assert merge_names("f", rows) == ("f", "f", "b")


def test_absent_rows_add_nothing() -> None:
    """Verify that a missing entity leaves no placeholder column."""
    rows = [None, TinyClass(("k", "b")), None]
    assert merge_names("k", rows) == ("k", "b")


def test_wide_rows_contribute_every_column() -> None:
    """Verify that inputs with several namespaces add all of them."""
    rows = [TinyClass(("k", "a1", "")), TinyClass(("k", "b1"))]
    assert merge_names("k", rows) == ("k", "a1", "k", "b1")


def test_duplicate_namespaces_are_not_collapsed() -> None:
    """Verify that the same name from two inputs appears twice."""
    rows = [TinyClass(("k", "same")), TinyClass(("k", "same"))]
    assert merge_names("k", rows) == ("k", "same", "same")
