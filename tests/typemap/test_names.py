"""
Tests for display names and reference name normalization.
"""

from typing import Annotated, ForwardRef, Optional

import pytest

from graphmap.typemap import Reference, display_name, normalize_name

from ..conftest import CustomStruct


class TestNormalizeName:
    """Tests for normalize_name."""

    def test_plain_name_unchanged(self):
        assert normalize_name("Foo") == "Foo"

    def test_plain_name_with_spaces_unchanged(self):
        assert normalize_name("Foo Bar") == "Foo Bar"

    def test_synthetic_name_truncated_at_first_space(self):
        assert normalize_name("(Foo) -> Bar extra text") == "Foo)"

    def test_synthetic_name_without_space(self):
        assert normalize_name("(Foo)->Bar") == "Foo)->Bar"

    def test_only_leading_parenthesis_dropped(self):
        assert normalize_name("((Foo, Bar)) rest") == "(Foo,"

    def test_lone_parenthesis(self):
        assert normalize_name("(") == ""

    def test_parenthesis_then_space(self):
        assert normalize_name("( Foo") == ""


class TestDisplayName:
    """Tests for display_name."""

    @pytest.mark.parametrize(
        "annotation,expected",
        [
            (int, "int"),
            (CustomStruct, "CustomStruct"),
            ("Node", "Node"),
            (ForwardRef("Node"), "Node"),
            (None, "None"),
            (type(None), "None"),
            (list[int], "list[int]"),
        ],
    )
    def test_display_name(self, annotation, expected):
        assert display_name(annotation) == expected

    def test_optional_spelled_as_union(self):
        assert display_name(Optional[int]) == "int | None"
        assert display_name(CustomStruct | None) == "CustomStruct | None"

    def test_generic_alias_without_module_prefixes(self):
        assert display_name(list[CustomStruct]) == "list[CustomStruct]"
        assert display_name(dict[str, list[CustomStruct]]) == "dict[str, list[CustomStruct]]"
        assert display_name(tuple[int, ...]) == "tuple[int, ...]"

    def test_annotated_uses_underlying_type(self):
        assert display_name(Annotated[int, "meta"]) == "int"

    def test_reference_marker(self):
        assert display_name(Reference[CustomStruct]) == "Reference[CustomStruct]"
        assert display_name(Reference["Node"]) == "Reference[Node]"
