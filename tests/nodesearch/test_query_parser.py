"""Tests for the node search query parser."""

import pytest

from models.enums import FilterKind, Shortcut
from scene.nodesearch import QueryParser


@pytest.fixture
def parser():
    return QueryParser()


class TestShortcuts:
    """Whole-query shortcuts bypass the grammar."""

    def test_star_is_all_nodes(self, parser):
        parsed = parser.parse("*")
        assert parsed.shortcut == Shortcut.ALL
        assert parsed.terms == []

    @pytest.mark.parametrize("query", ["SELECTED", "(SELECTED)"])
    def test_selected(self, parser, query):
        assert parser.parse(query).shortcut == Shortcut.SELECTED

    @pytest.mark.parametrize(
        "query",
        [
            "(NOT SELECTED)",
            "NOT SELECTED",
            "(! SELECTED)",
            "! SELECTED",
            "(UNSELECTED)",
            "UNSELECTED",
        ],
    )
    def test_not_selected(self, parser, query):
        assert parser.parse(query).shortcut == Shortcut.NOT_SELECTED

    @pytest.mark.parametrize("query", ["selected", " SELECTED", "**", "(!SELECTED)"])
    def test_shortcuts_are_exact(self, parser, query):
        assert parser.parse(query).shortcut is None


class TestGrammar:
    def test_name_only(self, parser):
        parsed = parser.parse("Top/Peg1")
        assert parsed.matched
        assert parsed.name_pattern == "Top/Peg1"
        assert parsed.terms == ["Top/Peg1"]
        assert parsed.filters == []

    def test_type_filter(self, parser):
        parsed = parser.parse("*#GROUP")
        assert parsed.terms == ["*"]
        assert parsed.type_filter == "GROUP"
        assert parsed.filters[0].kind == FilterKind.TYPE

    def test_all_filters_in_order(self, parser):
        parsed = parser.parse("Top/*#peg[scale.x:1,pivot](selected, not selected)")
        assert parsed.terms == ["Top/*"]
        assert [f.kind for f in parsed.filters] == [
            FilterKind.TYPE,
            FilterKind.ATTRIBUTE,
            FilterKind.OPTION,
        ]
        assert parsed.type_filter == "peg"
        assert parsed.attribute_filter == [("SCALE.X", "1"), ("PIVOT", None)]
        assert parsed.option_filter == ["SELECTED", "NOT SELECTED"]

    def test_filters_without_name_pattern(self, parser):
        parsed = parser.parse("#READ(SELECTED)")
        assert parsed.matched
        assert parsed.name_pattern == ""
        assert parsed.terms == []
        assert parsed.type_filter == "READ"
        assert parsed.option_filter == ["SELECTED"]

    def test_option_without_type(self, parser):
        parsed = parser.parse("*(SELECTED)")
        assert parsed.type_filter is None
        assert parsed.attribute_filter is None
        assert parsed.option_filter == ["SELECTED"]

    def test_unmatched_query(self, parser):
        parsed = parser.parse("Top/Peg1\nTop/Peg2")
        assert parsed.matched is False
        assert parsed.terms == []

    def test_to_dict(self, parser):
        data = parser.parse("A,B#PEG").to_dict()
        assert data["terms"] == ["A", "B"]
        assert data["type_filter"] == "PEG"
        assert data["shortcut"] is None


class TestSplitTerms:
    def test_comma_list(self, parser):
        assert parser.split_terms("A,B,C") == ["A", "B", "C"]

    def test_escaped_comma(self, parser):
        assert parser.split_terms("A\\,B,C") == ["A,B", "C"]

    def test_empty_terms_dropped(self, parser):
        assert parser.split_terms("A,,B,") == ["A", "B"]

    def test_trailing_escape(self, parser):
        assert parser.split_terms("A,B\\") == ["A", "B"]

    def test_empty_pattern(self, parser):
        assert parser.split_terms("") == []
