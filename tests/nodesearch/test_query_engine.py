"""End-to-end tests for node search queries."""

import pytest

from openharmony.config import SearchSettings
from scene import InMemoryHost, NodeDirectory
from scene.nodesearch import QueryEngine

ALL_PATHS = [
    "Top",
    "Top/Display",
    "Top/Composite",
    "Top/Peg1",
    "Top/Drawing1",
    "Top/Group1",
    "Top/Group1/Peg2",
    "Top/Group1/Drawing2",
    "Top/A1",
    "Top/B,C",
]


def _paths(nodes):
    return [node.path for node in nodes]


def _timeline_indices(nodes):
    return [node.timeline_index() for node in nodes]


@pytest.fixture
def engine(directory):
    return QueryEngine(directory)


class TestShortcuts:
    def test_star_returns_all_existing_nodes_unsorted(self, engine):
        assert _paths(engine.search("*", sort_result=False)) == ALL_PATHS

    def test_star_sorted(self, engine):
        result = engine.search("*")
        assert sorted(_paths(result)) == sorted(ALL_PATHS)
        assert _paths(result)[:3] == ["Top/Group1/Drawing2", "Top/Group1", "Top/Peg1"]

    @pytest.mark.parametrize("query", ["SELECTED", "(SELECTED)"])
    def test_selected_recurses_into_groups(self, engine, query):
        result = engine.search(query, sort_result=False)
        assert _paths(result) == [
            "Top/Peg1",
            "Top/Group1",
            "Top/Group1/Peg2",
            "Top/Group1/Drawing2",
        ]

    def test_selected_sorted(self, engine):
        result = engine.search("SELECTED")
        assert _paths(result) == [
            "Top/Group1/Drawing2",
            "Top/Group1",
            "Top/Peg1",
            "Top/Group1/Peg2",
        ]

    @pytest.mark.parametrize(
        "query",
        [
            "NOT SELECTED",
            "(NOT SELECTED)",
            "! SELECTED",
            "(! SELECTED)",
            "UNSELECTED",
            "(UNSELECTED)",
        ],
    )
    def test_not_selected(self, engine, query):
        result = engine.search(query, sort_result=False)
        expected = [p for p in ALL_PATHS if p not in ("Top/Peg1", "Top/Group1")]
        assert _paths(result) == expected


class TestQueries:
    def test_exact_name(self, engine):
        assert _paths(engine.search("Top/Peg1")) == ["Top/Peg1"]

    def test_missing_name_returns_empty(self, engine):
        assert engine.search("Top/Nothing") == []

    def test_wildcard_matches_children_and_descendants(self, engine):
        result = _paths(engine.search("Top/*", sort_result=False))
        assert "Top/Peg1" in result
        assert "Top/Group1/Peg2" in result

    def test_type_filter(self, engine):
        assert _paths(engine.search("*#GROUP", sort_result=False)) == [
            "Top",
            "Top/Group1",
        ]
        assert _paths(engine.search("*#group", sort_result=False)) == [
            "Top",
            "Top/Group1",
        ]

    def test_selected_and_not_selected_partition(self, engine):
        selected = set(_paths(engine.search("*(SELECTED)")))
        not_selected = set(_paths(engine.search("*(NOT SELECTED)")))

        assert selected == {"Top/Peg1", "Top/Group1"}
        assert selected.isdisjoint(not_selected)
        assert selected | not_selected == set(ALL_PATHS)

    def test_option_filter_does_not_recurse(self, engine):
        result = _paths(engine.search("Top/Group1/*(SELECTED)"))
        assert result == []

    def test_filters_without_names_use_all_nodes(self, engine):
        assert _paths(engine.search("#PEG", sort_result=False)) == [
            "Top/Peg1",
            "Top/Group1/Peg2",
        ]

    def test_type_and_option_filters(self, engine):
        assert _paths(engine.search("*#PEG(NOT SELECTED)")) == ["Top/Group1/Peg2"]

    def test_attribute_filter_passes_everything(self, engine):
        result = engine.search("Top/Group1/*[POSITION.X:0]", sort_result=False)
        assert _paths(result) == ["Top/Group1/Peg2", "Top/Group1/Drawing2"]

    def test_unknown_option_is_ignored(self, engine):
        assert _paths(engine.search("Top/Peg1(LOCKED)")) == ["Top/Peg1"]

    def test_escaped_comma_is_one_term(self, engine):
        result = engine.search("Top/B\\,C,Top/A1", sort_result=False)
        assert _paths(result) == ["Top/B,C", "Top/A1"]

    def test_unparseable_query_returns_empty(self, engine):
        assert engine.search("Top/Peg1\nTop/A1") == []

    def test_empty_query_returns_all_nodes(self, engine):
        assert _paths(engine.search("", sort_result=False)) == ALL_PATHS

    @pytest.mark.parametrize("query", [",", "\\", ",,", ",#PEG", "\\(SELECTED)"])
    def test_names_without_terms_match_nothing(self, engine, query):
        assert engine.search(query) == []


class TestOrdering:
    def test_sorted_output_is_non_decreasing(self, engine):
        result = engine.search("Top/Peg1,Top/Group1/*,Top/A1")
        indices = _timeline_indices(result)
        assert indices == [0, 2, 4, 5]
        assert indices == sorted(indices)

    def test_type_filter_swallows_later_names(self, engine):
        # Everything after '#' up to a bracket belongs to the type filter.
        assert engine.search("Top/*#READ,Top/Peg1") == []

    def test_unsorted_output_keeps_discovery_order(self, engine):
        result = engine.search("Top/A1,Top/Group1/*,Top/Peg1", sort_result=False)
        assert _paths(result) == [
            "Top/A1",
            "Top/Group1/Peg2",
            "Top/Group1/Drawing2",
            "Top/Peg1",
        ]

    def test_sort_default_from_settings(self, directory):
        engine = QueryEngine(directory, SearchSettings(sort_by_default=False))
        result = engine.search("Top/A1,Top/Peg1")
        assert _paths(result) == ["Top/A1", "Top/Peg1"]


class TestLiveGraph:
    def test_removed_node_is_excluded(self, host, engine):
        assert _paths(engine.search("Top/Peg1")) == ["Top/Peg1"]
        host.remove_node("Top/Peg1")
        assert engine.search("Top/Peg1") == []
        assert "Top/Peg1" not in _paths(engine.search("*"))

    def test_new_node_is_found_without_invalidation(self, host, engine):
        engine.search("*")
        host.add_node("Top/Peg3", "PEG", 7)
        assert "Top/Peg3" in _paths(engine.search("Top/Peg*"))

    def test_flat_names_dedup(self):
        host = InMemoryHost()
        for path in ["A1", "A2", "B1"]:
            host.add_node(path, "READ")
        engine = QueryEngine(NodeDirectory(host))

        result = engine.search("A*,*1", sort_result=False)

        assert _paths(result) == ["A1", "A2", "B1"]
