import logging
from typing import List, Optional

from models.enums import Shortcut
from openharmony.config import SearchSettings
from scene.directory import NodeDirectory
from scene.models import Node

from .filter_evaluator import FilterEvaluator
from .pattern_matcher import PatternMatcher
from .query_parser import QueryParser
from .results_orderer import ResultOrderer

logger = logging.getLogger(__name__)


class QueryEngine:
    """Execute node search queries."""

    def __init__(
        self, directory: NodeDirectory, settings: Optional[SearchSettings] = None
    ):
        self.directory = directory
        self.settings = settings or SearchSettings()
        self.parser = QueryParser()
        self.matcher = PatternMatcher(directory, self.settings.regex_prefix_mode)
        self.evaluator = FilterEvaluator(directory)
        self.orderer = ResultOrderer(directory)

    def search(self, query: str, sort_result: Optional[bool] = None) -> List[Node]:
        """Find the nodes matching a query.

        Query syntax: ``NAMES#TYPE[ATTR:VALUE,...](OPTION,...)`` where NAMES
        is a comma separated list of node paths, wildcards ('*', '?') or
        regex terms, and every part is optional.

        Args:
            query: Search query, e.g. "Top/*#PEG(SELECTED)"
            sort_result: Sort by timeline index. Defaults to the
                sort_by_default setting.

        Returns:
            Matching nodes. A query that cannot be parsed returns an empty list.
        """
        if sort_result is None:
            sort_result = self.settings.sort_by_default

        logger.debug(f"QUERYING: {query}")
        parsed = self.parser.parse(query)

        if parsed.shortcut is not None:
            nodes = self._run_shortcut(parsed.shortcut)
        elif not parsed.matched:
            return []
        else:
            if parsed.name_pattern:
                nodes = self.matcher.match_terms(parsed.terms).nodes
            else:
                nodes = self.directory.list_all_nodes()
            nodes = self.evaluator.apply(nodes, parsed.filters)

        if sort_result:
            nodes = self.orderer.order(nodes)

        logger.debug(f"Query {query!r} matched {len(nodes)} node(s)")
        return nodes

    def _run_shortcut(self, shortcut: Shortcut) -> List[Node]:
        if shortcut == Shortcut.ALL:
            return self.directory.list_all_nodes()

        if shortcut == Shortcut.SELECTED:
            return self.directory.selected_nodes(recurse=True)

        selected = set(self.directory.selected_paths())
        return [
            node
            for node in self.directory.list_all_nodes()
            if node.path not in selected and node.exists
        ]
