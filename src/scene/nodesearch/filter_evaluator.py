import logging
from typing import List, Optional, Tuple

from models.enums import FilterKind
from openharmony.constants import OPTION_NOT_SELECTED, OPTION_SELECTED
from scene.directory import NodeDirectory
from scene.models import Node

from .query_parser import FilterSegment

logger = logging.getLogger(__name__)


class FilterEvaluator:
    """Narrow a node list with the filters of a query."""

    def __init__(self, directory: NodeDirectory):
        self.directory = directory

    def apply(self, nodes: List[Node], filters: List[FilterSegment]) -> List[Node]:
        """Apply filters left to right, each one narrowing the previous result."""
        filtered = list(nodes)
        for segment in filters:
            filtered = self._apply_filter(filtered, segment)
        return filtered

    def _apply_filter(self, nodes: List[Node], segment: FilterSegment) -> List[Node]:
        if segment.kind == FilterKind.TYPE:
            return self._filter_type(nodes, segment.value or "")
        elif segment.kind == FilterKind.ATTRIBUTE:
            return self._filter_attributes(nodes, segment.attributes)
        elif segment.kind == FilterKind.OPTION:
            return self._filter_options(nodes, segment.options)
        return nodes

    def _filter_type(self, nodes: List[Node], value: str) -> List[Node]:
        logger.debug(f"TYPE FILTER: {value}")
        match_val = value.upper()
        return [node for node in nodes if node.type.upper() == match_val]

    def _filter_attributes(
        self, nodes: List[Node], attributes: List[Tuple[str, Optional[str]]]
    ) -> List[Node]:
        # Attribute matching is not implemented: the filter is parsed so
        # queries using it stay valid, and every node passes.
        logger.debug(f"ATTRIBUTE FILTER (not evaluated): {attributes}")
        return nodes

    def _filter_options(self, nodes: List[Node], options: List[str]) -> List[Node]:
        filtered = nodes
        for option in options:
            if option == OPTION_SELECTED:
                selected = set(self.directory.selected_paths())
                filtered = [node for node in filtered if node.path in selected]
            elif option in OPTION_NOT_SELECTED:
                selected = set(self.directory.selected_paths())
                filtered = [node for node in filtered if node.path not in selected]
            else:
                logger.debug(f"Ignoring unknown option filter: {option}")
        return filtered
