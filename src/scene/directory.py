"""Node directory: the query engine's view of the live node graph.

Wraps a ``SceneHost`` and hands out typed node wrappers. Nothing here
memoizes graph state beyond the wrappers in the lookup; every listing,
selection read and timeline read goes back to the host.
"""

import logging
from typing import List, Optional

from openharmony.constants import PATH_SEPARATOR
from scene.host import SceneHost
from scene.lookup import NodeLookup
from scene.models import GroupNode, Node, Timeline, node_class_for

logger = logging.getLogger(__name__)


class NodeDirectory:
    """Directory of nodes known to the host."""

    def __init__(self, host: SceneHost, cache_enabled: bool = True):
        """Initialize the directory.

        Args:
            host: Host that owns the node graph
            cache_enabled: Keep resolved wrappers in the node lookup
        """
        self.host = host
        self.lookup = NodeLookup(host, self._build_node, enabled=cache_enabled)

    def _build_node(self, path: str, node_type: str) -> Node:
        return node_class_for(node_type)(path, node_type, self)

    def list_all_nodes(self) -> List[Node]:
        """Return every existing node, in host enumeration order.

        The host is enumerated once; paths that vanish before they can be
        resolved are skipped.
        """
        nodes = []
        for path in self.host.node_paths():
            node = self.lookup.get(path)
            if node is None:
                logger.debug(f"Skipping stale node {path}")
                continue
            nodes.append(node)
        return nodes

    def resolve_by_path(self, path: str) -> Optional[Node]:
        return self.lookup.get(path)

    def node_exists(self, path: str) -> bool:
        return self.host.node_type(path) != ""

    def selected_paths(self) -> List[str]:
        return self.host.selected_paths()

    def is_selected(self, path: str) -> bool:
        return path in self.host.selected_paths()

    def selected_nodes(self, recurse: bool = False) -> List[Node]:
        """Return the selected nodes in selection order.

        Args:
            recurse: Also return the content of selected groups

        Returns:
            Existing nodes, each path at most once
        """
        nodes = []
        seen = set()

        def _add(node: Node) -> None:
            if node.path not in seen:
                seen.add(node.path)
                nodes.append(node)

        for path in self.host.selected_paths():
            node = self.lookup.get(path)
            if node is None:
                logger.debug(f"Skipping stale selected node {path}")
                continue
            _add(node)
            if recurse and isinstance(node, GroupNode):
                for child in node.sub_nodes(recurse=True):
                    _add(child)
        return nodes

    def sub_nodes(self, group_path: str, recurse: bool = False) -> List[Node]:
        """Return the nodes inside a group, nested ones too when recurse."""
        prefix = group_path + PATH_SEPARATOR
        nodes = []
        for path in self.host.node_paths():
            if not path.startswith(prefix):
                continue
            if not recurse and PATH_SEPARATOR in path[len(prefix):]:
                continue
            node = self.lookup.get(path)
            if node is not None:
                nodes.append(node)
        return nodes

    def default_timeline(self) -> Timeline:
        return Timeline(self.host.default_display())

    def timeline_index_of(self, path: str, timeline: Timeline) -> Optional[int]:
        display = timeline.display or self.host.default_display()
        return self.host.timeline_index(path, display)

    def invalidate(self, path: Optional[str] = None) -> None:
        """Forget cached wrappers after the caller changed the graph."""
        self.lookup.invalidate(path)
