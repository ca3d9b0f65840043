"""Scene facade: node access and node search for one host scene."""

from pathlib import Path
from typing import List, Optional, Union

from openharmony.config import SearchSettings
from openharmony.constants import ROOT_GROUP_PATH
from scene.directory import NodeDirectory
from scene.host import InMemoryHost, SceneHost
from scene.models import GroupNode, Node, Timeline
from scene.nodesearch import QueryEngine


class Scene:
    """Entry point to the nodes of a scene.

    Node listings are computed on every call rather than exposed as
    properties, since each one goes back to the host.
    """

    def __init__(self, host: SceneHost, settings: Optional[SearchSettings] = None):
        """Initialize the scene.

        Args:
            host: Host that owns the node graph
            settings: Search settings, defaults to SearchSettings()
        """
        self.host = host
        self.settings = settings or SearchSettings()
        self.directory = NodeDirectory(host, cache_enabled=self.settings.cache_enabled)
        self.engine = QueryEngine(self.directory, self.settings)

    @classmethod
    def from_snapshot_file(
        cls, path: Union[str, Path], settings: Optional[SearchSettings] = None
    ) -> "Scene":
        """Create a scene over a JSON snapshot file.

        Raises:
            SnapshotError: If the snapshot cannot be loaded
        """
        return cls(InMemoryHost.from_file(path), settings=settings)

    def nodes(self) -> List[Node]:
        """Return every node in the scene."""
        return self.directory.list_all_nodes()

    def root(self) -> Optional[GroupNode]:
        """Return the root group ("Top"), or None if the scene has none."""
        node = self.directory.resolve_by_path(ROOT_GROUP_PATH)
        return node if isinstance(node, GroupNode) else None

    def get_node_by_path(self, path: str) -> Optional[Node]:
        """Return the node at path, or None if it does not exist."""
        return self.directory.resolve_by_path(path)

    def get_selected_nodes(
        self, recurse: bool = False, sort_result: bool = False
    ) -> List[Node]:
        """Return the selected nodes.

        Args:
            recurse: Include the content of selected groups
            sort_result: Sort by timeline index of the default display

        Returns:
            Selected nodes, in selection order unless sorted
        """
        nodes = self.directory.selected_nodes(recurse=recurse)
        if sort_result:
            nodes = self.engine.orderer.order(nodes)
        return nodes

    def node_search(self, query: str, sort_result: Optional[bool] = None) -> List[Node]:
        """Search nodes with a query. See QueryEngine.search for the syntax."""
        return self.engine.search(query, sort_result=sort_result)

    search = node_search

    def get_timeline(self, display: Optional[str] = None) -> Timeline:
        """Return the timeline of a display, the default display if omitted."""
        return Timeline(display or self.host.default_display())

    def default_display(self) -> Optional[Node]:
        """Return the default display node, if the scene has one."""
        display = self.host.default_display()
        if not display:
            return None
        return self.directory.resolve_by_path(display)

    def invalidate(self, path: Optional[str] = None) -> None:
        """Drop cached node wrappers after changing the graph."""
        self.directory.invalidate(path)
