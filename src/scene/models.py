"""Node wrappers for the Harmony node graph.

Nodes are identified by their full path ("Top/Group/Peg1"). A wrapper
never caches host state: ``exists`` and ``selected`` are re-read on every
access so that a node deleted by the user simply stops existing.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional, Type

from models.enums import NodeType
from openharmony.constants import PATH_SEPARATOR

if TYPE_CHECKING:
    from scene.directory import NodeDirectory


@dataclass(frozen=True)
class Timeline:
    """The layer stack of a display, used to order nodes.

    An empty display refers to the scene's default display.
    """

    display: str = ""


class Node:
    """A node in the scene graph, referenced by path."""

    def __init__(self, path: str, node_type: str, directory: "NodeDirectory"):
        self.path = path
        self.type = node_type
        self._directory = directory

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(path='{self.path}', type='{self.type}')>"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    @property
    def name(self) -> str:
        return self.path.rsplit(PATH_SEPARATOR, 1)[-1]

    @property
    def group(self) -> str:
        """Path of the group containing this node ("" for the root)."""
        if PATH_SEPARATOR not in self.path:
            return ""
        return self.path.rsplit(PATH_SEPARATOR, 1)[0]

    @property
    def exists(self) -> bool:
        return self._directory.node_exists(self.path)

    @property
    def selected(self) -> bool:
        return self._directory.is_selected(self.path)

    def timeline_index(self, timeline: Optional[Timeline] = None) -> Optional[int]:
        """Layer index of this node in a timeline, None if it has no layer."""
        if timeline is None:
            timeline = self._directory.default_timeline()
        return self._directory.timeline_index_of(self.path, timeline)

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "name": self.name,
            "type": self.type,
            "group": self.group,
        }


class DrawingNode(Node):
    """A drawing (READ) node."""


class PegNode(Node):
    """A peg (PEG) node."""


class GroupNode(Node):
    """A group node, which contains other nodes."""

    def sub_nodes(self, recurse: bool = False) -> List[Node]:
        """Return the nodes inside this group.

        Args:
            recurse: Include the content of nested groups as well

        Returns:
            Existing child nodes in host enumeration order
        """
        return self._directory.sub_nodes(self.path, recurse=recurse)


NODE_CLASSES: Dict[str, Type[Node]] = {
    NodeType.READ.value: DrawingNode,
    NodeType.PEG.value: PegNode,
    NodeType.GROUP.value: GroupNode,
}


def node_class_for(node_type: str) -> Type[Node]:
    """Pick the wrapper class for a host type tag, falling back to Node."""
    return NODE_CLASSES.get(node_type, Node)
