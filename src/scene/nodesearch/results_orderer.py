from typing import List, Optional

from scene.directory import NodeDirectory
from scene.models import Node, Timeline


class ResultOrderer:
    """Order query results by their position in a timeline."""

    def __init__(self, directory: NodeDirectory):
        self.directory = directory

    def order(
        self, nodes: List[Node], timeline: Optional[Timeline] = None
    ) -> List[Node]:
        """Sort nodes by ascending timeline index.

        The sort is stable, so ties keep discovery order. Nodes without a
        layer in the timeline go after every indexed node.
        """
        if timeline is None:
            timeline = self.directory.default_timeline()

        def sort_key(node: Node):
            index = node.timeline_index(timeline)
            return (index is None, index if index is not None else 0)

        return sorted(nodes, key=sort_key)
