"""Scene module for node search.

This module exposes the Harmony node graph through typed node wrappers and
the node search query engine.
"""

from .directory import NodeDirectory
from .host import InMemoryHost, SceneHost, SnapshotError
from .lookup import NodeLookup
from .models import DrawingNode, GroupNode, Node, PegNode, Timeline, node_class_for
from .scene import Scene

__all__ = [
    "Scene",
    "SceneHost",
    "InMemoryHost",
    "SnapshotError",
    "NodeDirectory",
    "NodeLookup",
    "Node",
    "DrawingNode",
    "PegNode",
    "GroupNode",
    "Timeline",
    "node_class_for",
]
