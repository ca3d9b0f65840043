"""Path-keyed cache of node wrappers.

Resolving a path creates a typed wrapper (drawing, peg, group...). The
lookup keeps those wrappers so repeated queries hand back the same objects,
with the following staleness policy:
- Every hit re-reads the node type from the host; a changed type means a
  different node now lives at that path and the entry is rebuilt.
- A path the host no longer knows is evicted and resolves to None.
- Callers that mutate the graph can drop entries with invalidate().
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Dict, Optional

from scene.host import SceneHost
from scene.models import Node

logger = logging.getLogger(__name__)


class NodeCacheEntry:
    """Cache entry for a single resolved node."""

    def __init__(self, node: Node, cached_at: datetime):
        self.node = node
        self.cached_at = cached_at

    @property
    def age_seconds(self) -> float:
        return (datetime.now(timezone.utc) - self.cached_at).total_seconds()


class NodeLookup:
    """Resolve node paths to wrappers, caching by path."""

    def __init__(
        self,
        host: SceneHost,
        factory: Callable[[str, str], Node],
        enabled: bool = True,
    ):
        """Initialize the lookup.

        Args:
            host: Host that owns the node graph
            factory: Builds a wrapper from (path, type)
            enabled: When False every call builds a fresh wrapper
        """
        self.host = host
        self.factory = factory
        self.enabled = enabled
        self._entries: Dict[str, NodeCacheEntry] = {}
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, path: str) -> bool:
        return path in self._entries

    def get(self, path: str) -> Optional[Node]:
        """Return the node at path, or None if the host has no such node."""
        node_type = self.host.node_type(path)
        if not node_type:
            if self._entries.pop(path, None) is not None:
                logger.debug(f"Evicted stale node {path}")
            return None

        entry = self._entries.get(path)
        if entry is not None:
            if entry.node.type == node_type:
                self.hits += 1
                return entry.node
            logger.debug(
                f"Node {path} changed type {entry.node.type} -> {node_type}, rebuilding"
            )

        self.misses += 1
        node = self.factory(path, node_type)
        if self.enabled:
            self._entries[path] = NodeCacheEntry(node, datetime.now(timezone.utc))
        return node

    def invalidate(self, path: Optional[str] = None) -> None:
        """Drop the entry for path, or every entry when path is None."""
        if path is None:
            count = len(self._entries)
            self._entries.clear()
            logger.debug(f"Invalidated {count} cached node(s)")
            return
        self._entries.pop(path, None)
