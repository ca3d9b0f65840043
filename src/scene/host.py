"""Host abstraction for the Harmony scripting surface.

The host owns the node graph. Everything the query engine knows about
nodes, selection and timeline order is read through the small set of
stringly-typed calls defined by ``SceneHost``, mirroring the native
``node``, ``selection`` and timeline APIs.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import ValidationError

from models.snapshot import NodeRecord, SceneSnapshot

logger = logging.getLogger(__name__)


class SnapshotError(ValueError):
    """Raised when a scene snapshot cannot be read or validated."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Invalid scene snapshot {self.path}: {reason}")


class SceneHost(ABC):
    """Abstract interface over the host application's node graph."""

    @abstractmethod
    def node_paths(self) -> List[str]:
        """Return every node path in host enumeration order."""
        pass

    @abstractmethod
    def node_type(self, path: str) -> str:
        """Return the type tag of a node, or "" if no node exists at path."""
        pass

    @abstractmethod
    def selected_paths(self) -> List[str]:
        """Return the currently selected node paths in selection order."""
        pass

    @abstractmethod
    def timeline_index(self, path: str, display: str) -> Optional[int]:
        """Return the layer index of a node in a display's timeline."""
        pass

    def default_display(self) -> str:
        """Return the path of the scene's default display node."""
        return ""


class InMemoryHost(SceneHost):
    """A mutable node graph held in memory.

    Used to replay snapshots captured from a running host, and as the
    injected collaborator in tests. Nodes keep their insertion order,
    which stands in for the host's enumeration order.
    """

    def __init__(self, default_display: str = ""):
        self._types: Dict[str, str] = {}
        self._selection: List[str] = []
        self._timelines: Dict[str, Dict[str, int]] = {}
        self._default_display = default_display

    @classmethod
    def from_snapshot(cls, snapshot: SceneSnapshot) -> "InMemoryHost":
        """Create a host populated from a validated snapshot."""
        host = cls(default_display=snapshot.default_display)
        for record in snapshot.nodes:
            host.add_node(record.path, record.type, record.timeline_index)
        for display, indices in snapshot.timelines.items():
            for path, index in indices.items():
                host.set_timeline_index(path, index, display=display)
        host.select(*snapshot.selection)
        return host

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "InMemoryHost":
        """Load a JSON snapshot file and create a host from it.

        Raises:
            SnapshotError: If the file is missing, is not JSON, or does not
                match the snapshot schema.
        """
        snapshot_path = Path(path)
        try:
            with snapshot_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise SnapshotError(snapshot_path, str(e)) from e
        except json.JSONDecodeError as e:
            raise SnapshotError(snapshot_path, f"not valid JSON ({e})") from e

        try:
            snapshot = SceneSnapshot.model_validate(data)
        except ValidationError as e:
            raise SnapshotError(snapshot_path, str(e)) from e

        logger.debug(
            f"Loaded snapshot {snapshot_path} with {len(snapshot.nodes)} node(s)"
        )
        return cls.from_snapshot(snapshot)

    def to_snapshot(self) -> SceneSnapshot:
        """Capture the current state as a snapshot."""
        default_indices = self._timelines.get(self._default_display, {})
        return SceneSnapshot(
            nodes=[
                NodeRecord(path=p, type=t, timeline_index=default_indices.get(p))
                for p, t in self._types.items()
            ],
            selection=list(self._selection),
            default_display=self._default_display,
            timelines={
                display: dict(indices)
                for display, indices in self._timelines.items()
                if display != self._default_display
            },
        )

    def add_node(
        self, path: str, node_type: str, timeline_index: Optional[int] = None
    ) -> None:
        """Add a node, replacing any node that already lives at path."""
        self._types[path] = node_type
        if timeline_index is not None:
            self.set_timeline_index(path, timeline_index)

    def remove_node(self, path: str) -> None:
        """Remove a node. Its selection and timeline entries go with it."""
        self._types.pop(path, None)
        self._selection = [p for p in self._selection if p != path]
        for indices in self._timelines.values():
            indices.pop(path, None)

    def select(self, *paths: str) -> None:
        """Add paths to the selection, ignoring unknown or already selected ones."""
        for path in paths:
            if path in self._types and path not in self._selection:
                self._selection.append(path)

    def clear_selection(self) -> None:
        self._selection = []

    def set_timeline_index(
        self, path: str, index: int, display: Optional[str] = None
    ) -> None:
        """Set a node's layer index, for the default display unless given."""
        key = self._default_display if display is None else display
        self._timelines.setdefault(key, {})[path] = index

    def node_paths(self) -> List[str]:
        return list(self._types)

    def node_type(self, path: str) -> str:
        return self._types.get(path, "")

    def selected_paths(self) -> List[str]:
        return [p for p in self._selection if p in self._types]

    def timeline_index(self, path: str, display: str) -> Optional[int]:
        indices = self._timelines.get(display)
        if indices is not None and path in indices:
            return indices[path]
        # Displays without their own ordering follow the default display.
        return self._timelines.get(self._default_display, {}).get(path)

    def default_display(self) -> str:
        return self._default_display
