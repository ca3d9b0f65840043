"""Centralized Pydantic models and enums for node search."""

from models.enums import FilterKind, NodeType, Shortcut, TermKind
from models.snapshot import NodeRecord, SceneSnapshot

__all__ = [
    # Enums
    "FilterKind",
    "NodeType",
    "Shortcut",
    "TermKind",
    # Snapshot models
    "NodeRecord",
    "SceneSnapshot",
]
