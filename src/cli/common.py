"""Shared utilities and helpers for the node search CLI."""

import logging
from dataclasses import replace
from typing import Optional

import typer
from rich.console import Console

from openharmony.config import SearchSettings
from scene import Scene, SnapshotError

# Shared console and logger
console = Console(record=True)
logger = logging.getLogger(__name__)


def load_scene(snapshot: str, regex_prefix: Optional[str] = None) -> Scene:
    """Load a scene from a snapshot file, exiting the CLI on failure."""
    settings = SearchSettings.from_env()
    if regex_prefix:
        try:
            settings = replace(settings, regex_prefix_mode=regex_prefix)
        except ValueError as e:
            logger.error(str(e))
            raise typer.Exit(1)

    try:
        return Scene.from_snapshot_file(snapshot, settings=settings)
    except SnapshotError as e:
        logger.error(f"Could not load scene: {e}")
        raise typer.Exit(1)
