"""OpenHarmony node search - query the Harmony node graph with a path DSL."""

__version__ = "0.1.0"

__all__ = ["__version__"]
