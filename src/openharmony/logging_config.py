import logging.config
import os
import sys
from typing import Optional

from dotenv import load_dotenv
from rich.console import Console

# Load environment variables from .env file
load_dotenv()

LOG_FILE_NAME = "nodesearch.log"

# Per-term tracing of the query pipeline lives under this logger
SEARCH_LOGGER = "scene.nodesearch"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _resolve_level(env_name: str, value: Optional[str], default: str) -> str:
    """Return a valid level name from an explicit value or the environment."""
    raw = value if value is not None else os.getenv(env_name, default)
    level = raw.strip().upper()
    if level not in _LEVELS:
        print(
            f"Warning: Invalid {env_name} '{raw}'. "
            f"Valid values: {', '.join(_LEVELS)}. Using {default}.",
            file=sys.stderr,
        )
        return default
    return level


def setup_logging(
    level: Optional[str] = None,
    search_level: Optional[str] = None,
    log_dir: Optional[str] = None,
) -> dict:
    """
    Configures logging for the node search tools.

    Explicit arguments win over environment variables:
    - LOG_DIR: Directory for nodesearch.log (default: "logs")
    - LOG_LEVEL: Level of the root logger (default: "INFO")
    - NODESEARCH_LOG_LEVEL: Level of the query pipeline loggers
      (term classification, filter passes, stale nodes). Defaults to
      WARNING so a DEBUG root level does not drown in per-term tracing;
      set it to DEBUG to follow a search step by step.

    Handlers do not filter by level, so each logger's own level decides
    what reaches the console and the log file.

    Returns:
        The dictConfig mapping that was applied
    """
    log_dir = log_dir or os.getenv("LOG_DIR", "logs")
    root_level = _resolve_level("LOG_LEVEL", level, "INFO")
    pipeline_level = _resolve_level("NODESEARCH_LOG_LEVEL", search_level, "WARNING")

    os.makedirs(log_dir, exist_ok=True)

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(message)s",
            },
            "detailed": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            },
        },
        "handlers": {
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "filename": os.path.join(log_dir, LOG_FILE_NAME),
                "maxBytes": 1024 * 1024 * 5,  # 5 MB
                "backupCount": 5,
                "formatter": "detailed",
            },
            "rich": {
                "class": "rich.logging.RichHandler",
                "rich_tracebacks": True,
                "show_path": False,
                "formatter": "default",
                "console": Console(file=sys.stderr),
            },
        },
        "loggers": {
            SEARCH_LOGGER: {
                "level": pipeline_level,
            },
        },
        "root": {
            "level": root_level,
            "handlers": ["file", "rich"],
        },
    }

    logging.config.dictConfig(logging_config)
    logging.getLogger(__name__).debug(
        f"Logging configured. Level: {root_level}, search level: {pipeline_level}"
    )
    return logging_config
