"""Search settings loaded from the environment."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from openharmony.constants import (
    REGEX_PREFIX_EXACT,
    REGEX_PREFIX_MODES,
)

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment, falling back to default."""
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning(f"Ignoring invalid value for {name}: '{raw}'. Using {default}.")
    return default


@dataclass
class SearchSettings:
    """Configuration for the node search engine.

    Attributes:
        regex_prefix_mode: How "re:" terms are recognised. "exact" keeps the
            legacy behaviour where only the bare "re:" term is a regex term;
            "startswith" treats "re:<pattern>" as a regex over <pattern>.
        sort_by_default: Default for the sort_result argument of search().
        cache_enabled: Whether resolved nodes are kept in the lookup cache.
    """

    regex_prefix_mode: str = REGEX_PREFIX_EXACT
    sort_by_default: bool = True
    cache_enabled: bool = True

    def __post_init__(self):
        if self.regex_prefix_mode not in REGEX_PREFIX_MODES:
            raise ValueError(
                f"Unknown regex prefix mode '{self.regex_prefix_mode}'. "
                f"Valid values: {', '.join(REGEX_PREFIX_MODES)}"
            )

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "SearchSettings":
        """Build settings from NODESEARCH_* environment variables.

        Args:
            env_file: Optional .env file to load before reading the environment.
        """
        load_dotenv(env_file)

        mode = os.getenv("NODESEARCH_REGEX_PREFIX", REGEX_PREFIX_EXACT).strip().lower()
        if mode not in REGEX_PREFIX_MODES:
            logger.warning(
                f"Invalid NODESEARCH_REGEX_PREFIX '{mode}'. "
                f"Valid values: {', '.join(REGEX_PREFIX_MODES)}. Using {REGEX_PREFIX_EXACT}."
            )
            mode = REGEX_PREFIX_EXACT

        return cls(
            regex_prefix_mode=mode,
            sort_by_default=_env_flag("NODESEARCH_SORT", True),
            cache_enabled=_env_flag("NODESEARCH_CACHE", True),
        )
