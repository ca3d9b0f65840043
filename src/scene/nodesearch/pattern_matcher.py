import logging
import re
from typing import Iterable, Iterator, List, Optional, Pattern, Union

from models.enums import TermKind
from openharmony.constants import (
    REGEX_PREFIX_EXACT,
    REGEX_PREFIX_STARTSWITH,
    REGEX_TERM_PREFIX,
)
from scene.directory import NodeDirectory
from scene.models import Node

logger = logging.getLogger(__name__)


class MatchSet:
    """Nodes in discovery order, each path at most once.

    Paths can be marked as seen without adding a node, so a path that was
    already considered by an earlier term is not considered again.
    """

    def __init__(self, nodes: Optional[Iterable[Node]] = None):
        self._nodes: List[Node] = []
        self._seen = set()
        for node in nodes or []:
            self.add(node)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __contains__(self, item: Union[str, Node]) -> bool:
        path = item.path if isinstance(item, Node) else item
        return any(node.path == path for node in self._nodes)

    @property
    def nodes(self) -> List[Node]:
        return list(self._nodes)

    @property
    def paths(self) -> List[str]:
        return [node.path for node in self._nodes]

    def seen(self, path: str) -> bool:
        return path in self._seen

    def mark(self, path: str) -> None:
        self._seen.add(path)

    def add(self, node: Node) -> bool:
        """Add a node unless its path was already seen."""
        if node.path in self._seen:
            return False
        self._seen.add(node.path)
        self._nodes.append(node)
        return True


def wildcard_to_regex(term: str) -> Pattern:
    """Compile a wildcard term into an anchored, case-insensitive regex.

    '?' matches one character and '*' any run of characters, slashes
    included, so 'Top/*' matches nested paths too. Every other character is
    matched literally: 'Top/Peg[12]' looks for brackets in the name rather
    than a character class. Use a regex term for character classes.
    """
    parts = []
    for char in term:
        if char == "?":
            parts.append(".")
        elif char == "*":
            parts.append(".*?")
        else:
            parts.append(re.escape(char))
    return re.compile("^" + "".join(parts) + "$", re.IGNORECASE)


class PatternMatcher:
    """Resolve name terms into nodes."""

    def __init__(
        self, directory: NodeDirectory, regex_prefix_mode: str = REGEX_PREFIX_EXACT
    ):
        self.directory = directory
        self.regex_prefix_mode = regex_prefix_mode

    def is_regex_term(self, term: str) -> bool:
        if self.regex_prefix_mode == REGEX_PREFIX_STARTSWITH:
            return term.startswith(REGEX_TERM_PREFIX)
        # Legacy scripts only ever recognise the bare prefix.
        return term == REGEX_TERM_PREFIX

    def regex_source(self, term: str) -> str:
        """Regex text used for a regex term."""
        if self.regex_prefix_mode == REGEX_PREFIX_STARTSWITH:
            return term[len(REGEX_TERM_PREFIX):]
        return term

    def classify(self, term: str) -> TermKind:
        """Decide how a term is resolved.

        Wildcards win over the regex prefix, except in "startswith" mode
        where "re:" terms are regexes whatever characters they contain.
        """
        if self.regex_prefix_mode == REGEX_PREFIX_STARTSWITH and self.is_regex_term(
            term
        ):
            return TermKind.REGEX
        if "*" in term or "?" in term:
            return TermKind.WILDCARD
        if self.is_regex_term(term):
            return TermKind.REGEX
        return TermKind.EXACT

    def match_terms(
        self, terms: List[str], all_nodes: Optional[List[Node]] = None
    ) -> MatchSet:
        """Resolve terms in order into a single MatchSet.

        Args:
            terms: Name terms, as split by the parser
            all_nodes: Node listing to test wildcard and regex terms
                against. Fetched once from the directory when needed.

        Returns:
            Existing nodes matched by any term, in discovery order
        """
        match_set = MatchSet()

        for term in terms:
            kind = self.classify(term)
            logger.debug(f"{kind.value.upper()} NODE QUERY: {term}")

            if kind == TermKind.EXACT:
                self._match_exact(term, match_set)
                continue

            if kind == TermKind.WILDCARD:
                regex = wildcard_to_regex(term)
            else:
                try:
                    regex = re.compile(self.regex_source(term), re.IGNORECASE)
                except re.error as e:
                    logger.warning(f"Ignoring invalid regex term {term!r}: {e}")
                    continue

            if all_nodes is None:
                all_nodes = self.directory.list_all_nodes()
            self._match_regex(regex, kind, all_nodes, match_set)

        return match_set

    def _match_regex(
        self,
        regex: Pattern,
        kind: TermKind,
        all_nodes: List[Node],
        match_set: MatchSet,
    ) -> None:
        # Wildcards are anchored over the whole path, raw regexes search it.
        test = regex.match if kind == TermKind.WILDCARD else regex.search
        for node in all_nodes:
            if match_set.seen(node.path):
                continue
            if not test(node.path):
                continue
            if node.exists:
                match_set.add(node)
            else:
                logger.debug(f"Skipping stale node {node.path}")
                match_set.mark(node.path)

    def _match_exact(self, term: str, match_set: MatchSet) -> None:
        if match_set.seen(term):
            return
        node = self.directory.resolve_by_path(term)
        if node is not None and node.exists:
            match_set.add(node)
        else:
            logger.debug(f"No node at {term}")
            match_set.mark(term)
