import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from models.enums import FilterKind, Shortcut
from openharmony.constants import QUERY_ALL, QUERY_NOT_SELECTED, QUERY_SELECTED

logger = logging.getLogger(__name__)

# PATH/WILDCARD#TYPE[ATTRIBUTE:VALUE,...](OPTION,...)
QUERY_GRAMMAR = re.compile(r"(.*?)(#.*?)?(\[.*\])?(\(.*\))?")


@dataclass
class FilterSegment:
    """A filter following the name pattern.

    Only the field matching ``kind`` is populated: ``value`` for a type
    filter, ``attributes`` for an attribute filter and ``options`` for an
    option filter.
    """

    kind: FilterKind
    raw: str
    value: Optional[str] = None
    attributes: List[Tuple[str, Optional[str]]] = field(default_factory=list)
    options: List[str] = field(default_factory=list)


@dataclass
class ParsedQuery:
    """Structured form of a node search query."""

    query: str
    shortcut: Optional[Shortcut] = None
    matched: bool = True
    name_pattern: str = ""
    terms: List[str] = field(default_factory=list)
    filters: List[FilterSegment] = field(default_factory=list)

    def _first(self, kind: FilterKind) -> Optional[FilterSegment]:
        for segment in self.filters:
            if segment.kind == kind:
                return segment
        return None

    @property
    def type_filter(self) -> Optional[str]:
        segment = self._first(FilterKind.TYPE)
        return segment.value if segment else None

    @property
    def attribute_filter(self) -> Optional[List[Tuple[str, Optional[str]]]]:
        segment = self._first(FilterKind.ATTRIBUTE)
        return segment.attributes if segment else None

    @property
    def option_filter(self) -> Optional[List[str]]:
        segment = self._first(FilterKind.OPTION)
        return segment.options if segment else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "query": self.query,
            "shortcut": self.shortcut.value if self.shortcut else None,
            "matched": self.matched,
            "name_pattern": self.name_pattern,
            "terms": list(self.terms),
            "type_filter": self.type_filter,
            "attribute_filter": self.attribute_filter,
            "option_filter": self.option_filter,
        }


class QueryParser:
    """Parse node search queries into a ParsedQuery."""

    def parse(self, query: str) -> ParsedQuery:
        """Parse a query string.

        Shortcut queries ("*", "SELECTED", "NOT SELECTED"...) are recognised
        verbatim before the grammar is tried. A query the grammar cannot
        match comes back with ``matched`` set to False.
        """
        shortcut = self.detect_shortcut(query)
        if shortcut is not None:
            return ParsedQuery(query=query, shortcut=shortcut)

        query_match = QUERY_GRAMMAR.fullmatch(query)
        if not query_match:
            logger.debug(f"Query does not match the search grammar: {query!r}")
            return ParsedQuery(query=query, matched=False)

        name_pattern, type_part, attribute_part, option_part = query_match.groups()

        filters = []
        if type_part:
            filters.append(
                FilterSegment(kind=FilterKind.TYPE, raw=type_part, value=type_part[1:])
            )
        if attribute_part:
            filters.append(
                FilterSegment(
                    kind=FilterKind.ATTRIBUTE,
                    raw=attribute_part,
                    attributes=self._parse_attributes(attribute_part),
                )
            )
        if option_part:
            filters.append(
                FilterSegment(
                    kind=FilterKind.OPTION,
                    raw=option_part,
                    options=self._parse_options(option_part),
                )
            )

        return ParsedQuery(
            query=query,
            name_pattern=name_pattern,
            terms=self.split_terms(name_pattern),
            filters=filters,
        )

    def detect_shortcut(self, query: str) -> Optional[Shortcut]:
        """Return the shortcut a whole query stands for, if any."""
        if query == QUERY_ALL:
            return Shortcut.ALL
        if query in QUERY_SELECTED:
            return Shortcut.SELECTED
        if query in QUERY_NOT_SELECTED:
            return Shortcut.NOT_SELECTED
        return None

    def split_terms(self, name_pattern: str) -> List[str]:
        """Split a name pattern on commas.

        A backslash at the end of a piece escapes the comma that follows
        it: the backslash is dropped and the piece is joined to the next
        one with a literal comma. Empty terms are dropped.

        Examples:
            'A,B' -> ['A', 'B']
            'A\\,B,C' -> ['A,B', 'C']
        """
        terms = []
        pending = ""
        for piece in name_pattern.split(","):
            if piece.endswith("\\"):
                pending += piece[:-1] + ","
                continue
            terms.append(pending + piece)
            pending = ""

        if pending:
            # Trailing escape with nothing after it: keep the text, not the comma.
            terms.append(pending[:-1])

        return [term for term in terms if term]

    def _parse_attributes(self, segment: str) -> List[Tuple[str, Optional[str]]]:
        """Parse '[KEY,KEY:VALUE]' into (key, value) pairs."""
        attributes = []
        for item in segment[1:-1].upper().split(","):
            item = item.strip()
            if not item:
                continue
            if ":" in item:
                key, value = item.split(":", 1)
                attributes.append((key.strip(), value.strip()))
            else:
                attributes.append((item, None))
        return attributes

    def _parse_options(self, segment: str) -> List[str]:
        """Parse '(OPTION,OPTION)' into upper-cased tokens."""
        options = []
        for item in segment[1:-1].upper().split(","):
            item = item.strip()
            if item:
                options.append(item)
        return options
