from .filter_evaluator import FilterEvaluator
from .pattern_matcher import MatchSet, PatternMatcher, wildcard_to_regex
from .query_engine import QueryEngine
from .query_parser import FilterSegment, ParsedQuery, QueryParser
from .results_orderer import ResultOrderer

__all__ = [
    "QueryEngine",
    "QueryParser",
    "ParsedQuery",
    "FilterSegment",
    "PatternMatcher",
    "MatchSet",
    "wildcard_to_regex",
    "FilterEvaluator",
    "ResultOrderer",
]
