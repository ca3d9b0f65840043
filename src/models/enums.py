"""Enums for node search models."""

from enum import Enum


class NodeType(str, Enum):
    """Node type tags reported by the Harmony host."""

    READ = "READ"
    PEG = "PEG"
    GROUP = "GROUP"
    COMPOSITE = "COMPOSITE"
    DISPLAY = "DISPLAY"
    WRITE = "WRITE"
    CAMERA = "CAMERA"
    MULTIPORT_IN = "MULTIPORT_IN"
    MULTIPORT_OUT = "MULTIPORT_OUT"
    CUTTER = "CUTTER"
    COLOR_CARD = "COLOR_CARD"


class FilterKind(str, Enum):
    """Kinds of filter segment that can follow a name pattern."""

    TYPE = "type"
    ATTRIBUTE = "attribute"
    OPTION = "option"


class TermKind(str, Enum):
    """How a single name term is resolved against the node graph."""

    WILDCARD = "wildcard"
    REGEX = "regex"
    EXACT = "exact"


class Shortcut(str, Enum):
    """Whole-query shortcuts recognised before the query grammar."""

    ALL = "all"
    SELECTED = "selected"
    NOT_SELECTED = "not_selected"
