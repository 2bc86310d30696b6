"""Core abstractions for Waldo.

This package contains the traversal engine and the pieces it is built
from: adapters, matchers, kinds, paths and match records.
"""

from .adapter import GraphAdapter
from .kinds import Kind, UNDEFINED, classify, resolve_kind_name
from .match import Match
from .matchers import (
    Matcher,
    NameMatcher,
    KindMatcher,
    ValueMatcher,
    CustomMatcher,
)
from .paths import build_path, OBJECT_LABEL, DEFAULT_ROOT_LABEL
from .formatter import format_value
from .traverser import DepthFirstSearcher, VisitedSet

__all__ = [
    "GraphAdapter",
    "Kind",
    "UNDEFINED",
    "classify",
    "resolve_kind_name",
    "Match",
    "Matcher",
    "NameMatcher",
    "KindMatcher",
    "ValueMatcher",
    "CustomMatcher",
    "build_path",
    "OBJECT_LABEL",
    "DEFAULT_ROOT_LABEL",
    "format_value",
    "DepthFirstSearcher",
    "VisitedSet",
]
