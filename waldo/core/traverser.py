"""Depth-first search over object graphs.

The searcher walks a graph in pre-order, tests every own slot against a
predicate and records the hits. Cycles are cut with a per-search
VisitedSet; a slot pointing back at one of its ancestors is still matched
but rendered with a circular marker instead of being entered again.
"""

import logging
from typing import Any, Callable, Dict, Iterator, List, Optional

from .adapter import GraphAdapter
from .formatter import format_value
from .match import Match
from .paths import build_path

logger = logging.getLogger(__name__)

Predicate = Callable[[Any, Any, Any], Any]
ErrorHandler = Callable[[Any, Exception], None]


class VisitedSet:
    """Identity set of containers entered during one search.

    Also tracks which containers are on the current path, and the path
    each was entered under, so back-references can be rendered.
    """

    def __init__(self):
        # id -> object; holding the object keeps its id from being reused
        self._seen: Dict[int, Any] = {}
        self._ancestors: Dict[int, str] = {}

    def __contains__(self, obj: Any) -> bool:
        return id(obj) in self._seen

    def __len__(self) -> int:
        return len(self._seen)

    def enter(self, obj: Any, path: str) -> None:
        """Mark a container visited and push it onto the current path."""
        self._seen[id(obj)] = obj
        self._ancestors[id(obj)] = path

    def leave(self, obj: Any) -> None:
        """Pop a container off the current path. It stays visited."""
        self._ancestors.pop(id(obj), None)

    def ancestor_path(self, obj: Any) -> Optional[str]:
        """Path of ``obj`` if it is on the current path, else None."""
        return self._ancestors.get(id(obj))


class DepthFirstSearcher:
    """Pre-order, cycle-safe search strategy.

    Works with any GraphAdapter. Each call to ``search`` gets a fresh
    VisitedSet, so a searcher can be reused.
    """

    def __init__(self, adapter: GraphAdapter, on_error: Optional[ErrorHandler] = None):
        """Initialize searcher with an adapter.

        Args:
            adapter: GraphAdapter for enumerating the graph
            on_error: Called with ``(container, exception)`` when a
                container cannot be enumerated; the container is then
                skipped. Without it the exception propagates.
        """
        self.adapter = adapter
        self.on_error = on_error

    def search(self, root: Any, path_label: str, predicate: Predicate) -> List[Match]:
        """Collect every slot under ``root`` for which ``predicate`` holds.

        Args:
            root: Container to start from
            path_label: Path prefix for the root ("" for none)
            predicate: Called as ``predicate(value, key, owner)``

        Returns:
            Matches in discovery order
        """
        logger.debug("searching %s from %r", type(root).__name__, path_label)
        visited = VisitedSet()
        matches = list(self.iter_matches(root, path_label, predicate, visited))
        logger.debug("visited %d containers, %d matches", len(visited), len(matches))
        return matches

    def iter_matches(self,
                     root: Any,
                     path_label: str,
                     predicate: Predicate,
                     visited: Optional[VisitedSet] = None) -> Iterator[Match]:
        """Lazily yield matches in pre-order.

        Uses recursion (via generator) for natural depth-first behavior.
        """
        if visited is None:
            visited = VisitedSet()

        def _search_recursive(container: Any, path: str) -> Iterator[Match]:
            # Skip if already visited (handles cycles and shared subgraphs)
            if container in visited:
                return
            visited.enter(container, path)
            try:
                for key, value in self._slots(container):
                    if self._is_skipped(container, key, value):
                        continue

                    child_path = build_path(path, key)
                    if predicate(value, key, container):
                        summary = format_value(
                            value,
                            ancestor_path=visited.ancestor_path(value),
                            kind=self.adapter.classify(value),
                        )
                        yield Match(child_path, value, key, container, summary)

                    if self.adapter.is_container(value) and value not in visited:
                        yield from _search_recursive(value, child_path)
            finally:
                visited.leave(container)

        yield from _search_recursive(root, path_label)

    def _slots(self, container: Any) -> List:
        """Snapshot a container's slots, applying the error policy."""
        try:
            return list(self.adapter.iter_slots(container))
        except Exception as e:
            if self.on_error is None:
                raise
            self.on_error(container, e)
            return []

    def _is_skipped(self, owner: Any, key: Any, value: Any) -> bool:
        """Check the prototype/constructor back-link rule for a slot."""
        if key == "prototype":
            return True
        if key == "constructor":
            return self.adapter.prototype_of(value) is owner
        return False
