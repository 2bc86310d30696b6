"""GraphAdapter abstraction for Waldo.

The adapter is the host-specific half of a search. It knows how to list a
container's own slots and which values are containers at all, so the
traversal engine never needs to know what kind of graph it is walking.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional, Tuple

from .kinds import Kind, classify


class GraphAdapter(ABC):
    """Abstract adapter for enumerating a specific kind of object graph.

    Subclasses decide what counts as a container and which of its slots are
    "own enumerable" slots. The traversal engine only ever talks to the
    graph through this interface.
    """

    @abstractmethod
    def iter_slots(self, container: Any) -> Iterator[Tuple[Any, Any]]:
        """Yield the container's own enumerable ``(key, value)`` pairs.

        The order must be stable across calls on an unchanged container,
        and inherited slots (class attributes, methods reached through the
        type) must never be yielded.

        Args:
            container: A value for which ``is_container`` is True

        Returns:
            Iterator of ``(key, value)`` pairs
        """
        pass

    @abstractmethod
    def is_container(self, value: Any) -> bool:
        """Check if a value has slots the search should descend into.

        Args:
            value: Any value found in a slot

        Returns:
            True if the engine should recurse into the value
        """
        pass

    def classify(self, value: Any) -> Kind:
        """Classify a value for summaries and kind matching.

        Default implementation uses ``waldo.core.kinds.classify``.
        """
        return classify(value)

    def prototype_of(self, value: Any) -> Optional[Any]:
        """Return the object a constructor-like value names as its prototype.

        Used to skip a prototype's own back-link to its constructor.
        Returns None when the value has no prototype.
        """
        return getattr(value, "prototype", None)
