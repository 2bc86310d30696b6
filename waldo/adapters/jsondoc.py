"""JSON document adapter for Waldo.

Restricts a search to JSON-shaped data: objects (dicts) and arrays
(lists). Anything else is a leaf, even if it has attributes. Used by the
command line tool, and useful for decoded API payloads.
"""

from typing import Any, Iterator, Optional, Tuple

from ..core.adapter import GraphAdapter


class JsonGraphAdapter(GraphAdapter):
    """Adapter for decoded JSON documents."""

    def iter_slots(self, container: Any) -> Iterator[Tuple[Any, Any]]:
        """Get members of an object or elements of an array."""
        if isinstance(container, dict):
            return iter(container.items())
        if isinstance(container, list):
            return enumerate(container)
        return iter(())

    def is_container(self, value: Any) -> bool:
        return isinstance(value, (dict, list))

    def prototype_of(self, value: Any) -> Optional[Any]:
        """Documents spell the constructor back-link as a ``prototype`` member."""
        if isinstance(value, dict):
            return value.get("prototype")
        return None
