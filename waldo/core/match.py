"""Match records returned by searches.

A Match is a plain data container: where a slot was found, what it held,
and how it should be summarized in a debug line.
"""

from dataclasses import dataclass, field
from typing import Any, Tuple


@dataclass(frozen=True)
class Match:
    """One slot in the graph that satisfied the search criterion.

    Attributes:
        path: Human-readable path to the slot, e.g. ``root.a.b``
        value: The value held by the slot (never copied)
        key: The slot key within its owner
        owner: The container holding the slot
        summary: Type tag such as ``(number)`` or a cycle marker
            such as ``(<root.a>)``
    """
    path: str
    value: Any = field(compare=False)
    key: Any
    owner: Any = field(compare=False, repr=False)
    summary: str

    @property
    def line(self) -> str:
        """Debug line written to the sink, ``path -> summary``."""
        return f"{self.path} -> {self.summary}"

    @property
    def debug_arguments(self) -> Tuple[Any, Any, Any]:
        """The ``(value, key, owner)`` triple a custom predicate receives."""
        return (self.value, self.key, self.owner)

    @property
    def is_circular(self) -> bool:
        """True if the slot refers back to one of its ancestors."""
        return self.summary.startswith("(<")

    def __str__(self) -> str:
        return self.line
