"""Configuration system for Waldo.

Two layers of configuration exist. ``FinderConfig`` is long-lived and
belongs to a Finder: the implicit root, its display label, which adapter
enumerates the graph, and where debug lines go. ``SearchOptions`` is per
call and only overrides the root and its label.
"""

import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from .core.adapter import GraphAdapter
from .core.paths import DEFAULT_ROOT_LABEL, OBJECT_LABEL


class _NotSet:
    """Marker for a FinderConfig root that was never given."""

    def __repr__(self) -> str:
        return "NOT_SET"


# Distinct from None, which is a legitimate root (a JSON ``null`` document)
NOT_SET = _NotSet()


@dataclass(frozen=True)
class SearchOptions:
    """Per-call overrides for where a search starts.

    Attributes:
        object: Root container to search (None = the finder's root)
        path: Label for the root in result paths (None = default label)
    """

    object: Any = None
    path: Optional[str] = None

    @classmethod
    def coerce(cls, options: Any) -> 'SearchOptions':
        """Build options from whatever a caller passed.

        Accepts a SearchOptions, a mapping with ``"object"`` and ``"path"``
        keys, or None. Anything malformed falls back to defaults rather
        than failing.

        Args:
            options: Caller-supplied options

        Returns:
            SearchOptions with invalid fields replaced by defaults
        """
        if isinstance(options, SearchOptions):
            obj, path = options.object, options.path
        elif isinstance(options, Mapping):
            obj, path = options.get("object"), options.get("path")
        else:
            return cls()

        if not isinstance(path, str):
            path = None
        return cls(object=obj, path=path)

    def resolve(self, default_root: Any, default_label: str) -> Tuple[Any, str]:
        """Pick the root and label a search will actually use.

        An explicit root is labelled ``<object>`` unless it is the finder's
        own root, which keeps its configured label. An explicit path,
        including ``""``, always wins.

        Returns:
            Tuple of (root, label)
        """
        if self.object is None or self.object is default_root:
            root, label = default_root, default_label
        else:
            root, label = self.object, OBJECT_LABEL

        if self.path is not None:
            label = self.path
        return root, label


@dataclass
class FinderConfig:
    """Complete configuration for a Finder.

    This is the primary way users control a Finder. Debug output lives
    here rather than in a module global, so independent finders can log
    independently.
    """

    # Implicit root (NOT_SET = the __main__ module, looked up per search)
    root: Any = NOT_SET
    root_label: str = DEFAULT_ROOT_LABEL

    # Graph enumeration (None = ObjectGraphAdapter)
    adapter: Optional[GraphAdapter] = None

    # Debug output
    debug: bool = False
    sink: Optional[Callable[[str], None]] = None  # None = package logger

    # Error handling for containers that fail to enumerate
    on_error: Optional[Callable[[Any, Exception], None]] = None

    def resolve_root(self) -> Any:
        """Return the configured root, or the ``__main__`` module."""
        if self.root is not NOT_SET:
            return self.root
        return sys.modules["__main__"]

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if not isinstance(self.root_label, str):
            errors.append("root_label must be a string")

        if self.adapter is not None and not isinstance(self.adapter, GraphAdapter):
            errors.append("adapter must be a GraphAdapter")

        if self.sink is not None and not callable(self.sink):
            errors.append("sink must be callable")

        if self.on_error is not None and not callable(self.on_error):
            errors.append("on_error must be callable")

        return errors

    # Convenience constructors for common configurations

    @classmethod
    def verbose(cls, sink: Optional[Callable[[str], None]] = None, **kwargs) -> 'FinderConfig':
        """Create config that writes every match line to ``sink``.

        Args:
            sink: Line consumer (default: the package logger)
            **kwargs: Other FinderConfig fields

        Returns:
            FinderConfig with debug output enabled
        """
        return cls(debug=True, sink=sink, **kwargs)

    @classmethod
    def for_json(cls, document: Any, root_label: str = "$", **kwargs) -> 'FinderConfig':
        """Create config for searching a decoded JSON document.

        Args:
            document: Result of ``json.load`` / ``json.loads``
            root_label: Label for the document root

        Returns:
            FinderConfig using the JsonGraphAdapter
        """
        from .adapters.jsondoc import JsonGraphAdapter
        return cls(root=document, root_label=root_label, adapter=JsonGraphAdapter(), **kwargs)
