"""Waldo - Object Graph Search.

Waldo finds things in deeply nested, possibly self-referential Python
data: every slot with a given name, every value of a given kind, every
slot holding a given value, or every slot a predicate accepts.

    >>> import waldo
    >>> data = {"a": {"b": {"c": 12}}}
    >>> [m.line for m in waldo.by_name("c", {"object": data, "path": "data"})]
    ['data.a.b.c -> (number)']

For an isolated configuration (own root, adapter, debug sink) create a
Finder:

    from waldo import Finder, FinderConfig
    finder = Finder(FinderConfig(root=data, root_label="data", debug=True))
"""

__version__ = "0.1.0"

from .api import (
    Finder,
    by_name,
    by_kind,
    by_value,
    custom,
    set_debug,
    is_debug,
    get_default_finder,
)
from .config import FinderConfig, SearchOptions
from .core import (
    GraphAdapter,
    Kind,
    Match,
    UNDEFINED,
    OBJECT_LABEL,
    DEFAULT_ROOT_LABEL,
)
from .adapters import ObjectGraphAdapter, JsonGraphAdapter
from .errors import WaldoError, InvalidOptionsError

__all__ = [
    "__version__",
    # API
    "Finder",
    "by_name",
    "by_kind",
    "by_value",
    "custom",
    "set_debug",
    "is_debug",
    "get_default_finder",
    # Config
    "FinderConfig",
    "SearchOptions",
    # Core
    "GraphAdapter",
    "Kind",
    "Match",
    "UNDEFINED",
    "OBJECT_LABEL",
    "DEFAULT_ROOT_LABEL",
    # Adapters
    "ObjectGraphAdapter",
    "JsonGraphAdapter",
    # Errors
    "WaldoError",
    "InvalidOptionsError",
]
