"""High-level API for Waldo.

The Finder class ties a configuration, an adapter and the depth-first
searcher together behind four entry points. The module-level functions
wrap a shared default Finder for quick interactive use:

    >>> import waldo
    >>> config = {"db": {"hosts": ["a", "b"], "port": 5432}}
    >>> [m.line for m in waldo.by_name("port", {"object": config})]
    ['<object>.db.port -> (number)']
"""

import logging
import sys
from typing import Any, Callable, List, Optional, Type

from .adapters.objects import ObjectGraphAdapter
from .config import FinderConfig, SearchOptions
from .core.adapter import GraphAdapter
from .core.match import Match
from .core.matchers import (
    Matcher,
    NameMatcher,
    KindMatcher,
    ValueMatcher,
    CustomMatcher,
)
from .core.traverser import DepthFirstSearcher
from .errors import InvalidOptionsError

logger = logging.getLogger("waldo")


def log_line(line: str) -> None:
    """Default debug sink.

    Writes through the ``waldo`` logger when it is enabled for INFO, so
    applications that configure logging get the lines in their handlers.
    Otherwise the line goes to stderr, since an unconfigured logging
    setup drops INFO records.
    """
    if logger.isEnabledFor(logging.INFO):
        logger.info(line)
    else:
        print(line, file=sys.stderr)


class Finder:
    """Searches object graphs for slots matching a criterion.

    Each entry point returns None when its criterion has the wrong type,
    and otherwise a list of Match records in discovery order (possibly
    empty). With ``config.debug`` set, every match line is also written to
    the configured sink.

    Example:
        >>> finder = Finder(FinderConfig(root=settings, root_label="settings"))
        >>> finder.by_kind("function")
    """

    def __init__(self, config: Optional[FinderConfig] = None):
        """Create a finder.

        Args:
            config: Finder configuration (default: FinderConfig())

        Raises:
            InvalidOptionsError: If the configuration does not validate
        """
        self.config = config if config is not None else FinderConfig()
        config_errors = self.config.validate()
        if config_errors:
            raise InvalidOptionsError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )
        self._default_adapter = ObjectGraphAdapter()

    @property
    def adapter(self) -> GraphAdapter:
        return self.config.adapter or self._default_adapter

    @property
    def debug(self) -> bool:
        return self.config.debug

    @debug.setter
    def debug(self, flag: bool) -> None:
        self.config.debug = bool(flag)

    def by_name(self, name: str, options: Any = None) -> Optional[List[Match]]:
        """Find slots whose key is exactly ``name``.

        Args:
            name: Attribute name or mapping key
            options: SearchOptions or ``{"object": ..., "path": ...}``

        Returns:
            Matches, or None if ``name`` is not a string
        """
        return self._find(NameMatcher, name, options)

    def by_kind(self, kind: Any, options: Any = None) -> Optional[List[Match]]:
        """Find values of a kind (``"array"``, ``"null"``, ...) or class.

        Args:
            kind: Kind name, class name, or a class for isinstance checks
            options: SearchOptions or ``{"object": ..., "path": ...}``

        Returns:
            Matches, or None if ``kind`` is neither a string nor a class
        """
        return self._find(KindMatcher, kind, options)

    def by_value(self, value: Any, options: Any = None) -> Optional[List[Match]]:
        """Find slots holding ``value``, compared strictly.

        Returns:
            Matches (any value is a valid criterion)
        """
        return self._find(ValueMatcher, value, options)

    def custom(self,
               predicate: Callable[[Any, Any, Any], Any],
               options: Any = None) -> Optional[List[Match]]:
        """Find slots for which ``predicate(value, key, owner)`` is truthy.

        Returns:
            Matches, or None if ``predicate`` is not callable
        """
        return self._find(CustomMatcher, predicate, options)

    def _find(self, matcher_cls: Type[Matcher], criterion: Any, options: Any) -> Optional[List[Match]]:
        adapter = self.adapter
        matcher = matcher_cls.create(criterion, adapter)
        if matcher is None:
            logger.debug("%s rejected criterion %r", matcher_cls.__name__, criterion)
            return None

        root, label = SearchOptions.coerce(options).resolve(
            self.config.resolve_root(), self.config.root_label
        )
        searcher = DepthFirstSearcher(adapter, on_error=self.config.on_error)
        matches = searcher.search(root, label, matcher)

        if self.config.debug:
            sink = self.config.sink or log_line
            for match in matches:
                sink(match.line)

        return matches


# Shared finder behind the module-level functions
_default_finder = Finder()


def get_default_finder() -> Finder:
    """Return the Finder used by the module-level functions."""
    return _default_finder


def set_debug(flag: bool) -> None:
    """Toggle debug output for the module-level functions.

    Lines go to the ``waldo`` logger at INFO when that level is enabled,
    and to stderr otherwise.
    """
    _default_finder.debug = flag


def is_debug() -> bool:
    """Check whether the module-level functions write debug lines."""
    return _default_finder.debug


def by_name(name: str, options: Any = None) -> Optional[List[Match]]:
    """Find slots named ``name``. See Finder.by_name."""
    return _default_finder.by_name(name, options)


def by_kind(kind: Any, options: Any = None) -> Optional[List[Match]]:
    """Find values of a kind or class. See Finder.by_kind."""
    return _default_finder.by_kind(kind, options)


def by_value(value: Any, options: Any = None) -> Optional[List[Match]]:
    """Find slots holding ``value``. See Finder.by_value."""
    return _default_finder.by_value(value, options)


def custom(predicate: Callable[[Any, Any, Any], Any], options: Any = None) -> Optional[List[Match]]:
    """Find slots accepted by ``predicate``. See Finder.custom."""
    return _default_finder.custom(predicate, options)
