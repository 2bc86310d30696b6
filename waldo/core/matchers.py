"""Match criteria for Waldo searches.

A Matcher turns a user criterion (a name, a kind, a value or a callable)
into the ``(value, key, owner) -> bool`` predicate the searcher calls at
every slot. Each matcher's ``create`` factory returns None when the
criterion has the wrong shape, which the public API passes straight back
to the caller.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from .adapter import GraphAdapter
from .kinds import resolve_kind_name


class Matcher(ABC):
    """Abstract base class for match criteria."""

    def __init__(self, criterion: Any, adapter: GraphAdapter):
        """Initialize matcher with its criterion.

        Args:
            criterion: The validated search criterion
            adapter: GraphAdapter used to classify values
        """
        self.criterion = criterion
        self.adapter = adapter

    @classmethod
    def create(cls, criterion: Any, adapter: GraphAdapter) -> Optional["Matcher"]:
        """Build a matcher, or return None if the criterion is invalid."""
        if not cls.accepts(criterion):
            return None
        return cls(criterion, adapter)

    @staticmethod
    @abstractmethod
    def accepts(criterion: Any) -> bool:
        """Check the runtime shape of a criterion."""
        pass

    @abstractmethod
    def __call__(self, value: Any, key: Any, owner: Any) -> bool:
        """Test one slot."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.criterion!r})"


class NameMatcher(Matcher):
    """Matches slots whose key is exactly the given name."""

    @staticmethod
    def accepts(criterion: Any) -> bool:
        return isinstance(criterion, str)

    def __call__(self, value: Any, key: Any, owner: Any) -> bool:
        return isinstance(key, str) and key == self.criterion


class KindMatcher(Matcher):
    """Matches values of a kind, a class name, or instances of a class.

    String kinds are case-insensitive: ``"array"``, ``"Array"`` and the
    alias ``"list"`` all select lists and tuples. A string that is not a
    kind is compared to the value's class name instead.
    """

    def __init__(self, criterion: Any, adapter: GraphAdapter):
        super().__init__(criterion, adapter)
        if isinstance(criterion, str):
            self._kind = resolve_kind_name(criterion)
            self._name = criterion.lower()

    @staticmethod
    def accepts(criterion: Any) -> bool:
        return isinstance(criterion, (str, type))

    def __call__(self, value: Any, key: Any, owner: Any) -> bool:
        if isinstance(self.criterion, type):
            return isinstance(value, self.criterion)
        if self._kind is not None and self.adapter.classify(value) is self._kind:
            return True
        return type(value).__name__.lower() == self._name


class ValueMatcher(Matcher):
    """Matches values strictly, with no coercion.

    Containers match by identity only. Other values also match when they
    are equal and of exactly the same type, so ``"12"`` never matches
    ``12`` and ``1`` never matches ``True``.
    """

    @staticmethod
    def accepts(criterion: Any) -> bool:
        return True

    def __call__(self, value: Any, key: Any, owner: Any) -> bool:
        target = self.criterion
        if value is target:
            return True
        if type(value) is not type(target) or self.adapter.is_container(target):
            return False
        return bool(value == target)


class CustomMatcher(Matcher):
    """Delegates to a caller-supplied ``(value, key, owner)`` callable."""

    @staticmethod
    def accepts(criterion: Any) -> bool:
        return callable(criterion)

    def __call__(self, value: Any, key: Any, owner: Any) -> bool:
        predicate: Callable[[Any, Any, Any], Any] = self.criterion
        return bool(predicate(value, key, owner))
