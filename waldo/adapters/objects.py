"""Object graph adapter for Waldo.

This adapter enables Waldo to search ordinary Python object graphs:
mappings, lists and tuples, instances with ``__dict__`` or ``__slots__``,
functions carrying attributes, classes and modules.
"""

import numbers
import types
from collections.abc import Mapping
from typing import Any, Iterator, Tuple

from ..core.adapter import GraphAdapter
from ..core.kinds import UNDEFINED

# Values that never have slots of their own
_SCALARS = (str, bytes, bytearray, numbers.Number, type(None))


def is_dunder(name: Any) -> bool:
    """Check for ``__special__`` names, which are never enumerable."""
    return isinstance(name, str) and len(name) > 4 and name.startswith("__") and name.endswith("__")


class ObjectGraphAdapter(GraphAdapter):
    """Adapter for plain Python object graphs.

    Own enumerable slots are:
    - mapping keys, in iteration order
    - list and tuple indices
    - an object's instance ``__dict__`` entries, then its populated
      ``__slots__``, skipping ``__special__`` names

    Class attributes reached only through ``type(obj)`` are inherited and
    are never enumerated.
    """

    def __init__(self,
                 follow_modules: bool = False,
                 include_private: bool = True):
        """Initialize object graph adapter.

        Args:
            follow_modules: Whether to descend into modules found in slots.
                A module passed as the search root is always enumerated.
            include_private: Whether to include ``_private`` attribute names
        """
        self.follow_modules = follow_modules
        self.include_private = include_private

    def iter_slots(self, container: Any) -> Iterator[Tuple[Any, Any]]:
        """Get own enumerable slots of a container."""
        if isinstance(container, Mapping):
            yield from container.items()
            return

        if isinstance(container, (list, tuple)):
            yield from enumerate(container)
            return

        namespace = getattr(container, "__dict__", None)
        if isinstance(namespace, Mapping):
            for name, value in namespace.items():
                if self._is_enumerable(name):
                    yield name, value

        for name in self._slot_names(container):
            if namespace is not None and name in namespace:
                continue
            try:
                value = getattr(container, name)
            except AttributeError:
                # Declared but never assigned
                continue
            yield name, value

    def is_container(self, value: Any) -> bool:
        """Check if a value has slots worth descending into."""
        if value is UNDEFINED or isinstance(value, _SCALARS):
            return False
        if isinstance(value, types.ModuleType):
            return self.follow_modules
        if isinstance(value, (Mapping, list, tuple)):
            return True
        return hasattr(value, "__dict__") or bool(self._slot_names(value))

    def _is_enumerable(self, name: Any) -> bool:
        if is_dunder(name):
            return False
        if not self.include_private and isinstance(name, str) and name.startswith("_"):
            return False
        return True

    def _slot_names(self, obj: Any) -> Tuple[str, ...]:
        """Collect ``__slots__`` declared anywhere in the object's MRO."""
        if isinstance(obj, type):
            return ()
        names = []
        for klass in type(obj).__mro__:
            slots = klass.__dict__.get("__slots__", ())
            if isinstance(slots, str):
                slots = (slots,)
            for name in slots:
                if name not in names and self._is_enumerable(name):
                    names.append(name)
        return tuple(names)
