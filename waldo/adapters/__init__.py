"""Graph adapters for specific kinds of object graphs.

Adapters implement the GraphAdapter interface, enabling Waldo to search
any graph whose slots can be enumerated.
"""

from .objects import ObjectGraphAdapter
from .jsondoc import JsonGraphAdapter

__all__ = [
    "ObjectGraphAdapter",
    "JsonGraphAdapter",
]
