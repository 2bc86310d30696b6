"""Path strings for matched slots.

Paths read like the Python expression that would reach the slot from the
root label: ``root.a.b``, ``root.items[0]``, ``root["my key"]``.
"""

import json
import keyword
from typing import Any

# Label used when a caller passes an explicit root object but no path
OBJECT_LABEL = "<object>"

# Label used for the finder's implicit default root (the __main__ module)
DEFAULT_ROOT_LABEL = "__main__"


def is_identifier(key: Any) -> bool:
    """Check if a key can be written after a dot."""
    return isinstance(key, str) and key.isidentifier() and not keyword.iskeyword(key)


def build_path(prefix: str, key: Any) -> str:
    """Extend a path by one step.

    Args:
        prefix: Path of the owning container ("" for an unlabelled root)
        key: Slot key (attribute name, mapping key or sequence index)

    Returns:
        The child's path string
    """
    if not prefix:
        return str(key)
    if is_identifier(key):
        return f"{prefix}.{key}"
    if isinstance(key, str):
        return f"{prefix}[{json.dumps(key, ensure_ascii=False)}]"
    return f"{prefix}[{key!r}]"
