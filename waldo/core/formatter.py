"""Value summaries for match lines."""

from typing import Any, Optional

from .kinds import Kind, classify


def format_kind(kind: Kind) -> str:
    """Render a kind tag such as ``(number)``."""
    return f"({kind.value})"


def format_value(value: Any, ancestor_path: Optional[str] = None, kind: Optional[Kind] = None) -> str:
    """Summarize a matched value.

    Args:
        value: The matched value
        ancestor_path: Path of the ancestor container this value is
            identical to, when the slot closes a cycle
        kind: Precomputed kind; classified from ``value`` when omitted

    Returns:
        ``(<ancestor_path>)`` for cycle back-references, else the kind tag
    """
    if ancestor_path is not None:
        return f"(<{ancestor_path}>)"
    return format_kind(kind if kind is not None else classify(value))
