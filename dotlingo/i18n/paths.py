"""Dotted-path lookup in nested mappings.

Shared by word lookups ("basic.greet" in a locale's words) and placeholder
lookups ("model.name" in the substitution data).
"""

from collections.abc import Mapping
from typing import Any, Optional


def split_path(path: str) -> list[str]:
    """Split a dotted path into its segments.

    Args:
        path: Dot-separated path (e.g., "basic.greet").

    Returns:
        List of segments (e.g., ["basic", "greet"]).
    """
    return path.split(".")


def resolve_path(tree: Any, path: str) -> Optional[Any]:
    """Walk a nested mapping along a dotted path.

    Args:
        tree: Nested mapping to walk. Anything else resolves to None.
        path: Dot-separated path (e.g., "model.name").

    Returns:
        The value at the path, which may itself be a mapping, or None if a
        segment is missing or a non-mapping is reached before the end.
    """
    current = tree
    for segment in split_path(path):
        if not isinstance(current, Mapping):
            return None
        current = current.get(segment)
        if current is None:
            return None
    return current
