"""Breadcrumb paths into nested objects.

A path is an ordered list of property names, written "a.b.c" for display.
The empty path refers to the object itself.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterator

from .sequence import SynonymList


@dataclass(frozen=True)
class Breadcrumbs:
    """Ordered path segments locating a nested value."""

    segments: tuple[str, ...] = ()

    @classmethod
    def from_value(cls, value: Any) -> "Breadcrumbs":
        """Build a path from a falsy value, a sequence of segments, or a dotted string.

        Args:
            value: None/"" for the empty path, a list or tuple of segments,
                another Breadcrumbs, or anything else (converted with str()
                and split on ".").

        Returns:
            New Breadcrumbs.
        """
        if isinstance(value, Breadcrumbs):
            return value
        if not value:
            return cls()
        if isinstance(value, (list, tuple)):
            return cls(tuple(str(segment) for segment in value))
        return cls(tuple(str(value).split(".")))

    def to_display_string(self) -> str:
        """Dot-joined form, e.g. "style.name"."""
        return ".".join(self.segments)

    def __iter__(self) -> Iterator[str]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __getitem__(self, index: int) -> str:
        return self.segments[index]


def to_path(value: Any) -> Breadcrumbs:
    """Shorthand for Breadcrumbs.from_value."""
    return Breadcrumbs.from_value(value)


def drilldown(root: Any, path: Any) -> Any:
    """Walk `path` from `root`, creating empty dicts where nothing is set.

    Missing segments, and falsy values that are not containers, get a new
    dict. Existing mappings and lists are kept even when empty, and a
    SynonymList position is never assigned. Works on anything supporting
    `get()` and item assignment (dicts, SynonymList).

    Args:
        root: Object to start from.
        path: Breadcrumbs or any value accepted by to_path.

    Returns:
        The object at the end of the path, or `root` for the empty path.

    Raises:
        TypeError: If a segment cannot be looked up on the current object.
    """
    result = root
    for crumb in to_path(path):
        if not hasattr(result, "get"):
            raise TypeError(f"Cannot drill into {type(result).__name__} at {crumb!r}")
        nested = result.get(crumb)
        if _is_vacant(nested) and not _is_position(result, crumb):
            nested = {}
            result[crumb] = nested
        result = nested
    return result


def _is_vacant(value: Any) -> bool:
    return value is None or (not value and not isinstance(value, (Mapping, list)))


def _is_position(container: Any, crumb: str) -> bool:
    return isinstance(container, SynonymList) and container.is_position(crumb)


def pluck(root: Any, path: Any, default: Any = None) -> Any:
    """Read the value at `path` without modifying anything.

    Mappings are read by key, other objects by attribute.

    Returns:
        The value found, or `default` if any segment is missing.
    """
    result = root
    for crumb in to_path(path):
        if isinstance(result, Mapping):
            if crumb not in result:
                return default
            result = result[crumb]
        elif hasattr(result, crumb):
            result = getattr(result, crumb)
        else:
            return default
    return result
