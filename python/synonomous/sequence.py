"""List addressable by position and by synonym keys."""

import re
from typing import Any, Iterable, Iterator

INDEX_PATTERN = re.compile(r"^(0|[1-9][0-9]*)$")


class SynonymList(list):
    """A list that also carries named keys, each referencing an element.

    Integer and slice access behave exactly as for `list`. String keys look up
    the named entries, except that index-like strings ("0", "1", ...) are
    reserved for positions: one naming an existing position addresses it, and
    one past the end cannot be used as a named key. Equality and `in` are
    plain list semantics over the positional elements.

    Example:
        >>> items = SynonymList(["borderLeft"])
        >>> items["BORDER_LEFT"] = items[0]
        >>> items["BORDER_LEFT"]
        'borderLeft'
    """

    def __init__(self, iterable: Iterable[Any] = ()):
        super().__init__(iterable)
        self._named: dict[str, Any] = {}

    def _position(self, key: str):
        if INDEX_PATTERN.match(key):
            index = int(key)
            if index < len(self):
                return index
        return None

    def is_position(self, key: Any) -> bool:
        """Check whether `key` is a string naming an existing position."""
        return isinstance(key, str) and self._position(key) is not None

    def is_reserved(self, key: Any) -> bool:
        """Check whether `key` is an index-like string, in range or not."""
        return isinstance(key, str) and bool(INDEX_PATTERN.match(key))

    def __getitem__(self, key):
        if isinstance(key, str):
            index = self._position(key)
            if index is not None:
                return super().__getitem__(index)
            return self._named[key]
        return super().__getitem__(key)

    def __setitem__(self, key, value):
        if isinstance(key, str):
            index = self._position(key)
            if index is not None:
                super().__setitem__(index, value)
            elif self.is_reserved(key):
                raise KeyError(f"{key!r} is reserved for list positions")
            else:
                self._named[key] = value
            return
        super().__setitem__(key, value)

    def __delitem__(self, key):
        if isinstance(key, str) and self._position(key) is None:
            del self._named[key]
            return
        if isinstance(key, str):
            key = int(key)
        super().__delitem__(key)

    def has_key(self, key: Any) -> bool:
        """Check whether `key` is a named key or an existing position."""
        if isinstance(key, int) and not isinstance(key, bool):
            return -len(self) <= key < len(self)
        if isinstance(key, str):
            return key in self._named or self._position(key) is not None
        return False

    def get(self, key: Any, default: Any = None) -> Any:
        if not self.has_key(key):
            return default
        return self[key]

    def keys(self) -> Iterator[str]:
        """Iterate named keys in insertion order."""
        return iter(list(self._named))

    def synonyms(self) -> dict[str, Any]:
        """Copy of the named keys and the elements they reference."""
        return dict(self._named)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, keys={list(self._named)!r})"
