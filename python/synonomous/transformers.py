"""Pluggable string transformers.

Each transformer is a plain function taking a label and returning an
alternate form of it (a "synonym"). Transformers are looked up by name in a
registry so callers can select and order them.

Built-ins:
    - verbatim: the label unchanged
    - toCamelCase: "background-color" -> "backgroundColor"
    - toAllCaps: "background-color" -> "BACKGROUND_COLOR"
    - toTitle: "background-color" -> "Background Color"

Usage:
    from synonomous.transformers import get_transformer, register_transformer

    to_caps = get_transformer("toAllCaps")
    to_caps("borderLeft")  # "BORDER_LEFT"

    # Register custom transformer
    register_transformer("toLower", str.lower)
"""

import logging
import re
from typing import Callable, Iterator, Optional

logger = logging.getLogger(__name__)

Transformer = Callable[[str], str]

# Prepended to digit-initial identifier keys
SENTINEL = "$"

CAMEL_CASE_PATTERN = re.compile(r"[^a-zA-Z0-9]+([a-zA-Z0-9])?")
ALL_CAPS_SEPARATOR_PATTERN = re.compile(r"[^a-zA-Z0-9]+")
ALL_CAPS_BOUNDARY_PATTERN = re.compile(r"(?<=[a-z])(?=[A-Z])")
TITLE_SEPARATOR_PATTERN = re.compile(r"[\s\-_]+")
TITLE_CAPITALS_PATTERN = re.compile(r"(?<=[^\sA-Z])([A-Z]+)")
TITLE_ACRONYM_PATTERN = re.compile(r"(?<=[A-Z])(?=[A-Z][a-z])")
LEADING_DIGIT_PATTERN = re.compile(r"^(\d)")
SENTINEL_DIGIT_PATTERN = re.compile(r"^" + re.escape(SENTINEL) + r"(?=\d)")
LOWER_PATTERN = re.compile(r"[a-z]")


class UnknownTransformerError(LookupError):
    """Raised when a transformer name is not registered."""

    def __init__(self, name: str, available: Optional[list[str]] = None):
        self.name = name
        self.available = available or []
        message = f'Unknown transformer: "{name}"'
        if self.available:
            message += f". Available: {self.available}"
        super().__init__(message)


def _prefix_leading_digit(key: str) -> str:
    return LEADING_DIGIT_PATTERN.sub(lambda m: SENTINEL + m.group(1), key)


def verbatim(key) -> str:
    """Return the label as a plain string."""
    return str(key)


def to_camel_case(key: str) -> str:
    """Convert a label to a camelCase identifier.

    Runs of non-alphanumeric characters are dropped and the character that
    follows each run is upper-cased. A digit-initial result gets the sentinel
    prefix; otherwise the first letter is lower-cased.

    Args:
        key: Label to convert.

    Returns:
        camelCase form, e.g. "background-color" -> "backgroundColor".
    """
    result = CAMEL_CASE_PATTERN.sub(
        lambda m: m.group(1).upper() if m.group(1) else "", key
    )
    if LEADING_DIGIT_PATTERN.match(result):
        return _prefix_leading_digit(result)
    if result[:1].isupper():
        result = result[0].lower() + result[1:]
    return result


def to_all_caps(key: str) -> str:
    """Convert a label to an ALL_CAPS identifier.

    Args:
        key: Label to convert.

    Returns:
        Upper-cased, underscore-separated form,
        e.g. "borderLeft" -> "BORDER_LEFT".
    """
    # a leading sentinel is dropped here and re-added below
    result = SENTINEL_DIGIT_PATTERN.sub("", key)
    result = ALL_CAPS_SEPARATOR_PATTERN.sub("_", result)
    result = ALL_CAPS_BOUNDARY_PATTERN.sub("_", result)
    return _prefix_leading_digit(result).upper()


def to_title(key: str) -> str:
    """Convert a label to a space-separated title.

    The result is meant for display and may contain spaces. Input with no
    lower-case letters is lower-cased first so "BACKGROUND_COLOR" reads as
    "Background Color" rather than "BACKGROUND COLOR".

    Args:
        key: Label to convert.

    Returns:
        Title form, e.g. "HTTPRequest" -> "HTTP Request".
    """
    if not LOWER_PATTERN.search(key):
        key = key.lower()
    words = [
        word[0].upper() + word[1:]
        for word in TITLE_SEPARATOR_PATTERN.split(key)
        if word
    ]
    result = " ".join(words)
    result = TITLE_CAPITALS_PATTERN.sub(r" \1", result)
    result = TITLE_ACRONYM_PATTERN.sub(" ", result)
    return result.strip()


BUILTIN_TRANSFORMERS: dict[str, Transformer] = {
    "verbatim": verbatim,
    "toCamelCase": to_camel_case,
    "toAllCaps": to_all_caps,
    "toTitle": to_title,
}


class TransformerRegistry:
    """Mapping of transformer name to transformer function."""

    def __init__(self, transformers: Optional[dict[str, Transformer]] = None):
        self._transformers: dict[str, Transformer] = dict(transformers or {})

    def register(self, name: str, fn: Transformer) -> None:
        """Register a transformer, replacing any existing one of that name.

        Args:
            name: Name to register under.
            fn: Function taking a string and returning a string.
        """
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Transformer name must be a non-blank string, got {name!r}")
        if not callable(fn):
            raise ValueError(f"Transformer {name!r} must be callable")
        self._transformers[name] = fn
        logger.debug("Registered transformer %r", name)

    def unregister(self, name: str) -> None:
        """Remove a transformer."""
        if name not in self._transformers:
            raise UnknownTransformerError(name, self.names())
        del self._transformers[name]

    def resolve(self, name: str) -> Transformer:
        """Get a transformer by name.

        Raises:
            UnknownTransformerError: If nothing is registered under `name`.
        """
        try:
            return self._transformers[name]
        except KeyError:
            raise UnknownTransformerError(name, self.names()) from None

    def names(self) -> list[str]:
        """List registered transformer names in registration order."""
        return list(self._transformers.keys())

    def copy(self) -> "TransformerRegistry":
        return TransformerRegistry(self._transformers)

    def __contains__(self, name: object) -> bool:
        return name in self._transformers

    def __iter__(self) -> Iterator[str]:
        return iter(self._transformers)

    def __len__(self) -> int:
        return len(self._transformers)

    def __repr__(self) -> str:
        return f"TransformerRegistry({self.names()})"


# Shared default registry
TRANSFORMERS = TransformerRegistry(BUILTIN_TRANSFORMERS)


def get_transformer(name: str) -> Transformer:
    """Get a transformer from the shared registry."""
    return TRANSFORMERS.resolve(name)


def register_transformer(name: str, fn: Transformer) -> None:
    """Register a transformer in the shared registry.

    Affects every decorator that has no private registry.
    """
    TRANSFORMERS.register(name, fn)


def list_transformers() -> list[str]:
    """List transformer names in the shared registry."""
    return TRANSFORMERS.names()


def transform(name: str, key: str) -> str:
    """Apply the named transformer from the shared registry to `key`."""
    return get_transformer(name)(key)
