"""Synonym decorator.

Builds synonyms of element labels and attaches them as keys on a container
(usually the list holding the elements), each key referencing its element.

Core rules:
    - Synonyms are the non-blank results of the selected transformers, in
      selection order, without duplicates
    - A key that already exists on the container is never overwritten

Example:
    >>> items = SynonymList(["borderLeft", "background-color"])
    >>> _ = Synonomous(["verbatim", "toAllCaps"]).decorate_list(items)
    >>> items["BACKGROUND_COLOR"]
    'background-color'
"""

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, Iterable, Optional

from . import config as cfg
from .breadcrumbs import Breadcrumbs, drilldown, pluck, to_path
from .sequence import SynonymList
from .transformers import TRANSFORMERS, Transformer, TransformerRegistry

logger = logging.getLogger(__name__)


def _is_record(element: Any) -> bool:
    return isinstance(element, Mapping) or hasattr(element, "__dict__")


def _has_key(container: Any, key: str) -> bool:
    if isinstance(container, SynonymList):
        return container.is_reserved(key) or container.has_key(key)
    return key in container


def _check_container(container: Any) -> None:
    if not isinstance(container, (SynonymList, MutableMapping)):
        raise TypeError(
            f"Cannot attach keys to {type(container).__name__}; use SynonymList or a dict"
        )


class Synonomous:
    """Computes synonyms and decorates containers with them.

    Args:
        transformations: Transformer names to apply, in order.
        prop_path: Path within each list element to the label to make
            synonyms of. Empty means the element itself.
        dict_path: Path within the container where keys are attached.
            Empty means the container itself.
        registry: Private transformer registry. Defaults to the shared one.

    Falsy arguments fall back to the configured defaults (see config).
    """

    def __init__(
        self,
        transformations: Optional[Iterable[str]] = None,
        prop_path: Any = None,
        dict_path: Any = None,
        registry: Optional[TransformerRegistry] = None,
    ):
        self.transformations = transformations or cfg.default_transformations()
        self.prop_path = prop_path or cfg.default_prop_path()
        self.dict_path = dict_path or cfg.default_dict_path()
        self._registry = registry

    @property
    def transformations(self) -> list[str]:
        """Active transformer names, in synonym order."""
        return self._transformations

    @transformations.setter
    def transformations(self, names: Iterable[str]) -> None:
        if isinstance(names, str):
            names = [names]
        self._transformations = list(names)

    @property
    def prop_path(self) -> Breadcrumbs:
        return self._prop_path

    @prop_path.setter
    def prop_path(self, crumbs: Any) -> None:
        self._prop_path = to_path(crumbs)

    @property
    def dict_path(self) -> Breadcrumbs:
        return self._dict_path

    @dict_path.setter
    def dict_path(self, crumbs: Any) -> None:
        self._dict_path = to_path(crumbs)

    @property
    def registry(self) -> TransformerRegistry:
        if self._registry is None:
            return TRANSFORMERS
        return self._registry

    def register(self, name: str, fn: Transformer) -> None:
        """Register a transformer for this instance only.

        The shared registry is copied on first use and left untouched.
        """
        if self._registry is None:
            self._registry = TRANSFORMERS.copy()
        self._registry.register(name, fn)

    def get_synonyms(
        self,
        name: Any,
        transformations: Optional[Iterable[str]] = None,
    ) -> list[str]:
        """Make synonyms of `name`.

        Args:
            name: Label to make synonyms of.
            transformations: Overrides self.transformations for this call.

        Returns:
            Unique non-blank synonyms in transformer order, or an empty list
            if `name` is not a non-blank string.

        Raises:
            UnknownTransformerError: If a transformer name is not registered.
        """
        synonyms: list[str] = []
        if not isinstance(name, str) or not name.strip():
            return synonyms

        for key in transformations or self.transformations:
            synonym = self.registry.resolve(key)(name)
            if isinstance(synonym, str) and synonym.strip() and synonym not in synonyms:
                synonyms.append(synonym)
        return synonyms

    def decorate(
        self,
        container: Any,
        keys: Iterable[str],
        element: Any,
        dict_path: Any = None,
    ) -> Any:
        """Set each of `keys` on the container to `element`.

        Keys are placed at self.dict_path (or `dict_path`) within `container`,
        creating empty dicts along the way. Existing keys, including list
        positions and index-like strings on a SynonymList, are left alone.

        Raises:
            TypeError: If `container` or the value at the dict path cannot
                take named keys (anything but a SynonymList or a mapping).

        Returns:
            `container`
        """
        path = to_path(dict_path) if dict_path else self.dict_path
        _check_container(container)
        target = drilldown(container, path)
        _check_container(target)
        for key in keys:
            if _has_key(target, key):
                logger.debug("Skipping synonym %r: key already set", key)
                continue
            target[key] = element
        return container

    def decorate_list(
        self,
        items: Any,
        index: Optional[int] = None,
        prop_path: Any = None,
        transformations: Optional[Iterable[str]] = None,
        dict_path: Any = None,
    ) -> Any:
        """Add synonyms of list elements as keys on the list.

        Args:
            items: Elements to make synonyms of, and the container to
                decorate (at self.dict_path). Use a SynonymList to decorate
                the list itself.
            index: Only decorate with `items[index]`. None means every element.
            prop_path: Overrides self.prop_path for this call.
            transformations: Overrides self.transformations for this call.
            dict_path: Overrides self.dict_path for this call.

        Record elements (mappings or objects) supply the value at the prop
        path; other elements are converted with str().

        Returns:
            `items`
        """
        elements = list(items) if index is None else [items[index]]
        path = to_path(prop_path) if prop_path else self.prop_path
        for element in elements:
            label = self._label(element, path)
            synonyms = self.get_synonyms(label, transformations)
            self.decorate(items, synonyms, element, dict_path)
        return items

    def decorate_all(self, items: Any, prop_path: Any = None) -> Any:
        """Decorate `items` with synonyms of every element."""
        return self.decorate_list(items, prop_path=prop_path)

    def decorate_one(self, index: int, items: Any, prop_path: Any = None) -> Any:
        """Decorate `items` with synonyms of `items[index]` only."""
        return self.decorate_list(items, index=index, prop_path=prop_path)

    # Aliases
    decorate_object = decorate
    decorate_array = decorate_list

    @staticmethod
    def _label(element: Any, path: Breadcrumbs) -> Any:
        if element is None:
            return None
        if _is_record(element):
            return pluck(element, path)
        return str(element)

    def __repr__(self) -> str:
        return (
            f"Synonomous(transformations={self.transformations!r}, "
            f"prop_path={self.prop_path.to_display_string()!r}, "
            f"dict_path={self.dict_path.to_display_string()!r})"
        )
