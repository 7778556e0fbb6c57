"""synonomous - Synonym keys for lists.

Makes alternate forms ("synonyms") of identifier-like labels with pluggable
transformers, then attaches them as lookup keys on a list so its elements can
be reached by position or by any of their name-derived keys.

Core concepts:
    - Transformers are named string -> string functions in a registry
    - Synonyms are the unique non-blank transformer outputs, in order
    - Decoration never overwrites an existing key or list position

Example:
    "background-color" with ["verbatim", "toAllCaps", "toCamelCase"]
    → "background-color", "BACKGROUND_COLOR", "backgroundColor"

Usage:
    from synonomous import Synonomous, SynonymList

    styles = SynonymList([
        {"name": "borderLeft", "value": "8px"},
        {"name": "background-color", "value": "red"},
    ])
    Synonomous(["verbatim", "toAllCaps"]).decorate_list(styles)
    styles["BORDER_LEFT"]["value"]  # "8px"

    # Custom transformer for one decorator only
    syn = Synonomous(["verbatim", "toLower"])
    syn.register("toLower", str.lower)
"""

from .breadcrumbs import Breadcrumbs, drilldown, pluck, to_path
from .decorator import Synonomous
from .sequence import SynonymList
from .transformers import (
    SENTINEL,
    TRANSFORMERS,
    TransformerRegistry,
    UnknownTransformerError,
    get_transformer,
    list_transformers,
    register_transformer,
    transform,
)

__version__ = "0.1.0"

__all__ = [
    "Breadcrumbs",
    "drilldown",
    "pluck",
    "to_path",
    "Synonomous",
    "SynonymList",
    "SENTINEL",
    "TRANSFORMERS",
    "TransformerRegistry",
    "UnknownTransformerError",
    "get_transformer",
    "list_transformers",
    "register_transformer",
    "transform",
]
