"""
catalog.
=======

Does: Aggregate the emoticon component catalog: record types, built-in constants,
      lookup accessors and the custom catalog loader.
Used By: Standard/Eastern generators, aggregator, tile distribution, CLI.
Returns: Pure data structures and accessor functions.
"""

# ── Types ────────────────────────────────────────────────────────────────────
from .types import (
    Catalog,
    EasternComponent,
    Orientation,
    Pair,
    StandardComponent,
    Style,
)

# ── Built-in data ────────────────────────────────────────────────────────────
from .constants import (
    DEFAULT_CATALOG,
    EASTERN_COMPONENTS,
    EMOTICON_EXCEPTIONS,
    STANDARD_COMPONENTS,
)

# ── Accessors ────────────────────────────────────────────────────────────────
from .lookup import (
    get_component,
    get_eastern_component,
    get_exceptions,
    get_standard_component,
    normalize_component_name,
    suggest_component_name,
)
from .loader import CatalogFormatError, catalog_from_dict, load_catalog

__all__ = [
    # types
    "Catalog",
    "EasternComponent",
    "Orientation",
    "Pair",
    "StandardComponent",
    "Style",
    # data
    "DEFAULT_CATALOG",
    "STANDARD_COMPONENTS",
    "EASTERN_COMPONENTS",
    "EMOTICON_EXCEPTIONS",
    # accessors
    "get_component",
    "get_standard_component",
    "get_eastern_component",
    "get_exceptions",
    "normalize_component_name",
    "suggest_component_name",
    # loader
    "CatalogFormatError",
    "catalog_from_dict",
    "load_catalog",
]
