# src/emoticon_generator/generation/catalog/lookup.py
from __future__ import annotations

"""
lookup.py

Does: Resolve (style, component-name) to the catalog record, normalizing the name
      and degrading to an empty record for unknown names.
Returns: StandardComponent / EasternComponent records and the exception emoticons.
Used by: Aggregator, tile distribution tiers, CLI.
"""

import logging
from collections.abc import Mapping
from typing import TypeVar

from rapidfuzz import fuzz, process

from .constants import DEFAULT_CATALOG
from .types import Catalog, EasternComponent, StandardComponent, Style

__all__ = [
    "normalize_component_name",
    "suggest_component_name",
    "get_standard_component",
    "get_eastern_component",
    "get_component",
    "get_exceptions",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

SUGGEST_MIN_SCORE = 60

_EMPTY_STANDARD = StandardComponent()
_EMPTY_EASTERN = EasternComponent()

R = TypeVar("R", StandardComponent, EasternComponent)


def normalize_component_name(name: str) -> str:
    """Does: Lowercase + trim a component name ("  Brows " → "brows")."""
    return (name or "").strip().lower()


def suggest_component_name(name: str, known: Mapping[str, object]) -> str | None:
    """Does: Return the closest known component name for a typo, or None."""
    if not name or not known:
        return None
    match = process.extractOne(
        name, list(known), scorer=fuzz.ratio, score_cutoff=SUGGEST_MIN_SCORE
    )
    return match[0] if match else None


def _lookup(components: Mapping[str, R], name: str, empty: R, style: Style) -> R:
    key = normalize_component_name(name)
    record = components.get(key)
    if record is not None:
        return record

    hint = suggest_component_name(key, components)
    if hint:
        log.warning("Unknown %s component %r (did you mean %r?)", style.value, name, hint)
    else:
        log.warning("Unknown %s component %r; using empty record", style.value, name)
    return empty


def get_standard_component(name: str, catalog: Catalog | None = None) -> StandardComponent:
    """Does: Return the standard component record for `name` (empty when unknown)."""
    catalog = catalog or DEFAULT_CATALOG
    return _lookup(catalog.standard, name, _EMPTY_STANDARD, Style.STANDARD)


def get_eastern_component(name: str, catalog: Catalog | None = None) -> EasternComponent:
    """Does: Return the Eastern component record for `name` (empty when unknown)."""
    catalog = catalog or DEFAULT_CATALOG
    return _lookup(catalog.eastern, name, _EMPTY_EASTERN, Style.EASTERN)


def get_component(
    style: Style | str, name: str, catalog: Catalog | None = None
) -> StandardComponent | EasternComponent:
    """
    Does: Generic accessor keyed by style tag ("standard" / "eastern").
    Returns: The matching record; an empty StandardComponent when the style is unknown.
    """
    try:
        style = Style(normalize_component_name(str(getattr(style, "value", style))))
    except ValueError:
        log.warning("Unknown emoticon style %r; using empty record", style)
        return _EMPTY_STANDARD

    if style is Style.STANDARD:
        return get_standard_component(name, catalog)
    return get_eastern_component(name, catalog)


def get_exceptions(catalog: Catalog | None = None) -> tuple[str, ...]:
    """Does: Emoticons that bypass the component grammar (always part of the output)."""
    return (catalog or DEFAULT_CATALOG).exceptions
