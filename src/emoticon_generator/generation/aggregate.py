# src/emoticon_generator/generation/aggregate.py
from __future__ import annotations

"""
aggregate.py

Does: Merge exception emoticons with both standard orientations and the Eastern
      faces, then sort. Duplicates coming from different paths are kept (adjacent).
Returns: generate_all() sorted list, plus per-source counts for reporting.
Used by: CLI `list`, tests.
"""

import logging

from .catalog.constants import DEFAULT_CATALOG
from .catalog.lookup import get_eastern_component, get_exceptions, get_standard_component
from .catalog.types import Catalog, Orientation
from .eastern import generate_eastern
from .standard import generate_standard

__all__ = ["generate_all", "generate_by_source"]

log = logging.getLogger(__name__)


def generate_by_source(catalog: Catalog | None = None) -> dict[str, list[str]]:
    """Does: Unsorted emoticons keyed by where they come from (exceptions, l2r, r2l, eastern)."""
    catalog = catalog or DEFAULT_CATALOG
    brows = get_standard_component("brows", catalog)
    eyes = get_standard_component("eyes", catalog)
    nose = get_standard_component("nose", catalog)
    mouth = get_standard_component("mouth", catalog)

    return {
        "exceptions": list(get_exceptions(catalog)),
        Orientation.LEFT_TO_RIGHT.value: generate_standard(
            brows, eyes, nose, mouth, Orientation.LEFT_TO_RIGHT
        ),
        Orientation.RIGHT_TO_LEFT.value: generate_standard(
            brows, eyes, nose, mouth, Orientation.RIGHT_TO_LEFT
        ),
        "eastern": generate_eastern(
            get_eastern_component("sides", catalog),
            get_eastern_component("eyes", catalog),
            get_eastern_component("mouth", catalog),
        ),
    }


def generate_all(catalog: Catalog | None = None) -> list[str]:
    """Does: All emoticons sorted by code point; not deduplicated."""
    merged: list[str] = []
    for emoticons in generate_by_source(catalog).values():
        merged.extend(emoticons)
    merged.sort()
    log.debug("generate_all: %d emoticons", len(merged))
    return merged
