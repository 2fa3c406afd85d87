# src/emoticon_generator/tiles/letters.py
from __future__ import annotations

"""
letters.py

Does: Collect the distinct characters a catalog entry can contribute.
Returns: Tuple of characters in first-seen order, never containing "".
Used by: Tile distribution tiers.
"""

from collections.abc import Iterable

from emoticon_generator.generation.catalog.types import EasternComponent, StandardComponent

__all__ = ["distinct_letters", "letters_of"]


def distinct_letters(chars: Iterable[str]) -> tuple[str, ...]:
    """Does: Drop empty placeholders and repeats, keeping first-seen order."""
    return tuple(dict.fromkeys(c for c in chars if c))


def letters_of(entry: StandardComponent | EasternComponent) -> tuple[str, ...]:
    """
    Does: Standard entries: reversible, l2r, r2l.
          Eastern entries: reversible, left, right, then both members of every pair.
    """
    if isinstance(entry, StandardComponent):
        return distinct_letters(entry.reversible + entry.l2r + entry.r2l)

    paired = [c for pair in entry.paired for c in (pair.left, pair.right)]
    return distinct_letters([*entry.reversible, *entry.left, *entry.right, *paired])
