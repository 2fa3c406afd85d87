"""
tiles.
=====

Does: Derive a word-game tile distribution (tile counts, scores, alphabet) from the
      characters of the emoticon catalog.
Used By: CLI `tiles`.
"""

from .distribution import (
    TIER_VALUES,
    TileDistribution,
    TileRow,
    build_distribution,
    build_tiers,
    format_row,
)
from .escaping import escape_char, unescape_char
from .letters import distinct_letters, letters_of

__all__ = [
    "TIER_VALUES",
    "TileDistribution",
    "TileRow",
    "build_distribution",
    "build_tiers",
    "format_row",
    "escape_char",
    "unescape_char",
    "distinct_letters",
    "letters_of",
]
