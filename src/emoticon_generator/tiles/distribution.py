# src/emoticon_generator/tiles/distribution.py
from __future__ import annotations

"""
distribution.py

Does: Turn the catalog alphabet into a word-game tile distribution. Characters are
      bucketed into tiers (lower tier = more common = cheaper); each character is
      counted once, at the first tier it shows up in.
Returns: TileDistribution with rows, the tile-count table text, the score table
         text, and the sorted alphabet string.
Used by: CLI `tiles`, tests.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from emoticon_generator.generation.catalog.constants import DEFAULT_CATALOG
from emoticon_generator.generation.catalog.lookup import (
    get_eastern_component,
    get_standard_component,
)
from emoticon_generator.generation.catalog.types import Catalog
from emoticon_generator.generation.general.utils.log import debug

from .escaping import escape_char, unescape_char
from .letters import letters_of

__all__ = [
    "TIER_VALUES",
    "TileRow",
    "TileDistribution",
    "build_tiers",
    "build_distribution",
    "format_row",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

# tier → (tile count, score). Tier 4 (Eastern sides) has no entry and emits nothing.
TIER_VALUES: dict[int, tuple[int, int]] = {
    0: (5, 1),
    1: (2, 2),
    2: (3, 6),
    3: (2, 9),
}


@dataclass(frozen=True)
class TileRow:
    literal: str  # escaped form, as emitted into the tables
    tiles: int
    score: int
    tier: int

    @property
    def char(self) -> str:
        return unescape_char(self.literal)


@dataclass
class TileDistribution:
    rows: list[TileRow] = field(default_factory=list)

    @property
    def tile_table(self) -> str:
        return "".join(format_row(r.literal, r.tiles) for r in self.rows)

    @property
    def score_table(self) -> str:
        return "".join(format_row(r.literal, r.score) for r in self.rows)

    @property
    def alphabet(self) -> str:
        return "".join(sorted(r.char for r in self.rows))

    def as_dict(self) -> dict[str, str]:
        return {
            "tiles": self.tile_table,
            "scores": self.score_table,
            "alphabet": self.alphabet,
        }


def format_row(literal: str, value: int) -> str:
    """Does: One table initializer line, e.g. `{ ':' , 5 } ,` (literal already escaped)."""
    return f"{{ '{literal}' , {value} }} ,\n"


def build_tiers(catalog: Catalog | None = None) -> list[tuple[str, ...]]:
    """
    Does: Letters per tier:
      0 standard eyes, 1 standard mouth, 2 standard nose + brows,
      3 Eastern eyes + Eastern mouth characters, 4 Eastern sides.
    """
    catalog = catalog or DEFAULT_CATALOG

    def std(name: str) -> tuple[str, ...]:
        return letters_of(get_standard_component(name, catalog))

    def east(name: str) -> tuple[str, ...]:
        return letters_of(get_eastern_component(name, catalog))

    return [
        std("eyes"),
        std("mouth"),
        std("nose") + std("brows"),
        east("eyes") + get_eastern_component("mouth", catalog).reversible,
        east("sides"),
    ]


def build_distribution(
    tiers: Sequence[Sequence[str]] | None = None,
    *,
    catalog: Catalog | None = None,
) -> TileDistribution:
    """
    Does: Emit one row per distinct character, at its lowest tier.
          Characters whose tier has no value entry are skipped entirely.
    """
    if tiers is None:
        tiers = build_tiers(catalog)

    seen: set[str] = set()
    dist = TileDistribution()
    for tier, letters in enumerate(tiers):
        values = TIER_VALUES.get(tier)
        if values is None:
            continue
        for ch in letters:
            if not ch or ch in seen:
                continue
            row = TileRow(escape_char(ch), *values, tier)
            dist.rows.append(row)
            seen.add(row.char)

    log.debug("Tile distribution: %d characters over %d tiers", len(dist.rows), len(tiers))
    debug(f"alphabet={dist.alphabet!r}", topic="tiles")
    return dist
