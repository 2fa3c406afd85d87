# emoticon_generator/generation/catalog/types.py
from __future__ import annotations

"""
types.py.

Does: Define the frozen record types describing emoticon components and the
      catalog that groups them per style.
Used by: Catalog constants/lookup/loader, standard & Eastern generators, letter extraction.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

__all__ = [
    "Style",
    "Orientation",
    "Pair",
    "StandardComponent",
    "EasternComponent",
    "Catalog",
]

__docformat__ = "google"


class Style(str, Enum):
    STANDARD = "standard"
    EASTERN = "eastern"


class Orientation(str, Enum):
    """Reading direction of a standard emoticon."""

    LEFT_TO_RIGHT = "l2r"
    RIGHT_TO_LEFT = "r2l"


@dataclass(frozen=True)
class Pair:
    """Two characters that must co-occur (left member, right member)."""

    left: str
    right: str


@dataclass(frozen=True)
class StandardComponent:
    """
    Character slots of one standard component.

    `""` inside `reversible` marks the component as optional.
    """

    reversible: tuple[str, ...] = ()
    l2r: tuple[str, ...] = ()
    r2l: tuple[str, ...] = ()

    def usable(self, orientation: Orientation) -> tuple[str, ...]:
        """Does: Reversible characters first, then the orientation-exclusive ones."""
        if orientation is Orientation.LEFT_TO_RIGHT:
            return self.reversible + self.l2r
        return self.reversible + self.r2l

    @property
    def is_empty(self) -> bool:
        return not (self.reversible or self.l2r or self.r2l)


@dataclass(frozen=True)
class EasternComponent:
    """Character slots of one Eastern component (mouths only use `reversible`)."""

    reversible: tuple[str, ...] = ()
    left: tuple[str, ...] = ()
    right: tuple[str, ...] = ()
    paired: tuple[Pair, ...] = ()

    @property
    def left_all(self) -> tuple[str, ...]:
        return self.reversible + self.left

    @property
    def right_all(self) -> tuple[str, ...]:
        return self.reversible + self.right

    @property
    def is_empty(self) -> bool:
        return not (self.reversible or self.left or self.right or self.paired)


@dataclass(frozen=True)
class Catalog:
    """All components of both styles plus the grammar-free exception emoticons."""

    standard: Mapping[str, StandardComponent] = field(default_factory=dict)
    eastern: Mapping[str, EasternComponent] = field(default_factory=dict)
    exceptions: tuple[str, ...] = ()
