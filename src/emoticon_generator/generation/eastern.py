# src/emoticon_generator/generation/eastern.py
from __future__ import annotations

"""
eastern.py

Does: Enumerate Eastern emoticons (side, eye, mouth, eye, side). Sides combine
      through their declared pairs plus every free left/right combination; eyes
      either combine freely or come as a declared matched pair.
Returns: A list of emoticon strings (no dedup, catalog order).
Used by: Aggregator, tests.
"""

import logging
from itertools import product

from .catalog.types import EasternComponent, Pair
from .general.utils.log import debug

__all__ = ["side_pairs", "is_excluded_eastern", "generate_eastern"]

__docformat__ = "google"

log = logging.getLogger(__name__)


def side_pairs(sides: EasternComponent) -> list[Pair]:
    """
    Does: Declared side pairs first, then every (left, right) combination of the
          reversible + side-exclusive characters.
    """
    pairs = list(sides.paired)
    pairs.extend(Pair(left, right) for left, right in product(sides.left_all, sides.right_all))
    return pairs


def is_excluded_eastern(left_eye: str, mouth: str, right_eye: str) -> bool:
    """Does: True when either eye is the mouth glyph (eye would merge with mouth)."""
    return left_eye == mouth or right_eye == mouth


def generate_eastern(
    sides: EasternComponent,
    eyes: EasternComponent,
    mouth: EasternComponent,
) -> list[str]:
    """
    Does: For every side pair, emit the free-eye faces then the paired-eye faces.
          Paired eyes are never crossed with another pair's members.
    """
    mouths = mouth.reversible
    out: list[str] = []

    for side in side_pairs(sides):
        # 1) eyes chosen independently per side
        for left_eye, right_eye, m in product(eyes.left_all, eyes.right_all, mouths):
            if is_excluded_eastern(left_eye, m, right_eye):
                continue
            out.append(side.left + left_eye + m + right_eye + side.right)

        # 2) matched eye pairs (>_> / <_<)
        for eye_pair, m in product(eyes.paired, mouths):
            if is_excluded_eastern(eye_pair.left, m, eye_pair.right):
                continue
            out.append(side.left + eye_pair.left + m + eye_pair.right + side.right)

    log.debug("Generated %d eastern emoticons", len(out))
    debug(f"eastern → {len(out)} emoticons", topic="eastern")
    return out
