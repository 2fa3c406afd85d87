# src/emoticon_generator/generation/standard.py
from __future__ import annotations

"""
standard.py

Does: Enumerate Western-style emoticons (brows, eyes, nose, mouth) for one reading
      orientation, dropping combinations where adjacent glyphs collide.
Returns: A list of emoticon strings (no dedup, catalog order).
Used by: Aggregator, CLI statistics, tests.
"""

import logging
from itertools import product

from .catalog.types import Orientation, StandardComponent
from .general.utils.log import debug

__all__ = ["is_excluded_standard", "generate_standard"]

__docformat__ = "google"

log = logging.getLogger(__name__)

# Nose/mouth glyphs that look fine apart but merge into one shape together
FORBIDDEN_NOSE_MOUTH = frozenset({("v", "V")})


def is_excluded_standard(eye: str, nose: str, mouth: str) -> bool:
    """
    Does: True when the (eye, nose, mouth) choice would not read as a face.
    - nose and mouth are the same glyph
    - eyes and mouth are the same glyph with no nose in between
    - curated nose/mouth clashes (v nose + V mouth)
    """
    if nose == mouth:
        return True
    if eye == mouth and not nose:
        return True
    return (nose, mouth) in FORBIDDEN_NOSE_MOUTH


def generate_standard(
    brows: StandardComponent,
    eyes: StandardComponent,
    nose: StandardComponent,
    mouth: StandardComponent,
    orientation: Orientation = Orientation.LEFT_TO_RIGHT,
) -> list[str]:
    """
    Does: Cartesian product of the usable characters of every component.
          Left-to-right faces read brow+eye+nose+mouth; right-to-left faces
          reverse the component order (mouth+nose+eye+brow), glyphs are not mirrored.
    """
    if not isinstance(orientation, Orientation):
        raise ValueError(f"Unknown orientation {orientation!r}")

    l2r = orientation is Orientation.LEFT_TO_RIGHT
    out: list[str] = []
    for b, e, n, m in product(
        brows.usable(orientation),
        eyes.usable(orientation),
        nose.usable(orientation),
        mouth.usable(orientation),
    ):
        if is_excluded_standard(e, n, m):
            continue
        out.append(b + e + n + m if l2r else m + n + e + b)

    log.debug("Generated %d standard emoticons (%s)", len(out), orientation.value)
    debug(f"standard[{orientation.value}] → {len(out)} emoticons", topic="standard")
    return out
