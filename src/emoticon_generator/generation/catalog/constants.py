# constants.py
# ============

"""
constants.
=========

Does: Define the built-in, immutable emoticon component catalog (standard and
      Eastern styles) plus the grammar-free exception emoticons.
Used By: Catalog lookup, standard & Eastern generators, tile distribution tiers.
Returns: Pure data structures only (no side effects).

Slot conventions:
- "" inside `reversible` means the component is optional.
- Empty slots mean no character is known to fit that category.
- Eastern `paired` entries must be used together (left member with its right member).
"""

from types import MappingProxyType

from .types import Catalog, EasternComponent, Pair, StandardComponent

# ── 1) Standard (Western) components ─────────────────────────────────────────

STANDARD_BROWS = StandardComponent(
    reversible=("|", ""),
    l2r=(">", "}"),
    r2l=("<", "{"),
)

STANDARD_NOSE = StandardComponent(
    reversible=("-", "^", "v", "*", " ", ""),
)

# "V" is the only directional-looking mouth; it still reads both ways
STANDARD_MOUTH = StandardComponent(
    reversible=(
        "O", "0", "o", "D", "C", "c", "T", "K", "S", "s", "I", "v", "V",
        "L", "<", "(", ">", ")", "{", "}", "]", "[", "/", "\\", "|", "*",
    ),
    l2r=("P", "p", "F", "J", "B", "b", "3"),
    r2l=("d", "q"),
)

STANDARD_EYES = StandardComponent(
    reversible=(":", "=", "X", "8"),
    l2r=(";", "B"),
)

STANDARD_COMPONENTS = MappingProxyType(
    {
        "brows": STANDARD_BROWS,
        "nose": STANDARD_NOSE,
        "mouth": STANDARD_MOUTH,
        "eyes": STANDARD_EYES,
    }
)


# ── 2) Eastern components ────────────────────────────────────────────────────

# Sides cannot be mixed: each opening glyph has its own closing glyph
EASTERN_SIDES = EasternComponent(
    paired=(
        Pair("(", ")"),
        Pair("[", "]"),
        Pair("{", "}"),
        Pair("d", "b"),
        Pair("", ""),
    ),
)

EASTERN_EYES = EasternComponent(
    reversible=(
        "+", "-", "^", "'", "T", "O", "o", "0", ".",
        "X", "*", "@", "~", ";", "=", "u", "q", "p",
    ),
    left=(">",),
    right=("<",),
    # only meaningful when doubled: >_> and <_<
    paired=(
        Pair(">", ">"),
        Pair("<", "<"),
    ),
)

# No orientation for Eastern mouths
EASTERN_MOUTH = EasternComponent(
    reversible=("_", "-", ".", "!", "n", "0", "O", "o", "J", "~", "w", "3"),
)

EASTERN_COMPONENTS = MappingProxyType(
    {
        "sides": EASTERN_SIDES,
        "eyes": EASTERN_EYES,
        "mouth": EASTERN_MOUTH,
    }
)


# ── 3) Exceptions (do not follow the component grammar) ──────────────────────

EMOTICON_EXCEPTIONS: tuple[str, ...] = ("<3",)


DEFAULT_CATALOG = Catalog(
    standard=STANDARD_COMPONENTS,
    eastern=EASTERN_COMPONENTS,
    exceptions=EMOTICON_EXCEPTIONS,
)

__all__ = [
    "STANDARD_BROWS",
    "STANDARD_NOSE",
    "STANDARD_MOUTH",
    "STANDARD_EYES",
    "STANDARD_COMPONENTS",
    "EASTERN_SIDES",
    "EASTERN_EYES",
    "EASTERN_MOUTH",
    "EASTERN_COMPONENTS",
    "EMOTICON_EXCEPTIONS",
    "DEFAULT_CATALOG",
]
