"""
generation.
==========

Does: Enumerate every emoticon the component grammar allows (standard faces in
      both orientations, Eastern faces, exceptions).

Exports:
- generate_standard / generate_eastern: one generator per style.
- generate_all: exceptions + both styles, sorted.
"""

from .aggregate import generate_all, generate_by_source
from .eastern import generate_eastern, is_excluded_eastern, side_pairs
from .standard import generate_standard, is_excluded_standard

__all__ = [
    "generate_all",
    "generate_by_source",
    "generate_eastern",
    "generate_standard",
    "is_excluded_eastern",
    "is_excluded_standard",
    "side_pairs",
]
