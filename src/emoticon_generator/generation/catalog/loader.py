# src/emoticon_generator/generation/catalog/loader.py

"""Load a custom component catalog from a JSON file in the data directory.

Expected shape (every key optional; missing components become empty records):

    {
      "standard": {"brows": {"reversible": ["|", ""], "l2r": [">"], "r2l": ["<"]}, ...},
      "eastern":  {"sides": {"paired": [{"left": "(", "right": ")"}]}, ...},
      "exceptions": ["<3"]
    }

Keys are case-insensitive ("Reversible", "L2R" read as "reversible", "l2r"); two keys
of one object that differ only in case are rejected. With allow_comments=True the
file (".json" or ".json5") is read as JSON5: comments and trailing commas allowed.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Any

from emoticon_generator.generation.general.utils.load_config import (
    ConfigTypeError,
    load_config,
)

from .types import Catalog, EasternComponent, Pair, StandardComponent, Style

__all__ = ["CatalogFormatError", "catalog_from_dict", "load_catalog"]

log = logging.getLogger(__name__)

_STANDARD_SLOTS = ("reversible", "l2r", "r2l")
_EASTERN_SLOTS = ("reversible", "left", "right", "paired")


class CatalogFormatError(ConfigTypeError):
    """Raise when a catalog JSON document doesn't have the catalog shape."""


def _normalized(mapping: dict[Any, Any], where: str) -> dict[str, Any]:
    """Does: Trim + lowercase keys; two keys folding onto the same name is an error."""
    out: dict[str, Any] = {}
    for key, value in mapping.items():
        norm = str(key).strip().lower()
        if norm in out:
            raise CatalogFormatError(f"{where}: duplicate key {key!r} (as {norm!r})")
        out[norm] = value
    return out


def _chars(value: Any, where: str) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise CatalogFormatError(f"{where}: expected a list, got {type(value).__name__}")
    bad = [v for v in value if not isinstance(v, str)]
    if bad:
        raise CatalogFormatError(f"{where}: characters must be strings (got {bad[0]!r})")
    return tuple(value)


def _pairs(value: Any, where: str) -> tuple[Pair, ...]:
    if not isinstance(value, list):
        raise CatalogFormatError(f"{where}: expected a list, got {type(value).__name__}")
    out: list[Pair] = []
    for i, item in enumerate(value):
        if not isinstance(item, dict):
            raise CatalogFormatError(f"{where}[{i}]: expected an object with left/right")
        keys = _normalized(item, f"{where}[{i}]")
        left, right = keys.get("left"), keys.get("right")
        if not isinstance(left, str) or not isinstance(right, str):
            raise CatalogFormatError(f"{where}[{i}]: 'left' and 'right' must be strings")
        out.append(Pair(left, right))
    return tuple(out)


def _slots(entry: Any, allowed: tuple[str, ...], where: str) -> dict[str, Any]:
    if not isinstance(entry, dict):
        raise CatalogFormatError(f"{where}: expected an object, got {type(entry).__name__}")
    slots = _normalized(entry, where)
    unknown = sorted(set(slots) - set(allowed))
    if unknown:
        raise CatalogFormatError(f"{where}: unknown slot(s) {', '.join(unknown)}")
    return slots


def _standard_entry(entry: Any, where: str) -> StandardComponent:
    slots = _slots(entry, _STANDARD_SLOTS, where)
    return StandardComponent(
        **{k: _chars(v, f"{where}.{k}") for k, v in slots.items()}
    )


def _eastern_entry(entry: Any, where: str) -> EasternComponent:
    slots = _slots(entry, _EASTERN_SLOTS, where)
    kwargs: dict[str, Any] = {}
    for k, v in slots.items():
        kwargs[k] = _pairs(v, f"{where}.{k}") if k == "paired" else _chars(v, f"{where}.{k}")
    return EasternComponent(**kwargs)


def catalog_from_dict(data: dict[str, Any]) -> Catalog:
    """Does: Convert a parsed catalog document into an immutable Catalog."""
    sections = _normalized(data, "catalog")
    allowed = {Style.STANDARD.value, Style.EASTERN.value, "exceptions"}
    unknown = sorted(set(sections) - allowed)
    if unknown:
        raise CatalogFormatError(f"unknown catalog section(s): {', '.join(unknown)}")

    standard = sections.get(Style.STANDARD.value, {})
    eastern = sections.get(Style.EASTERN.value, {})
    for name, section in (("standard", standard), ("eastern", eastern)):
        if not isinstance(section, dict):
            raise CatalogFormatError(f"{name}: expected an object of components")
    standard = _normalized(standard, "standard")
    eastern = _normalized(eastern, "eastern")

    catalog = Catalog(
        standard=MappingProxyType(
            {
                name: _standard_entry(entry, f"standard.{name}")
                for name, entry in standard.items()
            }
        ),
        eastern=MappingProxyType(
            {
                name: _eastern_entry(entry, f"eastern.{name}")
                for name, entry in eastern.items()
            }
        ),
        exceptions=_chars(sections.get("exceptions", []), "exceptions"),
    )
    log.debug(
        "Catalog parsed: %d standard, %d eastern components, %d exceptions",
        len(catalog.standard),
        len(catalog.eastern),
        len(catalog.exceptions),
    )
    return catalog


def load_catalog(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    allow_comments: bool = False,
) -> Catalog:
    """Load <data>/<file> (".json" assumed when no suffix) and return it as a Catalog."""
    return load_config(
        file,
        mode="validated_dict",
        base_dir=base_dir,
        validator=catalog_from_dict,
        allow_comments=allow_comments,
    )
