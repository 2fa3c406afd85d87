# src/emoticon_generator/generation/general/utils/load_config.py

"""Read JSON/JSON5 documents from the data directory.

Parsed documents are cached per (path, mtime, encoding, allow_comments), so a
validator (e.g. the catalog builder) runs on top of the cached document and a
file is only re-read after it changes on disk.

Modes:
- "raw"             -> the parsed document (shared cache object; do not mutate)
- "validated_dict"  -> top-level object, passed through the optional validator

Used by the custom catalog loader and the CLI.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any, Literal

import json5

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "validated_dict"]
__all__ = [
    "Mode",
    "load_config",
    "clear_config_cache",
    "resolve_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV_VARS = ("DATA_DIR", "EMOTICON_DATA_DIR")
DATA_DIR_NAMES = ("data", "Data")
CONFIG_SUFFIXES = (".json", ".json5")


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """No data directory given, configured, or found above the working directory."""


class ConfigFileNotFound(FileNotFoundError):
    """The requested file is missing, unreadable, or outside the data directory."""


class ConfigParseError(ValueError):
    """The file is not valid JSON/JSON5 text, or the validator rejected it."""


class ConfigTypeError(TypeError):
    """The document parsed but has the wrong top-level structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_DOC_CACHE: dict[tuple[Path, float, str, bool], Any] = {}


def clear_config_cache() -> None:
    """Forget every cached document (tests, hot reload)."""
    _DOC_CACHE.clear()
    log.debug("Document cache cleared.")


# ── Data directory ───────────────────────────────────────────────────────────
def _discover_data_dir(start: Path) -> Path | None:
    for parent in [start, *start.parents]:
        for name in DATA_DIR_NAMES:
            cand = parent / name
            if cand.is_dir():
                return cand
    return None


def resolve_data_dir(base_dir: str | os.PathLike[str] | None = None) -> Path:
    """Explicit base_dir, else $DATA_DIR / $EMOTICON_DATA_DIR, else the nearest data/ above cwd."""
    if base_dir is not None:
        return Path(base_dir).expanduser().resolve()

    for var in DATA_DIR_ENV_VARS:
        value = os.environ.get(var)
        if value:
            return Path(value).expanduser().resolve()

    start = Path.cwd().resolve()
    found = _discover_data_dir(start)
    if found is None:
        raise DataDirNotFound(
            f"No data directory: pass --data-dir, set {' or '.join(DATA_DIR_ENV_VARS)}, "
            f"or create one of {', '.join(DATA_DIR_NAMES)} at or above {start}"
        )
    return found.resolve()


def _resolve_file(data_dir: Path, file: str | os.PathLike[str]) -> Path:
    name = os.fspath(file)
    if not name.endswith(CONFIG_SUFFIXES):
        name = f"{name}.json"
    path = (data_dir / name).resolve()
    if not path.is_relative_to(data_dir):
        raise ConfigFileNotFound(f"Refusing to read outside the data dir: {path} (base={data_dir})")
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


# ── Parsing ──────────────────────────────────────────────────────────────────
def _parse(path: Path, encoding: str, allow_comments: bool) -> Any:
    try:
        text = path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise ConfigParseError(f"Cannot decode {path} as {encoding}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if allow_comments:
        try:
            return json5.loads(text)  # comments / trailing commas allowed
        except ValueError as e:
            raise ConfigParseError(f"Invalid JSON5 in {path}: {e}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e


def _document(path: Path, encoding: str, allow_comments: bool) -> Any:
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    key = (path, mtime, encoding, allow_comments)
    if key in _DOC_CACHE:
        log.debug("Document cache HIT: %s", path.name)
        return _DOC_CACHE[key]

    doc = _parse(path, encoding, allow_comments)
    _DOC_CACHE[key] = doc
    log.debug("Document cache MISS → parsed %s", path.name)
    return doc


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: str | os.PathLike[str] | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], Any] | None = None,
    allow_comments: bool = False,
) -> Any:
    """Load <data>/<file>[.json] and shape it according to `mode`."""
    if mode not in ("raw", "validated_dict"):
        raise ValueError(f"Unknown mode '{mode}'")

    path = _resolve_file(resolve_data_dir(base_dir), file)
    doc = _document(path, encoding, allow_comments)
    if mode == "raw":
        return doc

    if not isinstance(doc, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(doc).__name__}")
    if validator is None:
        return doc
    try:
        return validator(doc)
    except ConfigTypeError:
        raise
    except Exception as e:
        raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
