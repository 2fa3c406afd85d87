# emoticon_generator/generation/general/utils/__init__.py
"""

Does: Provide config loading and lightweight debug logging utilities for the generation stack.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: Catalog loader, CLI, tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    resolve_data_dir,
)
from .log import (
    debug,
    is_enabled,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "resolve_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "is_enabled",
    "reload_topics",
]
