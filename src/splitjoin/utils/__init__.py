# src/splitjoin/utils/__init__.py
"""

Does: Provide config loading and lightweight debug logging utilities for splitjoin.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: Profiles, default pattern cache, demo CLI and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    temp_data_dir,
)
from .log import (
    debug,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "reload_topics",
]
