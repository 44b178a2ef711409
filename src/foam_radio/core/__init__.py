"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging (Loguru)
- Console management (Rich)
"""

from .config import (
    Config,
    CatalogConfig,
    LoggingConfig,
    PlayerConfig,
    RadioConfig,
    create_default_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
    load_config,
)
from .console import get_console
from .errors import CatalogError, FoamRadioError
from .output import setup_from_config, setup_loguru

__all__ = [
    # Config
    "Config",
    "CatalogConfig",
    "LoggingConfig",
    "PlayerConfig",
    "RadioConfig",
    "create_default_config",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "load_config",
    # Errors
    "FoamRadioError",
    "CatalogError",
    # Logging
    "setup_loguru",
    "setup_from_config",
    # Console
    "get_console",
]
