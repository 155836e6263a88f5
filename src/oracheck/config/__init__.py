"""
Configuration management for the oracheck package.

This module provides a clean interface for loading, validating, and accessing
configuration data from a TOML file with singleton pattern management.
"""

# Main configuration interface
from .manager import (
    CONFIG_ENV_VAR,
    clear_config_cache,
    get_config,
    get_config_path,
    is_config_loaded,
    set_config_path,
)

# For advanced usage - direct access to loader and validator
from .loader import load_check_section, load_toml_file
from .validators import validate_check_config

__all__ = [
    # Main interface
    "CONFIG_ENV_VAR",
    "get_config",
    "get_config_path",
    "set_config_path",
    "clear_config_cache",
    "is_config_loaded",
    # Advanced interface
    "load_toml_file",
    "load_check_section",
    "validate_check_config",
]
