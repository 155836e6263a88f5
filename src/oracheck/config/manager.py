"""
Configuration management and singleton pattern.

This module provides the main configuration loading and management interface,
implementing a singleton pattern to ensure configuration is loaded only once
per run.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from ..models.config import CheckConfig
from ..validation import handle_config_error, ErrorSeverity
from .loader import load_check_section
from .validators import validate_check_config

logger = logging.getLogger(__name__)

# --- Global Singleton for Configuration ---

_CONFIG: Optional[CheckConfig] = None

# Environment variable that points the check at another configuration file.
CONFIG_ENV_VAR = "ORACHECK_CONFIG"

# Defines the default path to the configuration file, relative to this script's location.
# This can be overridden with set_config_path() or the ORACHECK_CONFIG variable.
_CONFIG_FILE_PATH = Path(__file__).parent.parent.parent.parent / "conf" / "config.toml"

# True once set_config_path() has chosen the file; a chosen file must exist.
_CONFIG_PATH_EXPLICIT = False


def set_config_path(config_path: Path) -> None:
    """
    Set a custom configuration file path.

    Args:
        config_path: Path to the config.toml file

    Note:
        Clears any cached configuration so the next get_config() reloads.
    """
    global _CONFIG_FILE_PATH, _CONFIG, _CONFIG_PATH_EXPLICIT
    _CONFIG_FILE_PATH = Path(config_path)
    _CONFIG_PATH_EXPLICIT = True
    _CONFIG = None
    logger.debug(f"Configuration path set to: {config_path}")


def clear_config_cache() -> None:
    """
    Clear the cached configuration, forcing a reload on next access.
    """
    global _CONFIG
    _CONFIG = None
    logger.debug("Configuration cache cleared")


def get_config_path() -> Path:
    """Return the configuration file path in effect, honouring ORACHECK_CONFIG."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return _CONFIG_FILE_PATH


def _is_path_explicit() -> bool:
    return bool(os.environ.get(CONFIG_ENV_VAR)) or _CONFIG_PATH_EXPLICIT


def _load_config(config_path: Path, explicit: bool = False) -> CheckConfig:
    """
    Load and validate the check configuration.

    A missing default file is not an error: the check runs with built-in
    defaults so it works on hosts where only the package is installed. A file
    named through ORACHECK_CONFIG or set_config_path() must exist.

    Raises:
        FileNotFoundError: If an explicitly chosen file does not exist
        ValidationError: If configuration validation fails
        tomllib.TOMLDecodeError: If the TOML file is malformed
    """
    if not config_path.exists():
        if explicit:
            error = FileNotFoundError(f"Configuration file not found: {config_path}")
            handle_config_error(
                error=error,
                context="loading configuration file",
                severity=ErrorSeverity.CRITICAL,
                reraise=True,
                logger=logger
            )
        logger.debug(f"No configuration file at {config_path}, using defaults")
        return CheckConfig()

    try:
        check_data = load_check_section(config_path)
        config = validate_check_config(check_data)
    except Exception as e:
        handle_config_error(
            error=e,
            context=f"loading {config_path}",
            severity=ErrorSeverity.ERROR,
            reraise=True,
            logger=logger
        )
        raise

    logger.debug(f"Loaded configuration from {config_path}: {config}")
    return config


def get_config() -> CheckConfig:
    """
    Get the check configuration, loading it if necessary.

    Returns:
        The singleton CheckConfig instance

    Raises:
        FileNotFoundError: If an explicitly chosen file does not exist
        ValidationError: If configuration validation fails
        tomllib.TOMLDecodeError: If the TOML file is malformed
    """
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = _load_config(get_config_path(), explicit=_is_path_explicit())
    return _CONFIG


def is_config_loaded() -> bool:
    """
    Check if configuration has been loaded and cached.
    """
    return _CONFIG is not None
