"""
Configuration validation utilities.

Turns the raw `[check]` table into a validated CheckConfig.
"""

import logging
from pathlib import Path
from typing import Any, Dict

from ..models.config import (
    CheckConfig,
    DEFAULT_CHECK_NAME,
    DEFAULT_LISTENER_PATTERN,
    DEFAULT_RECENT_RESTART_SECONDS,
    DEFAULT_REGISTRY_PATH,
    DEFAULT_RESTART_EXCEPTIONS,
)
from ..validation import (
    ValidationError,
    validate_check_name,
    validate_non_empty_string,
    validate_pattern_mapping,
    validate_positive_integer,
)

logger = logging.getLogger(__name__)

_KNOWN_KEYS = {
    "check_name",
    "registry_path",
    "listener_pattern",
    "recent_restart_seconds",
    "restart_exceptions",
}


def validate_check_config(check_data: Dict[str, Any]) -> CheckConfig:
    """
    Validate and create a CheckConfig from raw configuration data.

    Missing keys take their defaults; unknown keys are logged and ignored.

    Args:
        check_data: Raw `[check]` table from TOML

    Returns:
        Validated CheckConfig instance

    Raises:
        ValidationError: If validation fails
    """
    if not isinstance(check_data, dict):
        raise ValidationError("[check] must be a table", field_name="check", value=check_data)

    for key in sorted(set(check_data) - _KNOWN_KEYS):
        logger.warning(f"Ignoring unknown configuration key check.{key}")

    check_name = validate_check_name(
        check_data.get("check_name", DEFAULT_CHECK_NAME),
        field_name="check.check_name",
    )

    registry_path = Path(
        validate_non_empty_string(
            check_data.get("registry_path", str(DEFAULT_REGISTRY_PATH)),
            field_name="check.registry_path",
        )
    )

    listener_pattern = validate_non_empty_string(
        check_data.get("listener_pattern", DEFAULT_LISTENER_PATTERN),
        field_name="check.listener_pattern",
    )

    recent_restart_seconds = validate_positive_integer(
        check_data.get("recent_restart_seconds", DEFAULT_RECENT_RESTART_SECONDS),
        min_value=1,
        max_value=86400,  # one day
        field_name="check.recent_restart_seconds",
    )

    restart_exceptions = validate_pattern_mapping(
        check_data.get("restart_exceptions", DEFAULT_RESTART_EXCEPTIONS),
        field_name="check.restart_exceptions",
    )

    return CheckConfig(
        check_name=check_name,
        registry_path=registry_path,
        listener_pattern=listener_pattern,
        recent_restart_seconds=recent_restart_seconds,
        restart_exceptions=restart_exceptions,
    )
