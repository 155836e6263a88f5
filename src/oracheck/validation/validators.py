"""
Validation functions for configuration values.
"""

import re
from typing import Any, Dict, Optional

from .exceptions import ValidationError


def validate_positive_integer(
    value: Any,
    min_value: int = 1,
    max_value: Optional[int] = None,
    field_name: str = "value"
) -> int:
    """
    Validate that a value is a positive integer.

    Args:
        value: Value to validate
        min_value: Minimum allowed value (inclusive)
        max_value: Maximum allowed value (inclusive), None for no limit
        field_name: Name of the field being validated

    Returns:
        Validated integer value

    Raises:
        ValidationError: If validation fails
    """
    if isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be a valid integer, got {value}",
            field_name=field_name,
            value=value
        )
    try:
        int_value = int(value)
    except (ValueError, TypeError):
        raise ValidationError(
            f"{field_name} must be a valid integer, got {value}",
            field_name=field_name,
            value=value
        )
    if int_value < min_value:
        raise ValidationError(
            f"{field_name} must be >= {min_value}, got {int_value}",
            field_name=field_name,
            value=value
        )
    if max_value is not None and int_value > max_value:
        raise ValidationError(
            f"{field_name} must be <= {max_value}, got {int_value}",
            field_name=field_name,
            value=value
        )
    return int_value


def validate_non_empty_string(value: Any, field_name: str = "value") -> str:
    """
    Validate that a value is a non-empty string.

    Raises:
        ValidationError: If the value is not a string or is blank
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            f"{field_name} must be a non-empty string",
            field_name=field_name,
            value=value
        )
    return value


def validate_check_name(name: Any, field_name: str = "check_name") -> str:
    """
    Validate the check name printed at the start of the status line.

    Raises:
        ValidationError: If the name is empty or contains whitespace
    """
    validate_non_empty_string(name, field_name=field_name)
    if re.search(r"\s", name):
        raise ValidationError(
            f"{field_name} must not contain whitespace: {name!r}",
            field_name=field_name,
            value=name
        )
    return name


def validate_regex_pattern(pattern: str, field_name: str = "regex_pattern") -> str:
    """
    Validate regex pattern format.

    Args:
        pattern: Regex pattern to validate
        field_name: Name of the field being validated

    Returns:
        Validated pattern

    Raises:
        ValidationError: If pattern is invalid
    """
    if not pattern or not isinstance(pattern, str):
        raise ValidationError(
            f"{field_name} must be a non-empty string",
            field_name=field_name,
            value=pattern
        )

    try:
        re.compile(pattern)
    except re.error as e:
        raise ValidationError(
            f"{field_name} is not a valid regex pattern: {e}",
            field_name=field_name,
            value=pattern
        )

    return pattern


def validate_pattern_mapping(mapping: Any, field_name: str = "mapping") -> Dict[str, str]:
    """
    Validate a table of regex pattern -> message text.

    Raises:
        ValidationError: If the value is not a table, a key is not a valid
            regex, or a message is empty
    """
    if not isinstance(mapping, dict):
        raise ValidationError(
            f"{field_name} must be a table of pattern = message entries",
            field_name=field_name,
            value=mapping
        )
    validated = {}
    for pattern, message in mapping.items():
        validate_regex_pattern(pattern, field_name=f"{field_name} key")
        validate_non_empty_string(message, field_name=f"{field_name}.{pattern}")
        validated[pattern] = message
    return validated
