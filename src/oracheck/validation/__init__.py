"""
Validation and error handling for the oracheck package.

This module provides configuration validation, the fatal check error
hierarchy, and consistent error logging across the application.
"""

# Core exception classes and error handling
from .exceptions import (
    CheckError,
    ErrorSeverity,
    ProcessQueryFailure,
    RegistryUnreadable,
    UnsupportedPlatform,
    ValidationError,
    handle_config_error,
    handle_error,
    handle_file_error,
    handle_subprocess_error,
)

# Validation functions
from .validators import (
    validate_check_name,
    validate_non_empty_string,
    validate_pattern_mapping,
    validate_positive_integer,
    validate_regex_pattern,
)

__all__ = [
    # Core functionality
    "CheckError",
    "ErrorSeverity",
    "ProcessQueryFailure",
    "RegistryUnreadable",
    "UnsupportedPlatform",
    "ValidationError",
    "handle_config_error",
    "handle_error",
    "handle_file_error",
    "handle_subprocess_error",
    # Validators
    "validate_check_name",
    "validate_non_empty_string",
    "validate_pattern_mapping",
    "validate_positive_integer",
    "validate_regex_pattern",
]
