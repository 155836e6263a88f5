"""
Exception types and error handling for the check.

Two families of exceptions live here:

- ValidationError: raised while validating configuration values.
- CheckError and its subclasses: fatal conditions that abort a check run.
  Each carries the Severity the run must report, so the caller can turn it
  into a result line without knowing which stage failed.
"""

import logging
from enum import Enum
from typing import Any, Optional

from ..models.results import Severity

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """Severity levels for error logging."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ValidationError(Exception):
    """
    Exception raised when configuration validation fails.
    """

    def __init__(self, message: str, field_name: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.field_name = field_name
        self.value = value


class CheckError(Exception):
    """Base class for conditions that abort a check run."""

    severity: Severity = Severity.UNKNOWN

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnsupportedPlatform(CheckError):
    """The operating system identity matches no supported platform."""

    severity = Severity.CRITICAL

    def __init__(self, identity: str, known: bool = False):
        if known:
            message = f"Platform '{identity}' is not implemented"
        else:
            message = f"Unsupported platform '{identity}'"
        super().__init__(message)
        self.identity = identity
        self.known = known


class RegistryUnreadable(CheckError):
    """The instance registry is missing or cannot be read."""

    severity = Severity.UNKNOWN

    def __init__(self, path: Any, reason: str):
        super().__init__(f"Cannot read registry {path}: {reason}")
        self.path = path
        self.reason = reason


class ProcessQueryFailure(CheckError):
    """The platform process listing is unavailable or unusable."""

    severity = Severity.CRITICAL

    def __init__(self, command: str, reason: str):
        super().__init__(f"Process listing '{command}' failed: {reason}")
        self.command = command
        self.reason = reason


def handle_error(
    error: Exception,
    context: str,
    severity: ErrorSeverity = ErrorSeverity.ERROR,
    reraise: bool = True,
    logger: Optional[logging.Logger] = None
) -> None:
    """
    Handle errors with consistent logging and optional re-raising.

    Args:
        error: The exception that occurred
        context: Context description of where the error occurred
        severity: Severity level for logging
        reraise: Whether to re-raise the exception after logging
        logger: Logger instance to use (defaults to module logger)
    """
    effective_logger = logger or globals()['logger']

    error_msg = f"Error in {context}: {error}"

    severity_str = severity.value

    if severity_str == "debug":
        effective_logger.debug(error_msg, exc_info=True)
    elif severity_str == "info":
        effective_logger.info(error_msg)
    elif severity_str == "warning":
        effective_logger.warning(error_msg)
    elif severity_str == "error":
        effective_logger.error(error_msg)
    elif severity_str == "critical":
        effective_logger.critical(error_msg, exc_info=True)

    if reraise:
        raise error


def handle_config_error(error: Exception, context: str, **kwargs) -> None:
    """Handle configuration-related errors."""
    handle_error(error, f"config {context}", **kwargs)


def handle_file_error(error: Exception, context: str, **kwargs) -> None:
    """Handle file-related errors."""
    handle_error(error, f"file {context}", **kwargs)


def handle_subprocess_error(error: Exception, command: str, **kwargs) -> None:
    """Handle subprocess-related errors."""
    handle_error(error, f"subprocess command '{command}'", **kwargs)
