"""
oracheck: health check for Oracle instances configured to auto-start.

Reports whether every instance flagged ``Y`` in the registry (oratab) has a
running pmon process and whether the listener is up, as one status line and
an NRPE-style exit code.

The package is organized into specialized modules:
- config: Configuration loading and validation
- models: Data structures and type definitions
- validation: Error types, validators and error handling
- system: Platform detection, process listing and parsing
- registry: Registry (oratab) reading
- check: Reconciliation, decision rules and result rendering
- cli: Command-line interface

Usage:
    From command line:
        check_oracle_instances [-v]
        python -m oracheck [-v]

    Programmatically:
        from oracheck import run_check, format_result, get_config
        decision = run_check()
        print(format_result(decision, get_config().check_name))
"""

# Main interfaces
from .config import get_config, clear_config_cache, set_config_path
from .check import format_result, reconcile, run_check
from .cli import main_cli

# Model classes for external use
from .models import (
    CheckConfig,
    Decision,
    InstanceStatus,
    ProcessRecord,
    RegisteredInstance,
    Severity,
)

# Errors
from .validation import (
    CheckError,
    ProcessQueryFailure,
    RegistryUnreadable,
    UnsupportedPlatform,
    ValidationError,
)

# System and registry
from .registry import read_registry
from .system import detect_platform, is_listener_running, list_oracle_processes

__version__ = "1.0.0"

__all__ = [
    # Main interfaces
    "get_config",
    "clear_config_cache",
    "set_config_path",
    "format_result",
    "reconcile",
    "run_check",
    "main_cli",
    # Models
    "CheckConfig",
    "Decision",
    "InstanceStatus",
    "ProcessRecord",
    "RegisteredInstance",
    "Severity",
    # Errors
    "CheckError",
    "ProcessQueryFailure",
    "RegistryUnreadable",
    "UnsupportedPlatform",
    "ValidationError",
    # System and registry
    "read_registry",
    "detect_platform",
    "is_listener_running",
    "list_oracle_processes",
]
