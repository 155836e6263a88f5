"""
System interaction utilities.

This module provides everything the check needs from the operating system:

- Command execution with consistent error handling and logging
- Platform detection and per-platform process listing adapters
- Process listing parsers, pmon discovery and listener detection
"""

# Command execution
from .commands import check_command_installed, run_command

# Platform adapters
from .platforms import (
    SUPPORTED_PLATFORMS,
    UNIMPLEMENTED_PLATFORMS,
    LinuxPlatform,
    Platform,
    SunOSPlatform,
    detect_platform,
    get_os_identity,
)

# Process parsing and analysis
from .processes import (
    filter_pmon_processes,
    is_listener_running,
    list_oracle_processes,
    parse_compact_duration,
    parse_pid_elapsed_listing,
    parse_seconds,
    parse_user_pid_listing,
)

__all__ = [
    # Commands
    "check_command_installed",
    "run_command",
    # Platforms
    "SUPPORTED_PLATFORMS",
    "UNIMPLEMENTED_PLATFORMS",
    "LinuxPlatform",
    "Platform",
    "SunOSPlatform",
    "detect_platform",
    "get_os_identity",
    # Processes
    "filter_pmon_processes",
    "is_listener_running",
    "list_oracle_processes",
    "parse_compact_duration",
    "parse_pid_elapsed_listing",
    "parse_seconds",
    "parse_user_pid_listing",
]
