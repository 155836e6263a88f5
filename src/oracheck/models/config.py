"""
Configuration data models.

This module contains the configuration structure for the check, loaded from
`config.toml` or built from defaults.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

DEFAULT_CHECK_NAME = "ORACLE_INSTANCES"
DEFAULT_REGISTRY_PATH = Path("/etc/oratab")
DEFAULT_LISTENER_PATTERN = "tnslsnr"
DEFAULT_RECENT_RESTART_SECONDS = 900

# The Enterprise Manager repository database takes the OMS down with it when it
# bounces; the OMS does not reconnect on its own.
DEFAULT_RESTART_EXCEPTIONS: Dict[str, str] = {
    "ora_pmon_EMREP$": (
        "EM repository database EMREP was restarted recently - "
        "restart the OMS with 'emctl stop oms; emctl start oms'"
    ),
}


@dataclass
class CheckConfig:
    """
    Configuration for a check run, loaded from the `[check]` table of `config.toml`.
    """

    # Name printed at the start of the status line.
    check_name: str = DEFAULT_CHECK_NAME
    # Registry of expected instances (oratab format).
    registry_path: Path = DEFAULT_REGISTRY_PATH
    # Substring identifying the listener process in a command line.
    listener_pattern: str = DEFAULT_LISTENER_PATTERN
    # Processes younger than this are reported as recently restarted.
    recent_restart_seconds: int = DEFAULT_RECENT_RESTART_SECONDS
    # Regex pattern matched against a pmon command line -> remediation text.
    restart_exceptions: Dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_RESTART_EXCEPTIONS)
    )
