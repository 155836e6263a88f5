"""
Runtime data models.

This module contains the data structures produced while a single check run
gathers facts about the host: the processes found by the enumerator and the
instances declared in the registry.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# The background monitor process every running instance owns.
PMON_PREFIX = "ora_pmon_"
PMON_PATTERN = re.compile(re.escape(PMON_PREFIX) + r"(\S+)")


class InstanceStatus(Enum):
    """Reconciled state of a registered instance."""

    UNKNOWN = "unknown"
    RUNNING = "running"
    NOT_RUNNING = "not running"


@dataclass(frozen=True)
class ProcessRecord:
    """
    A single operating system process as reported by the platform listing.

    Attributes:
        pid: Process ID.
        command_line: The full command line string with arguments.
        elapsed_seconds: Seconds since the process started, or None while the
            value is unknown or could not be resolved.
    """

    pid: int
    command_line: str
    elapsed_seconds: Optional[int] = None

    @property
    def instance_name(self) -> Optional[str]:
        """Return the instance name of an ``ora_pmon_<name>`` process, else None."""
        match = PMON_PATTERN.search(self.command_line)
        return match.group(1) if match else None

    @property
    def is_pmon(self) -> bool:
        return self.instance_name is not None


@dataclass
class RegisteredInstance:
    """
    An instance declared in the registry with the auto-start flag set.

    Entries with auto-start disabled are dropped by the registry reader and
    never become a RegisteredInstance.
    """

    # The instance name (ORACLE_SID), first column of the registry line.
    name: str
    # The ORACLE_HOME column, kept for diagnostics only.
    home: str = ""
    auto_start: bool = True
    status: InstanceStatus = InstanceStatus.UNKNOWN
