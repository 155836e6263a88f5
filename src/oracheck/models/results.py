"""
Check result data models.

This module defines the severity scale understood by monitoring agents and
the immutable Decision value that a check run reduces all of its findings to.
"""

from dataclasses import dataclass
from enum import IntEnum


class Severity(IntEnum):
    """
    Result severity. The integer value is the process exit status expected by
    NRPE-style monitoring agents.
    """

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


@dataclass(frozen=True)
class Decision:
    """
    The single outcome of a check run.

    A Decision is built once, at the end of reconciliation (or when a fatal
    error aborts the run), and never changed afterwards.
    """

    severity: Severity
    # Human readable reason for the severity.
    message: str
    # Aggregate summary appended for operator context; empty for fatal results.
    summary: str = ""
    # Performance data segment, without the leading '|'. May be empty.
    perfdata: str = ""

    @property
    def exit_code(self) -> int:
        return int(self.severity)
