"""
Platform adapters for process discovery.

Each supported operating system gets one Platform implementation that knows
how to list processes and how to read the elapsed time it reports. The rest
of the check talks to the Platform interface only; a new platform is added by
subclassing Platform and appending it to SUPPORTED_PLATFORMS.

Supported platforms:
- SunOS: single-pass listing, elapsed time in ``[D-][HH:]MM:SS`` notation.
- Linux: two-pass listing, elapsed time queried per pmon process in seconds.
"""

import logging
import platform
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple, Type

from ..models.runtime import ProcessRecord
from ..validation import ProcessQueryFailure, UnsupportedPlatform
from .commands import check_command_installed, run_command
from .processes import (
    filter_pmon_processes,
    parse_compact_duration,
    parse_pid_elapsed_listing,
    parse_seconds,
    parse_user_pid_listing,
)

logger = logging.getLogger(__name__)

# Platforms the check knows about but has no listing support for.
UNIMPLEMENTED_PLATFORMS: Tuple[str, ...] = ("AIX", "HP-UX", "Darwin", "FreeBSD", "CYGWIN")


class Platform(ABC):
    """
    Capability interface for one operating system family.

    Attributes:
        name: Display name used in the status line.
        token: Substring of the OS identity that selects this platform.
        listing_executable: Program the listing commands depend on.
    """

    name: str = ""
    token: str = ""
    listing_executable: str = "ps"

    @property
    @abstractmethod
    def listing_command(self) -> List[str]:
        """The command listing every process on the host."""

    @abstractmethod
    def parse_listing(self, output: str) -> List[ProcessRecord]:
        """Parse the output of listing_command."""

    @abstractmethod
    def parse_elapsed(self, text: str) -> Optional[int]:
        """Convert this platform's elapsed time column to seconds."""

    @abstractmethod
    def list_oracle_processes(self, processes: Sequence[ProcessRecord]) -> List[ProcessRecord]:
        """Select the pmon processes from a full listing and resolve their elapsed time."""

    def validate(self) -> None:
        """Check that the process listing can be run at all.

        Raises:
            ProcessQueryFailure: If the listing executable is not installed.
        """
        if not check_command_installed(self.listing_executable):
            raise ProcessQueryFailure(
                " ".join(self.listing_command),
                f"'{self.listing_executable}' not found in PATH",
            )

    def list_processes(self) -> List[ProcessRecord]:
        """List every process on the host.

        Raises:
            ProcessQueryFailure: If the listing command fails.
        """
        command = self.listing_command
        returncode, stdout, stderr = run_command(command)
        if returncode != 0:
            raise ProcessQueryFailure(" ".join(command), stderr.strip() or f"exit status {returncode}")
        processes = self.parse_listing(stdout)
        logger.debug(f"{self.name}: listed {len(processes)} process(es)")
        return processes

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class SunOSPlatform(Platform):
    """Single-pass platform: one listing returns pid, etime and args."""

    name = "SunOS"
    token = "SunOS"

    @property
    def listing_command(self) -> List[str]:
        return ["ps", "-eo", "pid,etime,args"]

    def parse_listing(self, output: str) -> List[ProcessRecord]:
        return parse_pid_elapsed_listing(output, self.parse_elapsed)

    def parse_elapsed(self, text: str) -> Optional[int]:
        return parse_compact_duration(text)

    def list_oracle_processes(self, processes: Sequence[ProcessRecord]) -> List[ProcessRecord]:
        return filter_pmon_processes(processes)


class LinuxPlatform(Platform):
    """
    Two-pass platform.

    The first listing has no elapsed time; each pmon process found in it is
    queried again for ``etimes``. That is one extra ps call per instance on
    the host.
    """

    name = "Linux"
    token = "Linux"

    @property
    def listing_command(self) -> List[str]:
        return ["ps", "-eo", "user,pid,args"]

    def elapsed_command(self, pid: int) -> List[str]:
        return ["ps", "-o", "pid=,etimes=,args=", "-p", str(pid)]

    def parse_listing(self, output: str) -> List[ProcessRecord]:
        return parse_user_pid_listing(output)

    def parse_elapsed(self, text: str) -> Optional[int]:
        return parse_seconds(text)

    def query_elapsed(self, record: ProcessRecord) -> ProcessRecord:
        """Re-query one process for its elapsed time.

        A process that vanished between the two passes keeps an unknown
        elapsed time.
        """
        returncode, stdout, _stderr = run_command(self.elapsed_command(record.pid))
        if returncode == 0:
            for resolved in parse_pid_elapsed_listing(stdout, self.parse_elapsed):
                if resolved.pid == record.pid:
                    return resolved
        logger.debug(f"Could not resolve elapsed time for pid {record.pid} (exit status {returncode})")
        return record

    def list_oracle_processes(self, processes: Sequence[ProcessRecord]) -> List[ProcessRecord]:
        return [self.query_elapsed(record) for record in filter_pmon_processes(processes)]


SUPPORTED_PLATFORMS: Tuple[Type[Platform], ...] = (SunOSPlatform, LinuxPlatform)


def get_os_identity() -> str:
    """Return the operating system identity string (``uname -s``)."""
    return platform.system()


def detect_platform(identity: Optional[str] = None) -> Platform:
    """Select the Platform adapter for this host.

    Matching is a case-sensitive substring test against each supported
    platform token, in order; the first match wins.

    Args:
        identity: OS identity string. Defaults to the running host's.

    Raises:
        UnsupportedPlatform: If no supported platform matches.
    """
    if identity is None:
        identity = get_os_identity()

    for platform_cls in SUPPORTED_PLATFORMS:
        if platform_cls.token in identity:
            logger.debug(f"OS identity '{identity}' -> {platform_cls.name}")
            return platform_cls()

    known = any(token in identity for token in UNIMPLEMENTED_PLATFORMS)
    raise UnsupportedPlatform(identity, known=known)
