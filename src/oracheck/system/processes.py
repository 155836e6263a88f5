"""
Process listing parsers and queries.

This module turns raw process listing output into ProcessRecord objects and
answers the two questions the check asks about the process table: which
Oracle instances have a pmon process (and for how long), and whether the
listener is up.

Parsing is best-effort: lines that do not have the expected shape are
skipped silently, never reported as errors.
"""

import logging
import re
from typing import Callable, List, Optional, Sequence

from ..models.runtime import ProcessRecord

logger = logging.getLogger(__name__)

# Elapsed time in ps "etime" notation. The formats differ by field count.
_ETIME_DAYS = re.compile(r"^(\d+)-(\d+):(\d{2}):(\d{2})$")
_ETIME_HOURS = re.compile(r"^(\d+):(\d{2}):(\d{2})$")
_ETIME_MINUTES = re.compile(r"^(\d+):(\d{2})$")

# "<pid> <elapsed> <args>" as printed by `ps -o pid,etime,args` and `ps -o pid,etimes,args`.
_PID_ELAPSED_ARGS = re.compile(r"^\s*(\d+)\s+(\S+)\s+(.+?)\s*$")
# "<user> <pid> <args>" as printed by `ps -eo user,pid,args`.
_USER_PID_ARGS = re.compile(r"^\s*(\S+)\s+(\d+)\s+(.+?)\s*$")

ElapsedParser = Callable[[str], Optional[int]]


def parse_compact_duration(text: str) -> Optional[int]:
    """Parse a ps ``etime`` value into seconds.

    Supported formats are ``MM:SS``, ``HH:MM:SS`` and ``D-HH:MM:SS``.

    Returns:
        The duration in seconds, or None if the text matches none of the formats.

    Examples:
        >>> parse_compact_duration("56:14")
        3374
        >>> parse_compact_duration("19-20:56:14")
        1716974
    """
    text = text.strip()

    match = _ETIME_DAYS.match(text)
    if match:
        days, hours, minutes, seconds = map(int, match.groups())
        return days * 86400 + hours * 3600 + minutes * 60 + seconds

    match = _ETIME_HOURS.match(text)
    if match:
        hours, minutes, seconds = map(int, match.groups())
        return hours * 3600 + minutes * 60 + seconds

    match = _ETIME_MINUTES.match(text)
    if match:
        minutes, seconds = map(int, match.groups())
        return minutes * 60 + seconds

    return None


def parse_seconds(text: str) -> Optional[int]:
    """Parse a ps ``etimes`` value (whole seconds)."""
    text = text.strip()
    return int(text) if text.isdigit() else None


def parse_pid_elapsed_listing(output: str, parse_elapsed: ElapsedParser) -> List[ProcessRecord]:
    """Parse ``pid elapsed args`` lines.

    Args:
        output: Raw listing output, header included or not.
        parse_elapsed: Converts the elapsed column to seconds.

    Returns:
        One record per well-formed line, in listing order.
    """
    records = []
    for line in output.splitlines():
        match = _PID_ELAPSED_ARGS.match(line)
        if not match:
            continue
        pid_str, elapsed_str, args = match.groups()
        elapsed = parse_elapsed(elapsed_str)
        if elapsed is None:
            logger.debug(f"Skipping line with unparseable elapsed time: {line!r}")
            continue
        records.append(ProcessRecord(pid=int(pid_str), command_line=args, elapsed_seconds=elapsed))
    return records


def parse_user_pid_listing(output: str) -> List[ProcessRecord]:
    """Parse ``user pid args`` lines. Elapsed time is left unknown."""
    records = []
    for line in output.splitlines():
        match = _USER_PID_ARGS.match(line)
        if not match:
            continue
        _user, pid_str, args = match.groups()
        records.append(ProcessRecord(pid=int(pid_str), command_line=args))
    return records


def filter_pmon_processes(processes: Sequence[ProcessRecord]) -> List[ProcessRecord]:
    """Keep the ``ora_pmon_<name>`` processes."""
    return [p for p in processes if p.is_pmon]


def list_oracle_processes(platform, processes: Optional[Sequence[ProcessRecord]] = None) -> List[ProcessRecord]:
    """List the pmon processes of running instances, with elapsed time resolved.

    Args:
        platform: The Platform adapter for this host.
        processes: A full process listing already taken in this run. When
            omitted the OS is queried again.

    Returns:
        pmon process records. Records whose elapsed time could not be
        resolved carry ``elapsed_seconds=None``.
    """
    if processes is None:
        processes = platform.list_processes()
    oracle_processes = platform.list_oracle_processes(processes)
    logger.debug(f"Found {len(oracle_processes)} pmon process(es): {oracle_processes}")
    return oracle_processes


def is_listener_running(processes: Sequence[ProcessRecord], pattern: str = "tnslsnr") -> bool:
    """Return True if any process command line contains the listener name."""
    for process in processes:
        if pattern in process.command_line:
            logger.debug(f"Listener found: pid {process.pid} '{process.command_line}'")
            return True
    logger.debug(f"No process matching '{pattern}' found")
    return False
