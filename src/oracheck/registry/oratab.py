"""
Reader for the instance registry (oratab format).

Each line declares one instance as ``SID:ORACLE_HOME:FLAG``; any further
colon-separated fields are ignored. Only instances flagged ``Y`` are expected
to be running and enter the registered set.
"""

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, Union

from ..models.runtime import RegisteredInstance
from ..validation import RegistryUnreadable, handle_file_error, ErrorSeverity

logger = logging.getLogger(__name__)

_AUTOSTART_LINE = re.compile(r"^([A-Za-z0-9]+):([A-Za-z0-9_.\-/]+):Y")


def parse_registry_lines(lines: Iterable[str]) -> Dict[str, RegisteredInstance]:
    """Parse registry lines into the set of auto-start instances.

    Comment lines and lines ending in ``:N`` are skipped; the ``:N`` test runs
    before the line is matched, so a malformed ``:N`` line is skipped too.
    Anything else that is not a ``Y`` entry is ignored. A name declared twice
    keeps its last entry.

    Returns:
        Registered instances keyed by name, in registry order.
    """
    instances: Dict[str, RegisteredInstance] = {}
    for line_no, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip()
        if not line or line.startswith("#"):
            continue
        if line.endswith(":N"):
            continue
        match = _AUTOSTART_LINE.match(line)
        if not match:
            logger.debug(f"Ignoring registry line {line_no}: {line!r}")
            continue
        name, home = match.groups()
        if name in instances:
            logger.debug(f"Registry line {line_no} redefines instance {name}")
        instances[name] = RegisteredInstance(name=name, home=home, auto_start=True)
    return instances


def read_registry(path: Union[str, Path]) -> Dict[str, RegisteredInstance]:
    """Read the registry file.

    Args:
        path: Location of the registry file.

    Returns:
        Registered auto-start instances keyed by name.

    Raises:
        RegistryUnreadable: If the file is missing or cannot be read.
    """
    path = Path(path)
    try:
        # Undecodable bytes only spoil the line they sit on.
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            lines = f.readlines()
    except OSError as e:
        reason = e.strerror or str(e)
        error = RegistryUnreadable(path, reason)
        handle_file_error(error, f"reading registry {path}", severity=ErrorSeverity.DEBUG,
                          reraise=False, logger=logger)
        raise error from e

    instances = parse_registry_lines(lines)
    logger.debug(f"Registry {path}: {len(instances)} auto-start instance(s): {sorted(instances)}")
    return instances
