"""
Command execution utilities.

This module provides the single entry point used to run the platform's
process listing commands and capture their output.
"""

import logging
import os
import shutil
import subprocess
from typing import Sequence, Tuple

from ..validation import ErrorSeverity, handle_subprocess_error

logger = logging.getLogger(__name__)


def run_command(command: Sequence[str]) -> Tuple[int, str, str]:
    """Execute a command and capture its output with robust error handling.

    The command runs with ``LC_ALL=C`` so listing formats do not depend on the
    caller's locale.

    Args:
        command: The command and its arguments.

    Returns:
        Tuple of (return_code, stdout_string, stderr_string).
        return_code is -1 for execution errors.
    """
    command_str = " ".join(command)
    logger.debug(f"Executing command: '{command_str}'")

    env = os.environ.copy()
    env["LC_ALL"] = "C"

    try:
        process = subprocess.run(
            list(command),
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            env=env,
            check=False,
        )
        return process.returncode, process.stdout, process.stderr
    except FileNotFoundError as e:
        logger.debug(f"Command not found: {command[0]}: {type(e).__name__}: {e}")
        return -1, "", f"Command not found '{command[0]}'"
    except OSError as e:
        handle_subprocess_error(e, command_str, severity=ErrorSeverity.ERROR, reraise=False, logger=logger)
        return -1, "", f"An unexpected error occurred: {e}"


def check_command_installed(executable: str) -> bool:
    """Check if an executable is available on the system PATH."""
    return shutil.which(executable) is not None
