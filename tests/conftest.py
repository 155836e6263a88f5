"""
Pytest configuration and shared fixtures for the oracheck test suite.

This module provides canned process listings, registry files and a fake
command runner so the check can be exercised without Oracle or a real
process table.
"""

import os
import sys
import tempfile
import shutil
from pathlib import Path
from typing import Dict, Tuple
from unittest.mock import patch

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from oracheck.config import CONFIG_ENV_VAR  # noqa: E402
from oracheck.config import manager as config_manager  # noqa: E402
from oracheck.models import CheckConfig  # noqa: E402


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Make sure no test sees a configuration cached or selected by another."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr(config_manager, "_CONFIG_FILE_PATH", config_manager._CONFIG_FILE_PATH)
    monkeypatch.setattr(config_manager, "_CONFIG_PATH_EXPLICIT", False)
    monkeypatch.setattr("oracheck.config.manager._CONFIG", None)
    yield
    monkeypatch.setattr("oracheck.config.manager._CONFIG", None)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def write_registry(temp_dir):
    """Return a helper writing registry content to a file and returning its path."""

    def _write(content: str) -> Path:
        path = temp_dir / "oratab"
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def check_config(temp_dir):
    """A CheckConfig pointing at a registry inside the temp directory."""
    return CheckConfig(registry_path=temp_dir / "oratab")


# ============================================================================
# Canned process listings
# ============================================================================


LINUX_LISTING = """\
USER         PID COMMAND
root           1 /sbin/init
oracle      2101 ora_pmon_DEV01
oracle      2102 ora_smon_DEV01
oracle      3001 /u01/app/oracle/product/19.0.0/dbhome_1/bin/tnslsnr LISTENER -inherit
"""

SUNOS_LISTING = """\
  PID     ELAPSED COMMAND
    1 19-20:56:14 /sbin/init
 2101    01:23:20 ora_pmon_DEV01
 2102    01:23:20 ora_smon_DEV01
 3001 19-20:50:00 /u01/app/oracle/product/11.2.0/bin/tnslsnr LISTENER -inherit
"""


class FakeCommands:
    """
    Stand-in for run_command that answers from a table of canned outputs.

    Commands not in the table fail with exit status 1, like ps does for a
    pid that no longer exists.
    """

    def __init__(self, outputs: Dict[Tuple[str, ...], str]):
        self.outputs = outputs
        self.calls = []

    def __call__(self, command):
        key = tuple(command)
        self.calls.append(key)
        if key in self.outputs:
            return 0, self.outputs[key], ""
        return 1, "", "error: process ID list syntax error"


def linux_outputs(listing: str = LINUX_LISTING, elapsed: Dict[int, int] = None) -> Dict[Tuple[str, ...], str]:
    """Build the command table for a Linux host: full listing plus one etimes query per pid."""
    outputs = {("ps", "-eo", "user,pid,args"): listing}
    for pid, seconds in (elapsed or {}).items():
        outputs[("ps", "-o", "pid=,etimes=,args=", "-p", str(pid))] = (
            f"{pid:>7} {seconds:>8} ora_pmon_{_pmon_name(listing, pid)}\n"
        )
    return outputs


def _pmon_name(listing: str, pid: int) -> str:
    for line in listing.splitlines():
        fields = line.split()
        if len(fields) >= 3 and fields[1] == str(pid) and fields[2].startswith("ora_pmon_"):
            return fields[2][len("ora_pmon_"):]
    return "UNKNOWN"


@pytest.fixture
def fake_commands():
    """Patch command execution in the platform adapters with a FakeCommands table.

    Usage: ``fake = fake_commands(outputs)``; ``ps`` is reported as installed.
    """
    patchers = []

    def _install(outputs: Dict[Tuple[str, ...], str]) -> FakeCommands:
        fake = FakeCommands(outputs)
        for target, value in (
            ("oracheck.system.platforms.run_command", fake),
            ("oracheck.system.platforms.check_command_installed", lambda name: True),
        ):
            patcher = patch(target, value)
            patcher.start()
            patchers.append(patcher)
        return fake

    yield _install

    for patcher in patchers:
        patcher.stop()
