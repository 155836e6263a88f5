"""
Data models and structures for the check.

Configuration Models:
- Check settings (registry location, thresholds, restart exceptions)

Runtime Models:
- Process records produced by the platform listing
- Registered instances and their reconciled status

Result Models:
- Severity scale and the immutable Decision of a run
"""

# Configuration models
from .config import CheckConfig

# Runtime models
from .runtime import (
    PMON_PREFIX,
    InstanceStatus,
    ProcessRecord,
    RegisteredInstance,
)

# Result models
from .results import Decision, Severity

__all__ = [
    # Configuration
    "CheckConfig",
    # Runtime
    "PMON_PREFIX",
    "InstanceStatus",
    "ProcessRecord",
    "RegisteredInstance",
    # Results
    "Decision",
    "Severity",
]
