"""
The instance check: reconciliation, decision rules and result rendering.
"""

from .formatter import format_result, format_uptime
from .reconciler import (
    RULES,
    CheckFacts,
    check_all_up,
    check_listener,
    check_not_running,
    check_recent_restart,
    fatal_decision,
    gather_facts,
    mark_instances,
    reconcile,
)
from .runner import run_check

__all__ = [
    "RULES",
    "CheckFacts",
    "check_all_up",
    "check_listener",
    "check_not_running",
    "check_recent_restart",
    "fatal_decision",
    "format_result",
    "format_uptime",
    "gather_facts",
    "mark_instances",
    "reconcile",
    "run_check",
]
