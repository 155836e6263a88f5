"""
Status reconciliation and alert decision.

The reconciler cross-references the registered instances with the pmon
processes found on the host, then evaluates an ordered list of rules. Each
rule returns a Decision or None; the first Decision wins, even if a later
rule would have produced a more severe one.

Rule order:
1. Instances are running but the listener is down -> CRITICAL
2. A registered instance is not running           -> WARNING
3. A pmon process was started recently            -> WARNING
4. Everything is up                               -> OK
"""

import dataclasses
import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Mapping, Optional, Sequence, Tuple

from ..models.config import CheckConfig
from ..models.results import Decision, Severity
from ..models.runtime import InstanceStatus, ProcessRecord, RegisteredInstance
from ..validation import CheckError
from .formatter import format_uptime

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckFacts:
    """Everything the rules look at, gathered once per run."""

    platform_name: str
    # Registered instances with their status set, sorted by name.
    instances: Tuple[RegisteredInstance, ...]
    # pmon processes, sorted by pid.
    processes: Tuple[ProcessRecord, ...]
    listener_running: bool
    summary: str
    perfdata: str

    @property
    def running_count(self) -> int:
        return sum(1 for i in self.instances if i.status is InstanceStatus.RUNNING)


Rule = Callable[[CheckFacts, CheckConfig], Optional[Decision]]


def mark_instances(
    instances: Mapping[str, RegisteredInstance], processes: Sequence[ProcessRecord]
) -> List[RegisteredInstance]:
    """Return copies of the instances with RUNNING / NOT_RUNNING status, sorted by name.

    An instance is running when some pmon process carries exactly its name;
    ``ora_pmon_DEV0`` does not count for ``DEV01`` and vice versa.
    """
    running_names = {p.instance_name for p in processes if p.instance_name}
    marked = []
    for name in sorted(instances):
        status = InstanceStatus.RUNNING if name in running_names else InstanceStatus.NOT_RUNNING
        marked.append(dataclasses.replace(instances[name], status=status))
    return marked


def build_summary(
    platform_name: str,
    instances: Sequence[RegisteredInstance],
    processes: Sequence[ProcessRecord],
    listener_running: bool,
) -> str:
    """Build the aggregate summary appended to every non-fatal result."""
    running = sum(1 for i in instances if i.status is InstanceStatus.RUNNING)
    parts = [
        f"OS={platform_name}",
        f"listener={'up' if listener_running else 'down'}",
        f"running={running}/{len(instances)}",
    ]
    parts.extend(f"{i.name}:{i.status.value}" for i in instances)
    if processes:
        uptimes = " ".join(
            f"{p.instance_name}={format_uptime(p.elapsed_seconds)}" for p in processes
        )
        parts.append(f"uptime {uptimes}")
    return " ".join(parts)


def build_perfdata(instances: Sequence[RegisteredInstance], listener_running: bool) -> str:
    running = sum(1 for i in instances if i.status is InstanceStatus.RUNNING)
    total = len(instances)
    return f"running={running};;;0;{total} registered={total} listener={int(listener_running)}"


def gather_facts(
    platform_name: str,
    instances: Mapping[str, RegisteredInstance],
    processes: Sequence[ProcessRecord],
    listener_running: bool,
) -> CheckFacts:
    ordered_processes = tuple(sorted(processes, key=lambda p: p.pid))
    marked = tuple(mark_instances(instances, ordered_processes))
    return CheckFacts(
        platform_name=platform_name,
        instances=marked,
        processes=ordered_processes,
        listener_running=listener_running,
        summary=build_summary(platform_name, marked, ordered_processes, listener_running),
        perfdata=build_perfdata(marked, listener_running),
    )


def _decision(severity: Severity, message: str, facts: CheckFacts) -> Decision:
    return Decision(severity=severity, message=message, summary=facts.summary, perfdata=facts.perfdata)


def check_listener(facts: CheckFacts, config: CheckConfig) -> Optional[Decision]:
    """Running instances without a listener cannot be reached by clients."""
    if facts.running_count > 0 and not facts.listener_running:
        return _decision(
            Severity.CRITICAL,
            f"Listener ({config.listener_pattern}) is not running "
            f"while {facts.running_count} instance(s) are up",
            facts,
        )
    return None


def check_not_running(facts: CheckFacts, config: CheckConfig) -> Optional[Decision]:
    """Report the first registered instance, by name, that is not running."""
    for instance in facts.instances:
        if instance.status is InstanceStatus.NOT_RUNNING:
            return _decision(
                Severity.WARNING,
                f"Instance {instance.name} is not running although auto-start "
                f"is set in the registry",
                facts,
            )
    return None


def match_restart_exception(command_line: str, exceptions: Mapping[str, str]) -> Optional[str]:
    """Return the remediation text of the first exception pattern matching the command line."""
    for pattern, message in exceptions.items():
        if re.search(pattern, command_line):
            return message
    return None


def check_recent_restart(facts: CheckFacts, config: CheckConfig) -> Optional[Decision]:
    """Report the first pmon process, by pid, younger than the restart threshold."""
    for process in facts.processes:
        if process.elapsed_seconds is None:
            continue
        if process.elapsed_seconds >= config.recent_restart_seconds:
            continue
        remediation = match_restart_exception(process.command_line, config.restart_exceptions)
        if remediation:
            return _decision(Severity.WARNING, remediation, facts)
        return _decision(
            Severity.WARNING,
            f"Instance {process.instance_name} was restarted recently: up "
            f"{format_uptime(process.elapsed_seconds)} (pid {process.pid})",
            facts,
        )
    return None


def check_all_up(facts: CheckFacts, config: CheckConfig) -> Optional[Decision]:
    if not facts.instances:
        return _decision(Severity.OK, "No auto-start instances registered", facts)
    return _decision(
        Severity.OK,
        f"All {len(facts.instances)} auto-start instance(s) running",
        facts,
    )


RULES: Tuple[Rule, ...] = (
    check_listener,
    check_not_running,
    check_recent_restart,
    check_all_up,
)


def reconcile(
    instances: Mapping[str, RegisteredInstance],
    oracle_processes: Sequence[ProcessRecord],
    listener_running: bool,
    platform_name: str,
    config: Optional[CheckConfig] = None,
    rules: Sequence[Rule] = RULES,
) -> Decision:
    """Reduce the gathered facts to a single Decision.

    Args:
        instances: Registered auto-start instances keyed by name.
        oracle_processes: pmon processes found on the host.
        listener_running: Whether the listener process was found.
        platform_name: Name of the detected platform, for the summary.
        config: Check configuration. Defaults to built-in defaults.
        rules: Ordered rules; the first one returning a Decision wins.
    """
    config = config or CheckConfig()
    facts = gather_facts(platform_name, instances, oracle_processes, listener_running)
    logger.debug(f"Reconciled facts: {facts.summary}")

    for rule in rules:
        decision = rule(facts, config)
        if decision is not None:
            logger.debug(f"Rule {rule.__name__} -> {decision.severity.name}")
            return decision

    # RULES ends with check_all_up, which always decides.
    return _decision(Severity.UNKNOWN, "No rule produced a result", facts)


def fatal_decision(error: CheckError) -> Decision:
    """Decision for a run aborted by a fatal error: no summary, no perfdata."""
    return Decision(severity=error.severity, message=error.message)
