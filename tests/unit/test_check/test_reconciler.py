"""
Unit tests for status reconciliation and the decision rules.
"""

import pytest

from oracheck.check.reconciler import (
    RULES,
    build_summary,
    fatal_decision,
    gather_facts,
    mark_instances,
    match_restart_exception,
    reconcile,
)
from oracheck.models import (
    CheckConfig,
    InstanceStatus,
    ProcessRecord,
    RegisteredInstance,
    Severity,
)
from oracheck.validation import RegistryUnreadable, UnsupportedPlatform


def registry(*names):
    return {name: RegisteredInstance(name=name, home="/u01/app/oracle") for name in names}


def pmon(pid, name, elapsed=5000):
    return ProcessRecord(pid=pid, command_line=f"ora_pmon_{name}", elapsed_seconds=elapsed)


@pytest.mark.unit
class TestMarkInstances:
    def test_running_and_not_running(self):
        marked = mark_instances(registry("PRD01", "DEV01"), [pmon(100, "DEV01")])

        assert [(i.name, i.status) for i in marked] == [
            ("DEV01", InstanceStatus.RUNNING),
            ("PRD01", InstanceStatus.NOT_RUNNING),
        ]

    def test_name_must_match_full_suffix(self):
        marked = mark_instances(registry("DEV0", "DEV01"), [pmon(100, "DEV01")])
        statuses = {i.name: i.status for i in marked}

        assert statuses["DEV01"] is InstanceStatus.RUNNING
        assert statuses["DEV0"] is InstanceStatus.NOT_RUNNING

    def test_inputs_are_not_mutated(self):
        instances = registry("DEV01")
        mark_instances(instances, [pmon(100, "DEV01")])

        assert instances["DEV01"].status is InstanceStatus.UNKNOWN


@pytest.mark.unit
class TestDecisionPriority:
    def test_all_up_is_ok(self):
        decision = reconcile(registry("DEV01"), [pmon(100, "DEV01")], True, "Linux")

        assert decision.severity is Severity.OK
        assert "DEV01:running" in decision.summary

    def test_listener_down_masks_everything(self):
        """Running instances without a listener are CRITICAL, whatever else is wrong."""
        decision = reconcile(
            registry("DEV01", "PRD01"),
            [pmon(100, "DEV01", elapsed=30)],
            False,
            "Linux",
        )

        assert decision.severity is Severity.CRITICAL
        assert "tnslsnr" in decision.message

    def test_listener_down_without_running_instances_is_not_critical(self):
        decision = reconcile(registry("DEV01"), [], False, "Linux")

        assert decision.severity is Severity.WARNING
        assert "DEV01" in decision.message

    def test_first_missing_instance_by_name(self):
        decision = reconcile(registry("ZZZ01", "AAA01", "MMM01"), [pmon(100, "MMM01")], True, "Linux")

        assert decision.severity is Severity.WARNING
        assert "AAA01" in decision.message
        assert "ZZZ01" not in decision.message

    def test_missing_instance_beats_recent_restart(self):
        decision = reconcile(registry("DEV01", "PRD01"), [pmon(100, "DEV01", elapsed=10)], True, "Linux")

        assert "PRD01 is not running" in decision.message

    def test_recent_restart_generic(self):
        decision = reconcile(registry("DEV01"), [pmon(100, "DEV01", elapsed=120)], True, "Linux")

        assert decision.severity is Severity.WARNING
        assert "restarted recently" in decision.message
        assert "2m00s" in decision.message

    def test_recent_restart_first_by_pid(self):
        processes = [pmon(300, "AAA01", elapsed=10), pmon(200, "BBB01", elapsed=20)]
        decision = reconcile(registry("AAA01", "BBB01"), processes, True, "Linux")

        assert "BBB01" in decision.message

    def test_restart_threshold_is_exclusive(self):
        config = CheckConfig()
        at_threshold = reconcile(
            registry("DEV01"), [pmon(100, "DEV01", elapsed=900)], True, "Linux", config
        )
        below = reconcile(registry("DEV01"), [pmon(100, "DEV01", elapsed=899)], True, "Linux", config)

        assert at_threshold.severity is Severity.OK
        assert below.severity is Severity.WARNING

    def test_restart_exception_message(self):
        decision = reconcile(registry("EMREP"), [pmon(100, "EMREP", elapsed=60)], True, "Linux")

        assert decision.severity is Severity.WARNING
        assert "emctl" in decision.message

    def test_restart_exception_needs_full_instance_name(self):
        decision = reconcile(registry("EMREP2"), [pmon(100, "EMREP2", elapsed=60)], True, "Linux")

        assert decision.severity is Severity.WARNING
        assert "EMREP2" in decision.message
        assert "emctl" not in decision.message

    def test_configured_restart_exception(self):
        config = CheckConfig(restart_exceptions={r"ora_pmon_RCAT$": "Resync the RMAN catalog"})
        decision = reconcile(registry("RCAT"), [pmon(100, "RCAT", elapsed=60)], True, "Linux", config)

        assert decision.message == "Resync the RMAN catalog"

    def test_unknown_elapsed_never_counts_as_restart(self):
        decision = reconcile(registry("DEV01"), [pmon(100, "DEV01", elapsed=None)], True, "Linux")

        assert decision.severity is Severity.OK
        assert "DEV01=unknown" in decision.summary

    def test_unregistered_pmon_still_checked_for_restart(self):
        decision = reconcile(
            registry("DEV01"),
            [pmon(100, "DEV01"), pmon(200, "SCRATCH", elapsed=5)],
            True,
            "Linux",
        )

        assert decision.severity is Severity.WARNING
        assert "SCRATCH" in decision.message

    def test_empty_registry_is_ok(self):
        decision = reconcile({}, [], False, "SunOS")

        assert decision.severity is Severity.OK
        assert "No auto-start instances" in decision.message

    def test_every_branch_carries_the_summary(self):
        cases = [
            (registry("DEV01"), [pmon(1, "DEV01")], False),
            (registry("DEV01"), [], True),
            (registry("DEV01"), [pmon(1, "DEV01", elapsed=1)], True),
            (registry("DEV01"), [pmon(1, "DEV01")], True),
        ]
        for instances, processes, listener in cases:
            decision = reconcile(instances, processes, listener, "Linux")
            assert decision.summary.startswith("OS=Linux ")
            assert decision.perfdata

    def test_idempotent(self):
        args = (registry("DEV01", "PRD01"), [pmon(1, "DEV01", elapsed=10)], True, "Linux")
        assert reconcile(*args) == reconcile(*args)

    def test_rules_are_ordered(self):
        assert [rule.__name__ for rule in RULES] == [
            "check_listener",
            "check_not_running",
            "check_recent_restart",
            "check_all_up",
        ]


@pytest.mark.unit
class TestSummary:
    def test_summary_contents(self):
        facts = gather_facts(
            "Linux",
            registry("DEV01", "PRD01"),
            [pmon(200, "DEV01", elapsed=5000)],
            True,
        )

        assert facts.summary == (
            "OS=Linux listener=up running=1/2 DEV01:running PRD01:not running uptime DEV01=1h23m"
        )
        assert facts.perfdata == "running=1;;;0;2 registered=2 listener=1"
        assert facts.running_count == 1

    def test_summary_without_processes(self):
        marked = mark_instances(registry("DEV01"), [])
        assert build_summary("SunOS", marked, [], False) == (
            "OS=SunOS listener=down running=0/1 DEV01:not running"
        )


@pytest.mark.unit
class TestMatchRestartException:
    def test_regex_search(self):
        exceptions = {"ora_pmon_EMREP": "restart OMS"}
        assert match_restart_exception("ora_pmon_EMREP", exceptions) == "restart OMS"
        assert match_restart_exception("ora_pmon_DEV01", exceptions) is None


@pytest.mark.unit
class TestFatalDecision:
    def test_unsupported_platform(self):
        decision = fatal_decision(UnsupportedPlatform("Plan9"))

        assert decision.severity is Severity.CRITICAL
        assert decision.summary == ""
        assert decision.perfdata == ""

    def test_registry_unreadable_is_unknown(self):
        decision = fatal_decision(RegistryUnreadable("/etc/oratab", "No such file or directory"))

        assert decision.severity is Severity.UNKNOWN
        assert decision.exit_code == 3
        assert "/etc/oratab" in decision.message
