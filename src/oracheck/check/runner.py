"""
Check orchestration.

Runs the stages of a check strictly in order, each exactly once:
platform detection, listing validation, process enumeration, registry
reading, listener detection, reconciliation. A fatal error at any stage
stops the run and becomes the result.
"""

import logging
from typing import Optional

from ..config import get_config
from ..models.config import CheckConfig
from ..models.results import Decision
from ..registry import read_registry
from ..system.platforms import Platform, detect_platform
from ..system.processes import is_listener_running, list_oracle_processes
from ..validation import CheckError
from .reconciler import fatal_decision, reconcile

logger = logging.getLogger(__name__)


def run_check(
    config: Optional[CheckConfig] = None,
    identity: Optional[str] = None,
    platform: Optional[Platform] = None,
) -> Decision:
    """Run the instance check once.

    Args:
        config: Check configuration. Defaults to get_config().
        identity: OS identity string; defaults to the running host's.
        platform: A ready Platform adapter, bypassing detection.

    Returns:
        The Decision for this run.
    """
    if config is None:
        config = get_config()

    try:
        if platform is None:
            platform = detect_platform(identity)
        platform.validate()

        processes = platform.list_processes()
        oracle_processes = list_oracle_processes(platform, processes)
        instances = read_registry(config.registry_path)
        listener_running = is_listener_running(processes, config.listener_pattern)
    except CheckError as e:
        logger.debug(f"Check aborted: {type(e).__name__}: {e}")
        return fatal_decision(e)

    return reconcile(
        instances,
        oracle_processes,
        listener_running,
        platform_name=platform.name,
        config=config,
    )
