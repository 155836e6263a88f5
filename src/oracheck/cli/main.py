"""
Command-line interface for the Oracle instance check.

Prints exactly one status line on stdout and exits with the severity code
(0 OK, 1 WARNING, 2 CRITICAL, 3 UNKNOWN). Diagnostics enabled with
--verbose go to stderr and never mix with the status line.
"""

import argparse
import logging
import sys
from typing import List, Optional

from ..check import format_result, run_check
from ..config import CONFIG_ENV_VAR, get_config
from ..models.config import DEFAULT_CHECK_NAME
from ..models.results import Decision, Severity

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(verbose: bool) -> None:
    """Send diagnostics to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stderr,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="check_oracle_instances",
        description=(
            "Check that every Oracle instance flagged for auto-start in the "
            "registry (oratab) is running, and that the listener is up."
        ),
        epilog=(
            "Exit status: 0 OK, 1 WARNING, 2 CRITICAL, 3 UNKNOWN. "
            f"Settings are read from the file named by ${CONFIG_ENV_VAR} "
            "or from conf/config.toml."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Write diagnostic tracing to stderr.",
    )
    return parser


def main_cli(argv: Optional[List[str]] = None) -> int:
    """
    Run the check once, print the status line and return the exit status.

    Args:
        argv: Command-line arguments; defaults to sys.argv[1:].

    Returns:
        The severity code to exit with.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    check_name = DEFAULT_CHECK_NAME
    try:
        config = get_config()
        check_name = config.check_name
        decision = run_check(config)
    except Exception as e:
        logger.error(f"Check failed: {type(e).__name__}: {e}", exc_info=args.verbose)
        decision = Decision(Severity.UNKNOWN, f"Check failed: {type(e).__name__}: {e}")

    print(format_result(decision, check_name))
    return decision.exit_code


def main() -> None:
    """Console script entry point."""
    sys.exit(main_cli())


if __name__ == "__main__":
    main()
