"""
Result line rendering.

A check run prints exactly one line::

    <CHECK_NAME> <SEVERITY> - <message>[; <summary>]|<perfdata>

The performance data segment after ``|`` may be empty.
"""

import re
from typing import Optional

from ..models.results import Decision

_WHITESPACE = re.compile(r"\s+")


def format_uptime(seconds: Optional[int]) -> str:
    """Render a duration compactly.

    Examples:
        >>> format_uptime(120)
        '2m00s'
        >>> format_uptime(5000)
        '1h23m'
        >>> format_uptime(93784)
        '1d02h03m'
    """
    if seconds is None:
        return "unknown"
    days, remainder = divmod(int(seconds), 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, secs = divmod(remainder, 60)
    if days:
        return f"{days}d{hours:02d}h{minutes:02d}m"
    if hours:
        return f"{hours}h{minutes:02d}m"
    return f"{minutes}m{secs:02d}s"


def _single_line(text: str) -> str:
    # '|' would be read as the start of the performance data.
    return _WHITESPACE.sub(" ", text.replace("|", "/")).strip()


def format_result(decision: Decision, check_name: str) -> str:
    """Render a Decision as the single status line."""
    text = f"{check_name} {decision.severity.name} - {decision.message}"
    if decision.summary:
        text = f"{text}; {decision.summary}"
    return f"{_single_line(text)}|{_single_line(decision.perfdata)}"
