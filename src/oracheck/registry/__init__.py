"""
Instance registry reading.
"""

from .oratab import parse_registry_lines, read_registry

__all__ = [
    "parse_registry_lines",
    "read_registry",
]
