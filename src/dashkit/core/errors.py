"""
Core exception types raised by token parsing and panel-definition checks.

Provides typed exceptions for core-domain failures:
- GrammarError for unknown or malformed enum tokens (tooltip modes, legend options, alert states).
- SchemaError for panel-definition mappings with unknown keys or wrong shapes.

Notes:
    - Configuration functions (dashkit.timeseries, dashkit.alert) never raise; these
      errors only surface from the parsing layers (grammar helpers, dashkit.loader).
    - This module uses only the Python standard library and has no side effects.

Examples:
    Catch an unknown legend token.

    >>> from dashkit.core.errors import GrammarError
    >>> from dashkit.core.grammar import legend_option_from_value
    >>> try:
    ...     legend_option_from_value("sideways")
    ... except GrammarError as e:
    ...     msg = str(e)
    >>> "legend option" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "GrammarError",
    "SchemaError",
]


class GrammarError(ValueError):
    """Unknown or malformed enum token (e.g., a tooltip mode or legend option)."""


class SchemaError(ValueError):
    """Panel definition failure (unknown keys, wrong value shapes, missing title)."""
