"""
Canonical dashkit grammar and helpers.

Defines the friendly configuration tokens (tooltip modes, legend options, alert
states) and the platform values they translate to (legend display modes,
placements, calcs). Includes zero-IO parse/normalize helpers used by the loader
and the CLI.

Design principles
-----------------
1) One naming standard:
   - Enum classes: PascalCase
   - Enum member names: UPPER_SNAKE (Python constants)
   - Token enum values (YAML/CLI input): lower_snake
   - Platform enum values (panel JSON): whatever the platform expects
     (e.g., "firstNotNull"); these are never parsed from user input.

2) Tokens vs. wire values:
   - LegendOption is a caller-facing token; it never appears in panel JSON.
   - LegendDisplayMode, LegendPlacement and LegendCalc are the wire values that
     LegendOption tokens map to.

Token-to-wire mapping
---------------------
| LegendOption     | Effect on legend
|------------------|-------------------------------
| hide             | display_mode = "hidden"
| as_list          | display_mode = "list"
| as_table         | display_mode = "table"
| bottom           | placement = "bottom"
| to_the_right     | placement = "right"
| first            | calcs += "first"
| first_non_null   | calcs += "firstNotNull"
| last             | calcs += "last"
| last_non_null    | calcs += "lastNotNull"
| min / max / avg  | calcs += "min" / "max" / "mean"
| count            | calcs += "count"
| total            | calcs += "sum"
| range            | calcs += "range"

Examples
--------
>>> from dashkit.core.grammar import (
...     LegendOption,
...     legend_option_from_value,
...     tooltip_mode_from_value,
...     calc_for,
... )
>>> legend_option_from_value("TO_THE_RIGHT") == LegendOption.TO_THE_RIGHT
True
>>> tooltip_mode_from_value("multi").value
'multi'
>>> calc_for(LegendOption.AVG).value
'mean'
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum
from typing import Final, TypeVar

from .errors import GrammarError

__all__ = [
    "TooltipMode",
    "LegendOption",
    "LegendDisplayMode",
    "LegendPlacement",
    "LegendCalc",
    "NoDataState",
    "ExecutionErrorState",
    # helpers/validators
    "is_lower_snake",
    "tooltip_mode_from_value",
    "legend_option_from_value",
    "no_data_state_from_value",
    "execution_error_state_from_value",
    "display_mode_for",
    "placement_for",
    "calc_for",
    "is_calc_option",
    "ensure_all_enum_values_lower_snake",
]

# ============================================================================
# TOOLTIP
# ============================================================================


class TooltipMode(Enum):
    """
    Which series the tooltip lists when hovering the chart.

    Serialized values appear in:
      - options.tooltip.mode
    """

    SINGLE_SERIES = "single"
    ALL_SERIES = "multi"
    NO_SERIES = "none"


# ============================================================================
# LEGEND
# ============================================================================


class LegendOption(Enum):
    """
    Caller-facing legend tokens accepted by dashkit.timeseries.legend.

    Notes:
      Display (hide/as_list/as_table) and placement (bottom/to_the_right)
      tokens are last-write-wins within one legend call. Every other token
      appends one calc.
    """

    HIDE = "hide"
    AS_TABLE = "as_table"
    AS_LIST = "as_list"
    BOTTOM = "bottom"
    TO_THE_RIGHT = "to_the_right"

    MIN = "min"
    MAX = "max"
    AVG = "avg"

    FIRST = "first"
    FIRST_NON_NULL = "first_non_null"
    LAST = "last"
    LAST_NON_NULL = "last_non_null"

    TOTAL = "total"
    COUNT = "count"
    RANGE = "range"


class LegendDisplayMode(Enum):
    """Serialized in options.legend.displayMode."""

    HIDDEN = "hidden"
    LIST = "list"
    TABLE = "table"


class LegendPlacement(Enum):
    """Serialized in options.legend.placement."""

    BOTTOM = "bottom"
    RIGHT = "right"


class LegendCalc(Enum):
    """
    Per-series reductions shown in the legend.

    Serialized values appear in:
      - options.legend.calcs[]
    """

    FIRST = "first"
    FIRST_NOT_NULL = "firstNotNull"
    LAST = "last"
    LAST_NOT_NULL = "lastNotNull"
    MIN = "min"
    MAX = "max"
    MEAN = "mean"
    COUNT = "count"
    SUM = "sum"
    RANGE = "range"


# ============================================================================
# ALERT STATES
# ============================================================================


class NoDataState(Enum):
    """State an alert moves to when its query returns no data."""

    NO_DATA = "no_data"
    ALERTING = "alerting"
    OK = "ok"
    KEEP_STATE = "keep_state"


class ExecutionErrorState(Enum):
    """State an alert moves to when its evaluation errors."""

    ALERTING = "alerting"
    KEEP_STATE = "keep_state"


# ============================================================================
# Mapping tables
# ============================================================================

_DISPLAY_MODE_BY_OPTION: Final[dict[LegendOption, LegendDisplayMode]] = {
    LegendOption.HIDE: LegendDisplayMode.HIDDEN,
    LegendOption.AS_LIST: LegendDisplayMode.LIST,
    LegendOption.AS_TABLE: LegendDisplayMode.TABLE,
}

_PLACEMENT_BY_OPTION: Final[dict[LegendOption, LegendPlacement]] = {
    LegendOption.BOTTOM: LegendPlacement.BOTTOM,
    LegendOption.TO_THE_RIGHT: LegendPlacement.RIGHT,
}

_CALC_BY_OPTION: Final[dict[LegendOption, LegendCalc]] = {
    LegendOption.FIRST: LegendCalc.FIRST,
    LegendOption.FIRST_NON_NULL: LegendCalc.FIRST_NOT_NULL,
    LegendOption.LAST: LegendCalc.LAST,
    LegendOption.LAST_NON_NULL: LegendCalc.LAST_NOT_NULL,
    LegendOption.MIN: LegendCalc.MIN,
    LegendOption.MAX: LegendCalc.MAX,
    LegendOption.AVG: LegendCalc.MEAN,
    LegendOption.COUNT: LegendCalc.COUNT,
    LegendOption.TOTAL: LegendCalc.SUM,
    LegendOption.RANGE: LegendCalc.RANGE,
}


# ============================================================================
# Helpers & Validators (zero I/O)
# ============================================================================

_LOWER_SNAKE_RE: Final[re.Pattern[str]] = re.compile(r"^[a-z0-9]+(?:_[a-z0-9]+)*$")

E = TypeVar("E", bound=Enum)


def is_lower_snake(value: str) -> bool:
    """
    Check whether a string is lower_snake.

    Examples:
      >>> is_lower_snake("to_the_right")
      True
      >>> is_lower_snake("ToTheRight")
      False
    """
    return bool(_LOWER_SNAKE_RE.match(value or ""))


def _enum_from_token(enum_cls: type[E], s: object, what: str) -> E:
    # Accept an enum member, its serialized value, or its member name (any case).
    if isinstance(s, enum_cls):
        return s
    token = str(s if s is not None else "").strip()
    lowered = token.lower()
    for member in enum_cls:
        if member.value == token or member.value.lower() == lowered:
            return member
        if member.name.lower() == lowered:
            return member
    allowed = [m.value for m in enum_cls]
    raise GrammarError(f"{what} must be one of {allowed} (got {s!r})")


def tooltip_mode_from_value(s: object) -> TooltipMode:
    """
    Parse a tooltip mode token.

    Args:
      s (object): Wire value ("single", "multi", "none"), member name
        ("single_series", "ALL_SERIES"), or a TooltipMode.

    Returns:
      TooltipMode: Parsed tooltip mode.

    Raises:
      GrammarError: If the token is not a known tooltip mode.
    """
    return _enum_from_token(TooltipMode, s, "tooltip mode")


def legend_option_from_value(s: object) -> LegendOption:
    """
    Parse a legend token.

    Args:
      s (object): lower_snake token (case-insensitive) or a LegendOption.

    Returns:
      LegendOption: Parsed legend option.

    Raises:
      GrammarError: If the token is not a known legend option.

    Examples:
      >>> legend_option_from_value("as_table")
      <LegendOption.AS_TABLE: 'as_table'>
    """
    return _enum_from_token(LegendOption, s, "legend option")


def no_data_state_from_value(s: object) -> NoDataState:
    """Parse a no-data alert state token; raises GrammarError when unknown."""
    return _enum_from_token(NoDataState, s, "no data state")


def execution_error_state_from_value(s: object) -> ExecutionErrorState:
    """Parse an execution-error alert state token; raises GrammarError when unknown."""
    return _enum_from_token(ExecutionErrorState, s, "execution error state")


def display_mode_for(option: LegendOption) -> LegendDisplayMode | None:
    """Return the display mode a legend token selects, or None for non-display tokens."""
    return _DISPLAY_MODE_BY_OPTION.get(option)


def placement_for(option: LegendOption) -> LegendPlacement | None:
    """Return the placement a legend token selects, or None for non-placement tokens."""
    return _PLACEMENT_BY_OPTION.get(option)


def calc_for(option: LegendOption) -> LegendCalc | None:
    """
    Return the calc a legend token appends, or None for display/placement tokens.

    Examples:
      >>> calc_for(LegendOption.TOTAL).value
      'sum'
      >>> calc_for(LegendOption.HIDE) is None
      True
    """
    return _CALC_BY_OPTION.get(option)


def is_calc_option(option: LegendOption) -> bool:
    return option in _CALC_BY_OPTION


def ensure_all_enum_values_lower_snake(enums: Iterable[type[Enum]]) -> None:
    """
    Assert that every enum member's value is lower_snake.

    Args:
      enums (Iterable[type[Enum]]): Iterable of Enum classes to inspect.

    Raises:
      AssertionError: If any enum member has a non-lower_snake value.

    Notes:
      Applies to token enums only; LegendCalc carries platform camelCase values.
    """
    for enum_cls in enums:
        for m in enum_cls:
            if not is_lower_snake(m.value):
                raise AssertionError(
                    f"{enum_cls.__name__}.{m.name} has non-lower_snake value: {m.value!r}"
                )
