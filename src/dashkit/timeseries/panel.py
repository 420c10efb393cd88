"""
Time series panel configurator.

``new(title, *options)`` allocates a PanelDescriptor, applies the built-in default
options and then the caller's options, in order. Every option is a plain callable
taking the TimeSeries being configured; options never raise and never read the
descriptor except to overwrite it.

Policy
- Last write wins: two options touching the same field leave the later value.
- legend() rebuilds the whole legend on every call; tokens are only cumulative
  within a single call.
- Out-of-range span or line width values are stored unchanged (a warning is logged).
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from dashkit.alert import AlertOption
from dashkit.alert import new as new_alert
from dashkit.core.constants import (
    DEFAULT_LINE_WIDTH,
    DEFAULT_SPAN,
    MAX_LINE_WIDTH,
    MAX_SPAN,
    MIN_LINE_WIDTH,
)
from dashkit.core.grammar import (
    LegendOption,
    TooltipMode,
    calc_for,
    display_mode_for,
    is_calc_option,
    placement_for,
)
from dashkit.core.schema import LegendOptions, PanelDescriptor

__all__ = [
    "TimeSeries",
    "Option",
    "new",
    "defaults",
    "build_legend",
    "data_source",
    "tooltip",
    "line_width",
    "legend",
    "span",
    "height",
    "description",
    "transparent",
    "alert",
    "repeat",
]

logger = logging.getLogger(__name__)


class TimeSeries:
    """
    A time series panel under construction.

    Attributes:
        builder (PanelDescriptor): The descriptor options mutate; handed to the
            serializer once configuration is done.
    """

    def __init__(self, builder: PanelDescriptor) -> None:
        self.builder = builder

    def __repr__(self) -> str:
        return f"TimeSeries(title={self.builder.title!r})"


Option = Callable[[TimeSeries], None]


def new(title: str, *options: Option) -> TimeSeries:
    """
    Create a time series panel.

    Args:
        title: Panel title.
        *options: Options applied after the built-in defaults, in order.

    Returns:
        TimeSeries: The configured panel.

    Examples:
        >>> from dashkit import timeseries
        >>> from dashkit.core.grammar import LegendOption
        >>> panel = timeseries.new(
        ...     "CPU",
        ...     timeseries.span(4),
        ...     timeseries.legend(LegendOption.AS_TABLE, LegendOption.MAX),
        ... )
        >>> panel.builder.options.legend.calcs
        ['max']
    """
    panel = TimeSeries(PanelDescriptor(title=title))
    panel.builder.is_new = False

    for opt in [*defaults(), *options]:
        opt(panel)

    logger.debug("configured timeseries panel %r with %d option(s)", title, len(options))
    return panel


def defaults() -> list[Option]:
    """Options applied to every panel before the caller's options."""
    return [
        span(DEFAULT_SPAN),
        line_width(DEFAULT_LINE_WIDTH),
        tooltip(TooltipMode.SINGLE_SERIES),
        legend(LegendOption.BOTTOM, LegendOption.AS_LIST),
    ]


def build_legend(*opts: LegendOption) -> LegendOptions:
    """
    Map legend tokens onto a fresh legend structure.

    Starts from {display_mode: "list", placement: "bottom", calcs: []}. Display and
    placement tokens overwrite (last one wins); calc tokens append in order,
    duplicates included.

    Examples:
        >>> from dashkit.core.grammar import LegendOption as L
        >>> build_legend(L.HIDE, L.AS_TABLE, L.MIN, L.MIN).model_dump(by_alias=True)
        {'displayMode': 'table', 'placement': 'bottom', 'calcs': ['min', 'min']}
    """
    result = LegendOptions()

    for opt in opts:
        mode = display_mode_for(opt)
        if mode is not None:
            result.display_mode = mode.value
            continue
        placement = placement_for(opt)
        if placement is not None:
            result.placement = placement.value
            continue
        if is_calc_option(opt):
            result.calcs.append(calc_for(opt).value)

    return result


def data_source(source: str) -> Option:
    """Set the data source used by the panel."""

    def _apply(panel: TimeSeries) -> None:
        panel.builder.datasource = source

    return _apply


def tooltip(mode: TooltipMode) -> Option:
    """Configure which series the tooltip shows."""

    def _apply(panel: TimeSeries) -> None:
        panel.builder.options.tooltip.mode = mode.value

    return _apply


def line_width(value: int) -> Option:
    """Set the series line width (default 1, max 10, 0 hides the line)."""

    def _apply(panel: TimeSeries) -> None:
        if not MIN_LINE_WIDTH <= value <= MAX_LINE_WIDTH:
            logger.warning(
                "line width %r on panel %r is outside [%d, %d]",
                value,
                panel.builder.title,
                MIN_LINE_WIDTH,
                MAX_LINE_WIDTH,
            )
        panel.builder.field_config.defaults.custom.line_width = value

    return _apply


def legend(*opts: LegendOption) -> Option:
    """Replace the legend with one built from ``opts`` (see build_legend)."""

    def _apply(panel: TimeSeries) -> None:
        panel.builder.options.legend = build_legend(*opts)

    return _apply


def span(value: float) -> Option:
    """Set the panel width in grid units, nominally in (0, 12]. Example: 6."""

    def _apply(panel: TimeSeries) -> None:
        if not 0 < value <= MAX_SPAN:
            logger.warning(
                "span %r on panel %r is outside (0, %g]", value, panel.builder.title, MAX_SPAN
            )
        panel.builder.span = value

    return _apply


def height(value: str) -> Option:
    """Set the panel height. Example: "400px"."""

    def _apply(panel: TimeSeries) -> None:
        panel.builder.height = value

    return _apply


def description(content: str) -> Option:
    """Annotate the panel with a human-readable description."""

    def _apply(panel: TimeSeries) -> None:
        panel.builder.description = content

    return _apply


def transparent() -> Option:
    """Make the panel background transparent."""

    def _apply(panel: TimeSeries) -> None:
        panel.builder.transparent = True

    return _apply


def alert(name: str, *opts: AlertOption) -> Option:
    """Attach an alert built by dashkit.alert.new(name, *opts)."""

    def _apply(panel: TimeSeries) -> None:
        panel.builder.alert = new_alert(name, *opts).builder

    return _apply


def repeat(variable: str) -> Option:
    """Repeat the panel for each value of a template variable."""

    def _apply(panel: TimeSeries) -> None:
        panel.builder.repeat = variable

    return _apply
