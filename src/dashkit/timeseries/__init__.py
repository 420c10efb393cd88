"""
dashkit.timeseries - Time series panel configurator.

## Responsibilities
- Allocate a panel descriptor and apply default plus caller options in order.
- Translate friendly tokens (TooltipMode, LegendOption) into platform values.
- Delegate alert construction to dashkit.alert.

## Public API
- new(title, *options) - build a TimeSeries (descriptor on ``.builder``).
- data_source, tooltip, line_width, legend, span, height, description,
  transparent, alert, repeat - options.
- build_legend(*tokens) - the legend mapping on its own.

## Import DAG discipline
- Depends on: dashkit.core, dashkit.alert (and stdlib).
- MUST NOT import dashkit.export, dashkit.loader, or dashkit.cli.

## Examples
```python
from dashkit import timeseries
from dashkit.core.grammar import LegendOption, TooltipMode

panel = timeseries.new(
    "Requests",
    timeseries.data_source("prometheus"),
    timeseries.tooltip(TooltipMode.ALL_SERIES),
    timeseries.legend(LegendOption.AS_TABLE, LegendOption.TO_THE_RIGHT, LegendOption.LAST_NON_NULL),
    timeseries.alert("too-many-requests"),
)
panel.builder.options.legend.placement  # 'right'
```
"""

from __future__ import annotations

from .panel import (
    Option,
    TimeSeries,
    alert,
    build_legend,
    data_source,
    defaults,
    description,
    height,
    legend,
    line_width,
    new,
    repeat,
    span,
    tooltip,
    transparent,
)

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
