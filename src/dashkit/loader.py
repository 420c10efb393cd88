"""
Build panels from declarative panel definitions (YAML or JSON).

A panel definition is a mapping whose keys name configuration functions from
dashkit.timeseries. Keys are turned into options in the mapping's order, so a
definition behaves exactly like the equivalent ``timeseries.new(...)`` call.

Example definition::

    title: CPU usage
    datasource: prometheus
    span: 4
    tooltip: multi
    legend: [as_table, to_the_right, max, avg]
    transparent: true
    alert:
      name: high-cpu
      for: 10m
      on_no_data: keep_state
      notify: [pager]

Errors
- SchemaError: unknown keys, wrong value shapes, missing/invalid title, unreadable YAML.
- GrammarError: unknown tooltip/legend/alert-state tokens.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import yaml

from dashkit import alert as alerts
from dashkit import timeseries
from dashkit.core.errors import SchemaError
from dashkit.core.grammar import (
    execution_error_state_from_value,
    legend_option_from_value,
    no_data_state_from_value,
    tooltip_mode_from_value,
)

__all__ = [
    "options_from_mapping",
    "alert_options_from_mapping",
    "timeseries_from_mapping",
    "load_panel",
]

logger = logging.getLogger(__name__)


def _expect_str(key: str, v: Any) -> str:
    if not isinstance(v, str):
        raise SchemaError(f"{key!r} must be a string (got {type(v).__name__})")
    return v


def _expect_number(key: str, v: Any) -> float:
    # bool is an int subclass; reject it explicitly.
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise SchemaError(f"{key!r} must be a number (got {type(v).__name__})")
    return v


def _expect_str_list(key: str, v: Any) -> list[str]:
    if isinstance(v, str):
        return [v]
    if not isinstance(v, list) or not all(isinstance(x, str) for x in v):
        raise SchemaError(f"{key!r} must be a string or a list of strings")
    return list(v)


def _line_width(v: Any) -> timeseries.Option:
    if isinstance(v, bool) or not isinstance(v, int):
        raise SchemaError(f"'line_width' must be an integer (got {type(v).__name__})")
    return timeseries.line_width(v)


def _transparent(v: Any) -> timeseries.Option | None:
    if not isinstance(v, bool):
        raise SchemaError(f"'transparent' must be a boolean (got {type(v).__name__})")
    return timeseries.transparent() if v else None


def _alert(v: Any) -> timeseries.Option:
    if isinstance(v, str):
        return timeseries.alert(v)
    if not isinstance(v, Mapping):
        raise SchemaError("'alert' must be an alert name or a mapping")
    if "name" not in v:
        raise SchemaError("'alert' mapping requires a 'name'")
    name = _expect_str("alert.name", v["name"])
    return timeseries.alert(name, *alert_options_from_mapping(v))


_PANEL_KEYS: dict[str, Callable[[Any], timeseries.Option | None]] = {
    "datasource": lambda v: timeseries.data_source(_expect_str("datasource", v)),
    "tooltip": lambda v: timeseries.tooltip(tooltip_mode_from_value(v)),
    "line_width": _line_width,
    "legend": lambda v: timeseries.legend(
        *(legend_option_from_value(tok) for tok in _expect_str_list("legend", v))
    ),
    "span": lambda v: timeseries.span(float(_expect_number("span", v))),
    "height": lambda v: timeseries.height(_expect_str("height", v)),
    "description": lambda v: timeseries.description(_expect_str("description", v)),
    "transparent": _transparent,
    "repeat": lambda v: timeseries.repeat(_expect_str("repeat", v)),
    "alert": _alert,
}


def _tags(v: Any) -> alerts.AlertOption:
    if not isinstance(v, Mapping):
        raise SchemaError("'alert.tags' must be a mapping")
    return alerts.tags({str(k): str(val) for k, val in v.items()})


_ALERT_KEYS: dict[str, Callable[[Any], list[alerts.AlertOption]]] = {
    "frequency": lambda v: [alerts.evaluate_every(_expect_str("alert.frequency", v))],
    "for": lambda v: [alerts.for_duration(_expect_str("alert.for", v))],
    "on_no_data": lambda v: [alerts.on_no_data(no_data_state_from_value(v))],
    "on_execution_error": lambda v: [
        alerts.on_execution_error(execution_error_state_from_value(v))
    ],
    "notify": lambda v: [alerts.notify(uid) for uid in _expect_str_list("alert.notify", v)],
    "message": lambda v: [alerts.message(_expect_str("alert.message", v))],
    "tags": lambda v: [_tags(v)],
}


def alert_options_from_mapping(cfg: Mapping[str, Any]) -> list[alerts.AlertOption]:
    """
    Translate an alert mapping into alert options, in key order.

    The ``name`` key is skipped (it is the first argument to alert.new).

    Raises:
        SchemaError: On unknown keys or wrong shapes.
        GrammarError: On unknown alert state tokens.
    """
    out: list[alerts.AlertOption] = []
    for key, value in cfg.items():
        if key == "name":
            continue
        handler = _ALERT_KEYS.get(key)
        if handler is None:
            raise SchemaError(f"unknown alert key {key!r}; expected one of {sorted(_ALERT_KEYS)}")
        out.extend(handler(value))
    return out


def options_from_mapping(cfg: Mapping[str, Any]) -> list[timeseries.Option]:
    """
    Translate a panel definition mapping into timeseries options, in key order.

    The ``title`` key is skipped.

    Args:
        cfg: Panel definition mapping.

    Returns:
        list[timeseries.Option]: Options ready for timeseries.new.

    Raises:
        SchemaError: On unknown keys or wrong value shapes.
        GrammarError: On unknown tooltip, legend, or alert state tokens.

    Examples:
        >>> opts = options_from_mapping({"span": 3, "legend": ["hide"]})
        >>> len(opts)
        2
    """
    out: list[timeseries.Option] = []
    for key, value in cfg.items():
        if key == "title":
            continue
        handler = _PANEL_KEYS.get(key)
        if handler is None:
            raise SchemaError(f"unknown panel key {key!r}; expected one of {sorted(_PANEL_KEYS)}")
        opt = handler(value)
        if opt is not None:
            out.append(opt)
    return out


def timeseries_from_mapping(cfg: Mapping[str, Any]) -> timeseries.TimeSeries:
    """Build a TimeSeries from a panel definition mapping (requires a string ``title``)."""
    if not isinstance(cfg, Mapping):
        raise SchemaError(f"panel definition must be a mapping (got {type(cfg).__name__})")
    if "title" not in cfg:
        raise SchemaError("panel definition requires a 'title'")
    title = _expect_str("title", cfg["title"])
    return timeseries.new(title, *options_from_mapping(cfg))


def load_panel(path: str | os.PathLike[str]) -> timeseries.TimeSeries:
    """
    Load a panel definition file (YAML or JSON) and build the panel.

    Raises:
        OSError: If ``path`` cannot be opened (missing, a directory, ...).
        SchemaError: If the file is not UTF-8, not valid YAML/JSON, or not a valid definition.
        GrammarError: On unknown tokens.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SchemaError(f"could not read panel definition {p}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SchemaError(f"could not parse panel definition {p}: {exc}") from exc
    logger.info("loaded panel definition from %s", p)
    return timeseries_from_mapping(data)
