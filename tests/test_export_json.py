from __future__ import annotations

import json

from dashkit import alert, timeseries
from dashkit.config import DashkitSettings
from dashkit.core.grammar import LegendOption, TooltipMode
from dashkit.export import panel_fingerprint, panel_to_dict, panel_to_json


def _panel() -> timeseries.TimeSeries:
    return timeseries.new(
        "Requests",
        timeseries.data_source("prometheus"),
        timeseries.tooltip(TooltipMode.ALL_SERIES),
        timeseries.line_width(2),
        timeseries.legend(LegendOption.AS_TABLE, LegendOption.TO_THE_RIGHT, LegendOption.AVG),
        timeseries.alert("too-many", alert.notify("pager")),
    )


def test_panel_to_dict_wire_shape() -> None:
    d = panel_to_dict(_panel())

    assert d["type"] == "timeseries"
    assert d["isNew"] is False
    assert d["datasource"] == "prometheus"
    assert d["span"] == 6.0
    assert d["options"]["tooltip"]["mode"] == "multi"
    assert d["options"]["legend"] == {
        "displayMode": "table",
        "placement": "right",
        "calcs": ["mean"],
    }
    assert d["fieldConfig"]["defaults"]["custom"]["lineWidth"] == 2
    assert d["alert"]["name"] == "too-many"
    assert d["alert"]["notifications"] == [{"uid": "pager"}]


def test_exclude_none_setting() -> None:
    bare = timeseries.new("t")
    assert "height" not in panel_to_dict(bare)
    full = panel_to_dict(bare, DashkitSettings(exclude_none=False))
    assert full["height"] is None
    assert full["alert"] is None


def test_panel_to_dict_accepts_descriptor() -> None:
    panel = _panel()
    assert panel_to_dict(panel.builder) == panel_to_dict(panel)


def test_panel_to_json_layout() -> None:
    compact = panel_to_json(_panel(), DashkitSettings(json_indent=None, sort_keys=True))
    assert "\n" not in compact
    assert json.loads(compact) == panel_to_dict(_panel())
    assert compact.index('"alert"') < compact.index('"title"')

    pretty = panel_to_json(_panel())
    assert pretty.startswith('{\n  "title": "Requests"')


def test_fingerprint_stable_and_sensitive() -> None:
    assert panel_fingerprint(_panel()) == panel_fingerprint(_panel())
    other = timeseries.new("Requests", timeseries.span(4))
    assert panel_fingerprint(other) != panel_fingerprint(_panel())
    assert len(panel_fingerprint(other)) == 64
