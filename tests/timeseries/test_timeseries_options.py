from __future__ import annotations

import logging

import pytest

from dashkit import alert, timeseries
from dashkit.core.grammar import LegendOption, NoDataState, TooltipMode
from dashkit.core.schema import AlertDescriptor


@pytest.mark.parametrize("title", ["CPU", "", "Ünïcode title"])
def test_new_applies_defaults(title: str) -> None:
    panel = timeseries.new(title)
    b = panel.builder

    assert b.title == title
    assert b.span == 6
    assert b.field_config.defaults.custom.line_width == 1
    assert b.options.tooltip.mode == "single"
    assert b.options.legend.placement == "bottom"
    assert b.options.legend.display_mode == "list"
    assert b.options.legend.calcs == []
    assert b.is_new is False
    assert b.transparent is False
    assert b.datasource is None
    assert b.alert is None


@pytest.mark.parametrize("x", [0.5, 3, 6.0, 12.0])
def test_span_overrides_default(x: float) -> None:
    assert timeseries.new("t", timeseries.span(x)).builder.span == x


def test_later_options_override_earlier_ones() -> None:
    panel = timeseries.new("t", timeseries.line_width(2), timeseries.line_width(5))
    assert panel.builder.field_config.defaults.custom.line_width == 5


def test_tooltip_stores_raw_value() -> None:
    panel = timeseries.new("t", timeseries.tooltip(TooltipMode.ALL_SERIES))
    assert panel.builder.options.tooltip.mode == "multi"
    panel = timeseries.new("t", timeseries.tooltip(TooltipMode.NO_SERIES))
    assert panel.builder.options.tooltip.mode == "none"


def test_optional_fields_are_set() -> None:
    panel = timeseries.new(
        "t",
        timeseries.data_source("prometheus"),
        timeseries.height("400px"),
        timeseries.description("Requests per second"),
        timeseries.repeat("instance"),
    )
    b = panel.builder
    assert b.datasource == "prometheus"
    assert b.height == "400px"
    assert b.description == "Requests per second"
    assert b.repeat == "instance"


def test_transparent() -> None:
    assert timeseries.new("t", timeseries.transparent()).builder.transparent is True
    assert timeseries.new("t").builder.transparent is False


def test_out_of_range_values_pass_through(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="dashkit.timeseries.panel"):
        panel = timeseries.new("t", timeseries.line_width(-3), timeseries.span(20))
    assert panel.builder.field_config.defaults.custom.line_width == -3
    assert panel.builder.span == 20
    assert any("line width" in r.getMessage() for r in caplog.records)
    assert any("span" in r.getMessage() for r in caplog.records)


def test_in_range_values_do_not_warn(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="dashkit.timeseries.panel"):
        timeseries.new("t", timeseries.line_width(10), timeseries.line_width(0))
    assert caplog.records == []


def test_alert_uses_collaborator() -> None:
    panel = timeseries.new(
        "t",
        timeseries.alert(
            "high-cpu",
            alert.for_duration("10m"),
            alert.on_no_data(NoDataState.KEEP_STATE),
        ),
    )
    a = panel.builder.alert
    assert isinstance(a, AlertDescriptor)
    assert a.name == "high-cpu"
    assert a.for_ == "10m"
    assert a.no_data_state == "keep_state"


def test_alert_replaced_by_later_call() -> None:
    panel = timeseries.new("t", timeseries.alert("first"), timeseries.alert("second"))
    assert panel.builder.alert.name == "second"


def test_options_are_reusable_across_panels() -> None:
    shared = [timeseries.legend(LegendOption.MAX), timeseries.alert("a", alert.notify("pager"))]
    p1 = timeseries.new("one", *shared)
    p2 = timeseries.new("two", *shared)
    assert p1.builder.options.legend is not p2.builder.options.legend
    assert p1.builder.alert is not p2.builder.alert
    assert [n.uid for n in p2.builder.alert.notifications] == ["pager"]


def test_defaults_sequence() -> None:
    assert len(timeseries.defaults()) == 4
