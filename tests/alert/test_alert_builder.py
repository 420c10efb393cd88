from __future__ import annotations

from dashkit import alert
from dashkit.core.grammar import ExecutionErrorState, NoDataState


def test_alert_defaults() -> None:
    b = alert.new("high-cpu").builder
    assert b.name == "high-cpu"
    assert b.frequency == "1m"
    assert b.for_ == "5m"
    assert b.no_data_state == "no_data"
    assert b.execution_error_state == "alerting"
    assert b.message is None
    assert b.notifications == []


def test_alert_options_override_defaults() -> None:
    b = alert.new(
        "disk",
        alert.evaluate_every("30s"),
        alert.for_duration("15m"),
        alert.on_no_data(NoDataState.OK),
        alert.on_execution_error(ExecutionErrorState.KEEP_STATE),
        alert.message("Disk almost full"),
    ).builder
    assert b.frequency == "30s"
    assert b.for_ == "15m"
    assert b.no_data_state == "ok"
    assert b.execution_error_state == "keep_state"
    assert b.message == "Disk almost full"


def test_notify_appends_in_order_and_tags_merge() -> None:
    b = alert.new(
        "disk",
        alert.notify("pager"),
        alert.notify("slack"),
        alert.tags({"team": "infra", "tier": "1"}),
        alert.tags({"tier": "2"}),
    ).builder
    assert [n.uid for n in b.notifications] == ["pager", "slack"]
    assert b.alert_rule_tags == {"team": "infra", "tier": "2"}


def test_alert_dump_uses_wire_keys() -> None:
    d = alert.new("x", alert.notify("pager")).builder.model_dump(by_alias=True, exclude_none=True)
    assert d["notifications"] == [{"uid": "pager"}]
    assert "message" not in d
    assert d["for"] == "5m"
