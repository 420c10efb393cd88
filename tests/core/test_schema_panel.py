from dashkit.core.schema import AlertDescriptor, LegendOptions, PanelDescriptor


def test_panel_descriptor_platform_defaults() -> None:
    p = PanelDescriptor(title="raw")
    assert p.type == "timeseries"
    assert p.is_new is True
    assert p.datasource is None
    assert p.height is None
    assert p.description is None
    assert p.repeat is None
    assert p.alert is None
    assert p.transparent is False


def test_panel_descriptor_dumps_platform_keys() -> None:
    d = PanelDescriptor(title="raw").model_dump(by_alias=True)
    assert d["isNew"] is True
    assert d["options"]["tooltip"]["mode"] == "single"
    assert d["options"]["legend"] == {"displayMode": "list", "placement": "bottom", "calcs": []}
    assert d["fieldConfig"]["defaults"]["custom"]["lineWidth"] == 1


def test_panel_descriptor_accepts_aliases_and_field_names() -> None:
    by_alias = PanelDescriptor.model_validate(
        {"title": "t", "isNew": False, "fieldConfig": {"defaults": {"custom": {"lineWidth": 3}}}}
    )
    by_name = PanelDescriptor(title="t", is_new=False)
    assert by_alias.is_new is False
    assert by_alias.field_config.defaults.custom.line_width == 3
    assert by_name.is_new is False


def test_legend_calcs_default_not_shared() -> None:
    a = LegendOptions()
    b = LegendOptions()
    a.calcs.append("min")
    assert b.calcs == []


def test_alert_descriptor_wire_keys() -> None:
    d = AlertDescriptor(name="high-cpu").model_dump(by_alias=True)
    assert d["name"] == "high-cpu"
    assert d["for"] == "5m"
    assert d["frequency"] == "1m"
    assert d["noDataState"] == "no_data"
    assert d["executionErrorState"] == "alerting"
    assert d["notifications"] == []
    assert d["alertRuleTags"] == {}
    assert d["handler"] == 1
