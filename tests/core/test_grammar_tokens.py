import pytest

from dashkit.core.errors import GrammarError
from dashkit.core.grammar import (
    ExecutionErrorState,
    LegendCalc,
    LegendOption,
    NoDataState,
    TooltipMode,
    calc_for,
    display_mode_for,
    ensure_all_enum_values_lower_snake,
    execution_error_state_from_value,
    is_calc_option,
    legend_option_from_value,
    no_data_state_from_value,
    placement_for,
    tooltip_mode_from_value,
)


def test_token_enum_values_are_lower_snake() -> None:
    ensure_all_enum_values_lower_snake(
        [TooltipMode, LegendOption, NoDataState, ExecutionErrorState]
    )


def test_calc_values_are_not_all_lower_snake() -> None:
    # Platform wire values keep camelCase; the helper must flag them.
    with pytest.raises(AssertionError):
        ensure_all_enum_values_lower_snake([LegendCalc])


def test_tooltip_wire_values() -> None:
    assert TooltipMode.SINGLE_SERIES.value == "single"
    assert TooltipMode.ALL_SERIES.value == "multi"
    assert TooltipMode.NO_SERIES.value == "none"


@pytest.mark.parametrize(
    "token,expected",
    [
        ("single", TooltipMode.SINGLE_SERIES),
        ("MULTI", TooltipMode.ALL_SERIES),
        ("no_series", TooltipMode.NO_SERIES),
        (TooltipMode.ALL_SERIES, TooltipMode.ALL_SERIES),
    ],
)
def test_tooltip_mode_from_value(token, expected) -> None:
    assert tooltip_mode_from_value(token) is expected


def test_legend_option_from_value_case_insensitive() -> None:
    assert legend_option_from_value("to_the_right") is LegendOption.TO_THE_RIGHT
    assert legend_option_from_value(" AS_TABLE ") is LegendOption.AS_TABLE


@pytest.mark.parametrize(
    "parser,token",
    [
        (tooltip_mode_from_value, "everyone"),
        (legend_option_from_value, "sideways"),
        (legend_option_from_value, None),
        (no_data_state_from_value, "panic"),
        (execution_error_state_from_value, "ok"),
    ],
)
def test_unknown_tokens_raise_grammar_error(parser, token) -> None:
    with pytest.raises(GrammarError):
        parser(token)


def test_grammar_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        legend_option_from_value("sideways")


def test_alert_state_parsing() -> None:
    assert no_data_state_from_value("keep_state") is NoDataState.KEEP_STATE
    assert execution_error_state_from_value("Alerting") is ExecutionErrorState.ALERTING


def test_every_legend_option_has_exactly_one_effect() -> None:
    for opt in LegendOption:
        effects = [display_mode_for(opt), placement_for(opt), calc_for(opt)]
        assert sum(e is not None for e in effects) == 1, opt


def test_calc_mapping_table() -> None:
    expected = {
        LegendOption.FIRST: "first",
        LegendOption.FIRST_NON_NULL: "firstNotNull",
        LegendOption.LAST: "last",
        LegendOption.LAST_NON_NULL: "lastNotNull",
        LegendOption.MIN: "min",
        LegendOption.MAX: "max",
        LegendOption.AVG: "mean",
        LegendOption.COUNT: "count",
        LegendOption.TOTAL: "sum",
        LegendOption.RANGE: "range",
    }
    for opt, wire in expected.items():
        assert is_calc_option(opt)
        assert calc_for(opt).value == wire
    assert not is_calc_option(LegendOption.HIDE)
    assert not is_calc_option(LegendOption.BOTTOM)
