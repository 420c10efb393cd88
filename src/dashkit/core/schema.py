"""
Pydantic v2 models for the time series panel descriptor and the alert descriptor.

Field names are lower_snake in Python and serialize to the platform's camelCase keys
through aliases (``model_dump(by_alias=True)``). Models are mutable: configuration
functions in dashkit.timeseries and dashkit.alert assign fields directly.

Responsibilities
- Define the panel descriptor and its nested options (legend, tooltip, field config).
- Define the alert descriptor produced by dashkit.alert.
- Carry platform-level defaults for a freshly allocated descriptor.

Style
- Zero-IO (stdlib + pydantic only).
- Values are stored as their raw wire strings (e.g., tooltip mode "single"), not enums,
  so that serialization needs no conversion step.
- No range validation: span and line width accept any number.

Wire shape
- tooltip mode            -> options.tooltip.mode
- line width              -> fieldConfig.defaults.custom.lineWidth
- legend                  -> options.legend.{displayMode, placement, calcs}
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .constants import DEFAULT_ALERT_FOR, DEFAULT_ALERT_FREQUENCY, MAX_SPAN, PANEL_TYPE
from .grammar import (
    ExecutionErrorState,
    LegendDisplayMode,
    LegendPlacement,
    NoDataState,
    TooltipMode,
)
from .typing import JsonDict

__all__ = [
    # Panel options
    "LegendOptions",
    "TooltipOptions",
    "TimeseriesOptions",
    "CustomFieldConfig",
    "FieldDefaults",
    "FieldConfig",
    # Alert
    "AlertNotification",
    "AlertDescriptor",
    # Panel
    "PanelDescriptor",
]

# ============================================================================
# Panel options
# ============================================================================


class LegendOptions(BaseModel):
    """
    Legend configuration of a time series panel.

    Attributes:
        display_mode (str): One of {"hidden","list","table"}; serialized as ``displayMode``.
        placement (str): One of {"bottom","right"}.
        calcs (list[str]): Ordered calc names; duplicates are kept.

    Examples:
        >>> from dashkit.core.schema import LegendOptions
        >>> LegendOptions().model_dump(by_alias=True)
        {'displayMode': 'list', 'placement': 'bottom', 'calcs': []}
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    display_mode: str = Field(default=LegendDisplayMode.LIST.value, alias="displayMode")
    placement: str = LegendPlacement.BOTTOM.value
    calcs: list[str] = Field(default_factory=list)


class TooltipOptions(BaseModel):
    """Tooltip configuration; ``mode`` is one of {"single","multi","none"}."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    mode: str = TooltipMode.SINGLE_SERIES.value


class TimeseriesOptions(BaseModel):
    """Panel ``options`` block: legend and tooltip."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    legend: LegendOptions = Field(default_factory=LegendOptions)
    tooltip: TooltipOptions = Field(default_factory=TooltipOptions)


class CustomFieldConfig(BaseModel):
    """Visualization-specific field defaults (``fieldConfig.defaults.custom``)."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    line_width: int = Field(default=1, alias="lineWidth")


class FieldDefaults(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    custom: CustomFieldConfig = Field(default_factory=CustomFieldConfig)


class FieldConfig(BaseModel):
    """Panel ``fieldConfig`` block. Overrides are passed through untouched."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    defaults: FieldDefaults = Field(default_factory=FieldDefaults)
    overrides: list[JsonDict] = Field(default_factory=list)


# ============================================================================
# Alert
# ============================================================================


class AlertNotification(BaseModel):
    """Reference to a notification channel by uid."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    uid: str


class AlertDescriptor(BaseModel):
    """
    Alert attached to a panel.

    Attributes:
        name (str): Alert name shown in the alert list.
        message (str | None): Optional notification message.
        frequency (str): Evaluation interval (e.g., "1m").
        for_ (str): Pending period before firing; serialized as ``for``.
        no_data_state (str): NoDataState value; serialized as ``noDataState``.
        execution_error_state (str): ExecutionErrorState value; serialized as
            ``executionErrorState``.
        notifications (list[AlertNotification]): Channels notified, in order.
        alert_rule_tags (dict[str, str]): Free-form tags; serialized as ``alertRuleTags``.
        handler (int): Platform handler id (always 1).

    Examples:
        >>> from dashkit.core.schema import AlertDescriptor
        >>> AlertDescriptor(name="high-cpu").model_dump(by_alias=True)["for"]
        '5m'
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str
    message: str | None = None
    frequency: str = DEFAULT_ALERT_FREQUENCY
    for_: str = Field(default=DEFAULT_ALERT_FOR, alias="for")
    no_data_state: str = Field(default=NoDataState.NO_DATA.value, alias="noDataState")
    execution_error_state: str = Field(
        default=ExecutionErrorState.ALERTING.value, alias="executionErrorState"
    )
    notifications: list[AlertNotification] = Field(default_factory=list)
    alert_rule_tags: dict[str, str] = Field(default_factory=dict, alias="alertRuleTags")
    handler: int = 1


# ============================================================================
# Panel
# ============================================================================


class PanelDescriptor(BaseModel):
    """
    In-memory configuration record for one time series panel.

    Attributes:
        title (str): Panel title (unconstrained).
        type (str): Platform panel type, always "timeseries".
        is_new (bool): Platform "new panel" marker; serialized as ``isNew``.
        editable (bool): Whether the panel is editable in the platform UI.
        datasource (str | None): Data source name; None means the platform default.
        span (float): Grid width in columns, nominally (0, 12].
        height (str | None): Height such as "400px"; None leaves the platform default.
        description (str | None): Human-readable description.
        transparent (bool): Transparent background.
        repeat (str | None): Template variable the panel repeats over.
        alert (AlertDescriptor | None): Attached alert.
        options (TimeseriesOptions): Legend and tooltip.
        field_config (FieldConfig): Field defaults; serialized as ``fieldConfig``.

    Notes:
        Defaults here are the platform defaults of a freshly allocated panel.
        dashkit.timeseries.new overrides several of them with its own default
        option sequence.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    title: str
    type: str = PANEL_TYPE
    is_new: bool = Field(default=True, alias="isNew")
    editable: bool = True
    datasource: str | None = None
    span: float = MAX_SPAN
    height: str | None = None
    description: str | None = None
    transparent: bool = False
    repeat: str | None = None
    alert: AlertDescriptor | None = None
    options: TimeseriesOptions = Field(default_factory=TimeseriesOptions)
    field_config: FieldConfig = Field(default_factory=FieldConfig, alias="fieldConfig")
