"""
Alert builder: functional options over an AlertDescriptor.

An alert is built the same way as a panel: defaults first, then caller options in
order, each option overwriting (or, for notify/tags, extending) one field.

Notes:
    - Options never raise; state enums are stored as their raw string values.
    - notify() appends, so repeated calls notify several channels in call order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from dashkit.core.constants import DEFAULT_ALERT_FOR, DEFAULT_ALERT_FREQUENCY
from dashkit.core.grammar import ExecutionErrorState, NoDataState
from dashkit.core.schema import AlertDescriptor, AlertNotification

__all__ = [
    "Alert",
    "AlertOption",
    "new",
    "evaluate_every",
    "for_duration",
    "on_no_data",
    "on_execution_error",
    "notify",
    "message",
    "tags",
]

logger = logging.getLogger(__name__)


class Alert:
    """Holds the alert descriptor being configured."""

    def __init__(self, builder: AlertDescriptor) -> None:
        self.builder = builder

    def __repr__(self) -> str:
        return f"Alert(name={self.builder.name!r})"


AlertOption = Callable[[Alert], None]


def _defaults() -> list[AlertOption]:
    return [
        evaluate_every(DEFAULT_ALERT_FREQUENCY),
        for_duration(DEFAULT_ALERT_FOR),
        on_no_data(NoDataState.NO_DATA),
        on_execution_error(ExecutionErrorState.ALERTING),
    ]


def new(name: str, *options: AlertOption) -> Alert:
    """
    Create an alert named ``name`` and apply defaults followed by ``options``.

    Args:
        name: Alert name.
        *options: Alert options applied in order; later ones win.

    Returns:
        Alert: Configured alert; the descriptor is on ``.builder``.

    Examples:
        >>> from dashkit import alert
        >>> a = alert.new("high-cpu", alert.for_duration("10m"))
        >>> (a.builder.name, a.builder.for_)
        ('high-cpu', '10m')
    """
    a = Alert(AlertDescriptor(name=name))
    for opt in [*_defaults(), *options]:
        opt(a)
    logger.debug("built alert %r with %d option(s)", name, len(options))
    return a


def evaluate_every(interval: str) -> AlertOption:
    """Set how often the alert is evaluated (e.g., "1m")."""

    def _apply(a: Alert) -> None:
        a.builder.frequency = interval

    return _apply


def for_duration(duration: str) -> AlertOption:
    """Set how long the condition must hold before the alert fires (e.g., "5m")."""

    def _apply(a: Alert) -> None:
        a.builder.for_ = duration

    return _apply


def on_no_data(state: NoDataState) -> AlertOption:
    """Set the state used when the query returns no data."""

    def _apply(a: Alert) -> None:
        a.builder.no_data_state = state.value

    return _apply


def on_execution_error(state: ExecutionErrorState) -> AlertOption:
    """Set the state used when evaluation fails."""

    def _apply(a: Alert) -> None:
        a.builder.execution_error_state = state.value

    return _apply


def notify(channel_uid: str) -> AlertOption:
    """Add a notification channel (by uid)."""

    def _apply(a: Alert) -> None:
        a.builder.notifications.append(AlertNotification(uid=channel_uid))

    return _apply


def message(content: str) -> AlertOption:
    """Set the notification message sent when the alert fires."""

    def _apply(a: Alert) -> None:
        a.builder.message = content

    return _apply


def tags(values: Mapping[str, str]) -> AlertOption:
    """Merge ``values`` into the alert rule tags; existing keys are overwritten."""
    snapshot = {str(k): str(v) for k, v in values.items()}

    def _apply(a: Alert) -> None:
        a.builder.alert_rule_tags.update(snapshot)

    return _apply
