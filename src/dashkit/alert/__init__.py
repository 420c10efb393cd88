"""
dashkit.alert - Alert descriptors attached to panels.

## Responsibilities
- Build an AlertDescriptor from a name and an ordered list of alert options.
- Serve as the alert collaborator for dashkit.timeseries.alert.

## Public API
- new(name, *options) - create an Alert (descriptor on ``.builder``).
- evaluate_every, for_duration, on_no_data, on_execution_error, notify, message, tags - options.

## Import DAG discipline
- Depends only on stdlib and dashkit.core.
- MUST NOT import dashkit.timeseries.

## Examples
```python
from dashkit import alert
from dashkit.core.grammar import NoDataState

a = alert.new(
    "high-cpu",
    alert.for_duration("10m"),
    alert.on_no_data(NoDataState.KEEP_STATE),
    alert.notify("pager"),
)
a.builder.model_dump(by_alias=True)["noDataState"]  # 'keep_state'
```
"""

from __future__ import annotations

from .builder import (
    Alert,
    AlertOption,
    evaluate_every,
    for_duration,
    message,
    new,
    notify,
    on_execution_error,
    on_no_data,
    tags,
)

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
