"""
dashkit - Declarative time series panel configuration for dashboard documents.

## Responsibilities
- Configure a time series panel by applying ordered option functions to a descriptor.
- Translate friendly tokens (tooltip modes, legend options) into platform values.
- Export panels as platform JSON; build panels from YAML/JSON definitions.

## Packages
- core - grammar, pydantic schemas, hashing, constants, errors (zero-IO).
- alert - alert descriptors attached to panels.
- timeseries - the panel configurator (`new` plus options).
- config - DashkitSettings (env > TOML > defaults).
- export - panel to dict/JSON, fingerprints.
- loader - panel definitions (YAML/JSON) to panels.
- cli - `dashkit render` / `dashkit fingerprint`.

## Examples
```python
from dashkit import timeseries
from dashkit.core.grammar import LegendOption
from dashkit.export import panel_to_json

panel = timeseries.new(
    "Memory",
    timeseries.span(12),
    timeseries.legend(LegendOption.AS_TABLE, LegendOption.LAST_NON_NULL),
)
print(panel_to_json(panel))
```
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
