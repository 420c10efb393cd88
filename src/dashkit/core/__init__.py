"""
Core package aggregator for dashkit contracts (grammar, schemas, hashing, constants, errors).

## Contracts (single source of truth)
- Grammar - friendly tokens, platform wire values, and the mapping tables between them.
- Schemas - pydantic models for the panel and alert descriptors.
- Hashing - canonical JSON and fingerprints.
- Constants/Errors - panel defaults, nominal ranges, typed parse errors.

## Notes
- Zero‑IO policy: stdlib + pydantic only; no file/network IO.
- Token enum `.value`s are lower_snake; wire values follow the platform (camelCase calcs).

## Downstream usage
- dashkit.timeseries - mutates `PanelDescriptor` using grammar mapping tables.
- dashkit.alert - builds `AlertDescriptor`.
- dashkit.loader / dashkit.cli - parse tokens with the `*_from_value` helpers.

## Examples
```python
from dashkit.core.grammar import LegendOption, calc_for
calc_for(LegendOption.LAST_NON_NULL).value  # 'lastNotNull'

from dashkit.core.schema import PanelDescriptor
PanelDescriptor(title="CPU").model_dump(by_alias=True)["fieldConfig"]
# {'defaults': {'custom': {'lineWidth': 1}}, 'overrides': []}
```
"""
