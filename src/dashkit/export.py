"""
Export panel descriptors to platform JSON.

Turns a configured TimeSeries (or a bare PanelDescriptor) into the camelCase mapping
the dashboard document embeds, and fingerprints panels via the canonical JSON
policy in dashkit.core.hashing.

Notes
- Export never mutates the descriptor.
- Fingerprints ignore DashkitSettings: they are computed over the full
  by-alias dump with unset fields dropped, so layout settings do not change them.
"""

from __future__ import annotations

import json
import logging

from dashkit.config import DashkitSettings
from dashkit.core.hashing import hash_mapping
from dashkit.core.schema import PanelDescriptor
from dashkit.core.typing import JsonDict
from dashkit.timeseries import TimeSeries

__all__ = [
    "panel_to_dict",
    "panel_to_json",
    "panel_fingerprint",
]

logger = logging.getLogger(__name__)


def _descriptor(panel: TimeSeries | PanelDescriptor) -> PanelDescriptor:
    if isinstance(panel, TimeSeries):
        return panel.builder
    return panel


def panel_to_dict(
    panel: TimeSeries | PanelDescriptor, settings: DashkitSettings | None = None
) -> JsonDict:
    """
    Dump a panel to a JSON-ready mapping with platform keys.

    Args:
        panel: Configured panel or its descriptor.
        settings: Export settings; defaults to DashkitSettings().

    Returns:
        JsonDict: e.g. {"title": ..., "type": "timeseries", "options": {...}, "fieldConfig": {...}}.

    Examples:
        >>> from dashkit import timeseries
        >>> d = panel_to_dict(timeseries.new("CPU"))
        >>> d["fieldConfig"]["defaults"]["custom"]["lineWidth"]
        1
        >>> "datasource" in d
        False
    """
    s = settings or DashkitSettings()
    return _descriptor(panel).model_dump(mode="json", by_alias=True, exclude_none=s.exclude_none)


def panel_to_json(
    panel: TimeSeries | PanelDescriptor, settings: DashkitSettings | None = None
) -> str:
    """Serialize a panel to a JSON string honoring ``json_indent`` and ``sort_keys``."""
    s = settings or DashkitSettings()
    data = panel_to_dict(panel, s)
    logger.debug("exporting panel %r (%d top-level keys)", data.get("title"), len(data))
    return json.dumps(data, indent=s.json_indent, sort_keys=s.sort_keys, ensure_ascii=False)


def panel_fingerprint(panel: TimeSeries | PanelDescriptor) -> str:
    """Stable SHA-256 fingerprint of a panel's configuration."""
    data = _descriptor(panel).model_dump(mode="json", by_alias=True, exclude_none=True)
    return hash_mapping(data)
