"""
Panel defaults and nominal ranges.

Defines the values applied by the built-in default option sequence and the
ranges the downstream platform expects. This module is zero-IO and uses only
the Python standard library.

Notes:
    - Ranges are advisory: configuration functions store out-of-range values
      unchanged and only log a warning.
    - Changing a default here changes every panel built by dashkit.timeseries.new.
"""

from __future__ import annotations

__all__ = [
    "PANEL_TYPE",
    "DEFAULT_SPAN",
    "DEFAULT_LINE_WIDTH",
    "MAX_SPAN",
    "MIN_LINE_WIDTH",
    "MAX_LINE_WIDTH",
    "DEFAULT_ALERT_FREQUENCY",
    "DEFAULT_ALERT_FOR",
]

# Platform panel type identifier for time series charts.
PANEL_TYPE: str = "timeseries"

# Grid width in columns out of a 12-column row.
DEFAULT_SPAN: float = 6.0
MAX_SPAN: float = 12.0

# Series line width in pixels; 0 hides the line.
DEFAULT_LINE_WIDTH: int = 1
MIN_LINE_WIDTH: int = 0
MAX_LINE_WIDTH: int = 10

# Alert evaluation defaults (platform duration strings).
DEFAULT_ALERT_FREQUENCY: str = "1m"
DEFAULT_ALERT_FOR: str = "5m"
