"""
Lightweight typing aliases used across dashkit modules.

This module contains no runtime logic and is zero-IO.

Examples:
    >>> from dashkit.core.typing import JsonDict
    >>> def payload() -> JsonDict:
    ...     return {"a": 1}
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "JsonDict",
]

# Convenient JSON-like mapping alias. Kept intentionally broad for serde boundaries.
JsonDict = dict[str, Any]
