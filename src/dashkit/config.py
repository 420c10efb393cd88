"""
Configuration for dashkit rendering and the CLI.

Defines DashkitSettings, a frozen dataclass carrying runtime configuration for how
panels are exported (JSON layout, dropping unset fields) and how verbose logging is.
Panel defaults themselves are not configurable here; they live in
dashkit.core.constants and are applied by dashkit.timeseries.new.

Import DAG discipline
- Depends only on stdlib.
- Does not import dashkit.timeseries, dashkit.loader, or dashkit.cli.

Notes
- Precedence: environment > TOML > defaults.
- Malformed values are ignored; the previous layer's value is kept.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

try:  # Python 3.11+ stdlib TOML parser
    import tomllib  # type: ignore
except Exception:  # pragma: no cover - environments without tomllib
    tomllib = None  # type: ignore[assignment]

__all__ = [
    "DashkitSettings",
    "configure_logging",
]

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        return v.strip().lower() in {"1", "true", "t", "yes", "y", "on"}
    return False


@dataclass(frozen=True)
class DashkitSettings:
    """
    Runtime settings for panel export and logging.

    Attributes:
        json_indent (int | None): Indentation for exported JSON; None for compact output.
        sort_keys (bool): Sort keys in exported JSON.
        exclude_none (bool): Drop unset optional fields (datasource, height, ...) on export.
        log_level (str): Root log level used by configure_logging.

    Examples:
        >>> from dashkit.config import DashkitSettings
        >>> DashkitSettings(json_indent=None).json_indent is None
        True
    """

    json_indent: int | None = 2
    sort_keys: bool = False
    exclude_none: bool = True
    log_level: str = "WARNING"

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: DashkitSettings, cfg: dict[str, Any] | None) -> DashkitSettings:
        """Apply a loose config mapping onto DashkitSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        # json_indent ("none"/"null"/"" means compact)
        if "json_indent" in cfg:
            raw = cfg["json_indent"]
            if raw is None or (isinstance(raw, str) and raw.strip().lower() in {"", "none", "null"}):
                s = replace(s, json_indent=None)
            else:
                try:
                    s = replace(s, json_indent=int(raw))
                except (TypeError, ValueError):
                    pass

        if "sort_keys" in cfg:
            s = replace(s, sort_keys=_bool(cfg["sort_keys"]))

        if "exclude_none" in cfg:
            s = replace(s, exclude_none=_bool(cfg["exclude_none"]))

        if "log_level" in cfg and isinstance(cfg["log_level"], str):
            level = cfg["log_level"].strip().upper()
            if level in _LOG_LEVELS:
                s = replace(s, log_level=level)

        return s

    @classmethod
    def from_env(
        cls, base: DashkitSettings | None = None, prefix: str = "DASHKIT_"
    ) -> DashkitSettings:
        """
        Build DashkitSettings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - DASHKIT_JSON_INDENT (integer, or "none" for compact JSON)
            - DASHKIT_SORT_KEYS (1/0/true/false/yes/no/on/off)
            - DASHKIT_EXCLUDE_NONE (1/0/true/false/yes/no/on/off)
            - DASHKIT_LOG_LEVEL (DEBUG/INFO/WARNING/ERROR/CRITICAL)
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for key in ("json_indent", "sort_keys", "exclude_none", "log_level"):
            v = os.getenv(prefix + key.upper())
            if v is not None and v != "":
                mapping[key] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> DashkitSettings:
        """
        Build DashkitSettings from a TOML file.

        Search order when `path` is None:
            1) ./dashkit.toml (with either a [render] table or top-level keys)
            2) ./pyproject.toml under [tool.dashkit.render]

        Returns defaults if no file present or tomllib is unavailable.
        """
        s = cls()
        if tomllib is None:
            return s

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)  # type: ignore[arg-type]
            except (OSError, tomllib.TOMLDecodeError):
                return None

        cfg: dict[str, Any] | None = None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "dashkit.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = (
                    tool.get("dashkit", {}).get("render", {})  # type: ignore[assignment]
                    if isinstance(tool, dict)
                    else None
                )
            else:
                if "render" in data and isinstance(data["render"], dict):
                    cfg = data["render"]
                else:
                    cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> DashkitSettings:
        """
        Load DashkitSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (dashkit.toml, pyproject.toml).
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s


def configure_logging(settings: DashkitSettings) -> None:
    """Configure root logging for CLI runs at ``settings.log_level``."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="[%(levelname)s] %(name)s: %(message)s",
    )
