from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv

from .config import DashkitSettings, configure_logging
from .core.errors import GrammarError, SchemaError
from .export import panel_fingerprint, panel_to_json
from .loader import load_panel

logger = logging.getLogger(__name__)


def _settings(args: argparse.Namespace) -> DashkitSettings:
    """Load settings (env > TOML > defaults) and apply CLI flag overrides."""
    if not args.no_env:
        load_dotenv(Path(".env"), override=False)
    if args.config and not Path(args.config).is_file():
        raise FileNotFoundError(f"settings file not found: {args.config}")
    s = DashkitSettings.load(args.config or None)
    if getattr(args, "indent", None) is not None:
        s = replace(s, json_indent=None if args.indent < 0 else args.indent)
    if getattr(args, "sort_keys", False):
        s = replace(s, sort_keys=True)
    configure_logging(s)
    return s


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("path", type=str, help="Panel definition file (YAML or JSON).")
    p.add_argument("--config", type=str, default="", help="Explicit TOML settings file.")
    p.add_argument(
        "--no-env",
        action="store_true",
        help="Do not auto-load .env (by default, .env is loaded if present).",
    )


def _cmd_render(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="render", description="Render a panel definition as JSON.")
    _add_common(p)
    p.add_argument(
        "--indent", type=int, default=None, help="JSON indent (negative for compact output)."
    )
    p.add_argument("--sort-keys", action="store_true", help="Sort keys in the JSON output.")
    args = p.parse_args(argv)

    settings = _settings(args)
    panel = load_panel(args.path)
    print(panel_to_json(panel, settings))
    return 0


def _cmd_fingerprint(argv: list[str]) -> int:
    p = argparse.ArgumentParser(
        prog="fingerprint", description="Print the SHA-256 fingerprint of a panel definition."
    )
    _add_common(p)
    args = p.parse_args(argv)

    _settings(args)
    print(panel_fingerprint(load_panel(args.path)))
    return 0


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="dashkit", description="Time series panel utilities CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("render")
    sub.add_parser("fingerprint")
    return p


def main(argv: list[str] | None = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        build_argparser().print_help()
        return
    cmd, rest = argv[0], argv[1:]
    try:
        if cmd == "render":
            code = _cmd_render(rest)
        elif cmd == "fingerprint":
            code = _cmd_fingerprint(rest)
        else:
            print(f"Unknown command: {cmd}", file=sys.stderr)
            code = 2
    except (GrammarError, SchemaError, OSError) as e:
        logger.debug("command %s failed", cmd, exc_info=True)
        print(f"[ERROR] {e}", file=sys.stderr)
        code = 2
    raise SystemExit(code)


if __name__ == "__main__":
    main()
