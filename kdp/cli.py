"""Command line entry point for inspecting and initializing the KDP home."""
from __future__ import annotations

import argparse
import json
import sys
from typing import Dict, List, Optional

import yaml

from .logging import configure_logging, get_logger
from .paths import KdpHome

LOGGER = get_logger(__name__)


def render_layout(home: KdpHome, fmt: str) -> str:
    data: Dict[str, str] = {key: str(value) for key, value in home.layout().items()}
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False)
    return json.dumps(data, indent=2)


def cmd_show(args: argparse.Namespace) -> int:
    home = KdpHome.from_env()
    home.ensure()
    print(render_layout(home, args.format))
    return 0


def cmd_init(args: argparse.Namespace) -> int:
    home = KdpHome.from_env()
    home.init_dirs()
    LOGGER.info("Initialized KDP home at %s", home.root)
    if args.verbose:
        print(render_layout(home, "json"))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kdp-home", description="KDP home directory helper")
    parser.add_argument("--log-level", default=None, help="Logging level (defaults to $KDP_LOG_LEVEL or INFO)")
    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="Print the resolved home layout")
    show.add_argument("--format", choices=["json", "yaml"], default="json")
    show.set_defaults(func=cmd_show)

    init = sub.add_parser("init", help="Create the capability and cap center directories")
    init.add_argument("--verbose", action="store_true", help="Print the layout after initializing")
    init.set_defaults(func=cmd_init)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    try:
        return args.func(args)
    except OSError as exc:
        LOGGER.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
