#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv

from mdot.app import build_plan
from mdot.config import ConfigurationError, configure_logging
from mdot.domain import ResolverError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from mdot.domain import Entry, Plan

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mdot",
        description="Resolve dotfile and package entries into an ordered install/link plan",
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="Configuration files, merged in order (defaults to the user config file)",
    )
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Treat dependencies on unknown entries as errors (defaults to MDOT_STRICT)",
    )
    parser.add_argument(
        "--override",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Let later files replace same-named entries (defaults to MDOT_OVERRIDE)",
    )
    parser.add_argument(
        "--only",
        nargs="+",
        metavar="NAME",
        help="Plan only these entries and their dependencies",
    )
    parser.add_argument(
        "--format",
        choices=("names", "json"),
        default="names",
        help="Output format for the plan (default: %(default)s)",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="count", default=0)
    verbosity.add_argument("-q", "--quiet", action="store_true")
    return parser.parse_args(list(argv))


def _entry_payload(entry: Entry) -> dict[str, Any]:
    return {
        "name": entry.name,
        "depends": list(entry.depends),
        "links": [
            {
                "source": link.source,
                "targets": list(link.targets),
                "overwrite": link.overwrite,
                "backup": link.backup,
            }
            for link in entry.links
        ],
        "exclude": list(entry.exclude),
        "templates": list(entry.templates),
        "package_name": entry.package_name,
        "enabled": entry.enabled,
    }


def render_plan(plan: Plan, *, output_format: str = "names") -> str:
    if output_format == "json":
        return json.dumps([_entry_payload(entry) for entry in plan], indent=2, default=str)
    return "\n".join(plan.names)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(verbose=parsed_args.verbose, quiet=parsed_args.quiet)

    try:
        plan = build_plan(
            parsed_args.files,
            strict=parsed_args.strict,
            override=parsed_args.override,
            roots=parsed_args.only,
        )
    except ConfigurationError as exc:
        log.error("Configuration error: %s", exc)  # noqa: TRY400
        sys.exit(2)
    except ResolverError as exc:
        log.error("%s: %s", exc.kind, exc)  # noqa: TRY400
        sys.exit(1)

    output = render_plan(plan, output_format=parsed_args.format)
    if output:
        print(output)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
