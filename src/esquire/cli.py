"""CLI entry point — run searches and counts from the shell."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from esquire.config.settings import Settings
from esquire.exceptions import EsquireError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="esquire",
        description="Esquire — search request builder for Elasticsearch-style services",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--url",
        type=str,
        default=None,
        help="Search service URL (overrides config)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"Esquire {_get_version()}",
    )

    scope = argparse.ArgumentParser(add_help=False)
    scope.add_argument("--index", "-i", action="append", default=[], help="Index to search (repeatable)")
    scope.add_argument("--type", "-t", action="append", default=[], help="Type to search (repeatable)")
    scope.add_argument("--query", "-q", type=str, default="", help="Query string (default: match all)")

    commands = parser.add_subparsers(dest="command", required=True)

    search = commands.add_parser("search", parents=[scope], help="Run a search and print the hits")
    search.add_argument("--limit", "-l", type=int, default=None, help="Maximum number of hits")
    search.add_argument("--explain", action="store_true", help="Ask the service to explain scores")
    search.add_argument(
        "--option",
        "-o",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Request option, e.g. routing=r1 (repeatable)",
    )

    commands.add_parser("count", parents=[scope], help="Print the number of matching documents")
    commands.add_parser("path", parents=[scope], help="Print the request path for the scope")

    return parser


def _parse_options(pairs: list[str], limit: int | None, explain: bool) -> dict[str, Any]:
    """Turn ``KEY=VALUE`` pairs and flags into a search options mapping."""
    options: dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Option must look like KEY=VALUE: {pair!r}")
        options[key] = value
    if limit is not None:
        options["limit"] = limit
    if explain:
        options["explain"] = True
    return options


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        if args.config:
            config_path = Path(args.config)
            if not config_path.exists():
                print(f"Error: Config file not found: {config_path}", file=sys.stderr)
                return 1
            settings = Settings.from_yaml(config_path)
        else:
            settings = Settings()
    except (EsquireError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.url:
        settings.client.base_url = args.url.rstrip("/")
    if args.log_level:
        settings.observability.log_level = args.log_level

    from esquire.observability.logging import setup_logging

    setup_logging(settings.observability)

    from esquire.client import Client
    from esquire.search.search import Search

    with Client(settings.client) as client:
        try:
            search = Search(client).add_indices(args.index).add_types(args.type)

            if args.command == "path":
                print(search.get_path())
            elif args.command == "count":
                print(search.count(args.query))
            else:
                options = _parse_options(args.option, args.limit, args.explain)
                results = search.search(args.query, options or None)
                output = {
                    "total": results.total_hits,
                    "took": results.took,
                    "timed_out": results.has_timed_out(),
                    "hits": [hit.model_dump(by_alias=True, exclude_none=True) for hit in results],
                }
                print(json.dumps(output, ensure_ascii=False, indent=2))
        except (EsquireError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2

    return 0


def _get_version() -> str:
    """Get the package version."""
    try:
        from esquire import __version__

        return __version__
    except ImportError:
        return "unknown"


if __name__ == "__main__":
    sys.exit(main())
