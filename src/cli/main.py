"""Schema tote CLI entry points.
This module loads one or more JSON entry documents and runs a lookup.
It maps argparse commands onto store accessors and prints JSON.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Sequence

from core.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_NAMES
from core.errors import ToteError
from core.logging_config import configure_logging
from store.tote import SchemaTote

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_LOAD_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="schema-tote",
        description="Query schema entries loaded from JSON array documents",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        type=str.lower,
        choices=LOG_LEVEL_NAMES,
        help="Minimum structured log level written to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_entries_command(subparsers)
    _add_entry_command(subparsers)
    _add_ref_command(subparsers)
    _add_schemas_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the schema tote CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    try:
        tote = SchemaTote()
        for source in args.sources:
            tote.load(source)
    except (ToteError, OSError, UnicodeDecodeError, json.JSONDecodeError) as error:
        print(f"schema-tote: failed to load sources: {error}", file=sys.stderr)
        return EXIT_LOAD_FAILED
    if args.command == "entries":
        return _emit(_run_entries_command(tote, args))
    if args.command == "entry":
        return _emit(_run_entry_command(tote, args))
    if args.command == "ref":
        return _emit(_run_ref_command(tote, args))
    if args.command == "schemas":
        return _emit(_run_schemas_command(tote, args))
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _run_entries_command(tote: SchemaTote, args: argparse.Namespace) -> list[Any]:
    """Handle entries command.

    Args:
        tote: Loaded store.
        args: Parsed CLI args.

    Returns:
        Matching entries.
    """
    if args.type is not None:
        return tote.get_all_by_type(args.type)
    if args.schema_type is not None:
        return tote.get_all_by_schema_type(args.schema_type)
    if args.tag is not None:
        return tote.get_all_by_tag(args.tag)
    return tote.get_all()


def _run_entry_command(tote: SchemaTote, args: argparse.Namespace) -> Any:
    """Handle entry command.

    Args:
        tote: Loaded store.
        args: Parsed CLI args.

    Returns:
        Entry or schema, or None when not found.
    """
    if args.schema_only:
        if args.id is not None:
            return tote.get_schema_by_id(args.id)
        return tote.get_schema_by_schema_id(args.schema_id)
    if args.id is not None:
        return tote.get_by_id(args.id)
    return tote.get_by_schema_id(args.schema_id)


def _run_ref_command(tote: SchemaTote, args: argparse.Namespace) -> Any:
    """Handle ref command."""
    if args.id is not None:
        return tote.get_ref_by_id(args.id)
    return tote.get_ref_by_schema_id(args.schema_id)


def _run_schemas_command(tote: SchemaTote, args: argparse.Namespace) -> list[Any]:
    """Handle schemas command."""
    if args.schema_type is not None:
        return tote.get_all_schemas_by_type(args.schema_type)
    if args.tag is not None:
        return tote.get_all_schemas_by_tag(args.tag)
    return tote.get_all_schemas()


def _emit(result: Any) -> int:
    """Print a lookup result as JSON and map absence to an exit code."""
    if result is None:
        print("null")
        return EXIT_NOT_FOUND
    print(json.dumps(result, indent=2, ensure_ascii=False))
    return EXIT_OK


def _add_sources_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "sources",
        nargs="+",
        help="JSON array documents (paths or s3:// URIs), loaded in order",
    )


def _add_lookup_key_arguments(parser: argparse.ArgumentParser) -> None:
    key_group = parser.add_mutually_exclusive_group(required=True)
    key_group.add_argument("--id", help="Top-level entry id")
    key_group.add_argument("--schema-id", help="Nested schema @id")


def _add_entries_command(subparsers: Any) -> None:
    """Register entries command."""
    parser = subparsers.add_parser("entries", help="List entries, optionally filtered")
    _add_sources_argument(parser)
    filter_group = parser.add_mutually_exclusive_group()
    filter_group.add_argument("--type", help="Top-level entry type")
    filter_group.add_argument("--schema-type", help="Nested schema @type")
    filter_group.add_argument("--tag", help="Tag, matched case-insensitively")


def _add_entry_command(subparsers: Any) -> None:
    """Register entry command."""
    parser = subparsers.add_parser("entry", help="Show the first entry matching a key")
    _add_sources_argument(parser)
    _add_lookup_key_arguments(parser)
    parser.add_argument(
        "--schema-only",
        action="store_true",
        help="Print only the nested schema object",
    )


def _add_ref_command(subparsers: Any) -> None:
    """Register ref command."""
    parser = subparsers.add_parser("ref", help="Show the @type/@id reference of an entry")
    _add_sources_argument(parser)
    _add_lookup_key_arguments(parser)


def _add_schemas_command(subparsers: Any) -> None:
    """Register schemas command."""
    parser = subparsers.add_parser("schemas", help="List schema objects without wrappers")
    _add_sources_argument(parser)
    filter_group = parser.add_mutually_exclusive_group()
    filter_group.add_argument("--schema-type", help="Nested schema @type")
    filter_group.add_argument("--tag", help="Tag, matched case-insensitively")
