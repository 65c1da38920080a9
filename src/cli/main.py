"""Sheetloader CLI entry points.
This module exposes commands for loading sheet collections and
inspecting stored entries. It maps argparse commands onto the loader.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from core.config import SheetLoaderConfig
from core.errors import SheetLoaderError
from core.types import SheetSource
from ingest.pipeline import load_sheet_collection
from store.json_entry_store import JsonEntryStore


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="sheetloader", description="Sheet content loader")
    parser.add_argument("--data-root", help="Override SHEETLOADER_DATA_ROOT for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_load_command(subparsers)
    _add_entries_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sheetloader CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.data_root)
        if args.command == "load":
            return _run_load_command(config, args)
        if args.command == "entries":
            return _run_entries_command(config, args)
    except SheetLoaderError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(data_root: str | None) -> SheetLoaderConfig:
    """Build runtime config with optional data-root override.

    Args:
        data_root: Optional override path.

    Returns:
        Runtime configuration.
    """
    config = SheetLoaderConfig.from_env()
    if data_root:
        config = replace(config, data_root=Path(data_root).expanduser().resolve())
    return config


def _run_load_command(config: SheetLoaderConfig, args: argparse.Namespace) -> int:
    """Handle load command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    source = SheetSource(
        sheet_id=args.sheet_id or config.sheet_id or "",
        api_key=args.api_key or config.api_key or "",
        sheet_name=args.sheet_name or (None if args.gid else config.sheet_name),
        gid=args.gid,
        has_headers=not args.no_headers,
    )
    store = JsonEntryStore(config, args.collection)
    result = load_sheet_collection(
        args.collection,
        source,
        store,
        timeout=config.request_timeout,
    )
    store.flush()
    print(f"entry_count={result.entry_count}")
    print(f"row_count={result.row_count}")
    print(f"path={store.path}")
    return 0


def _run_entries_command(config: SheetLoaderConfig, args: argparse.Namespace) -> int:
    """Handle entries command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    store = JsonEntryStore(config, args.collection)
    for entry in store.entries():
        print(f"{entry.id}\t{entry.digest}")
    return 0


def _add_load_command(subparsers: Any) -> None:
    """Register load subcommand."""
    parser = subparsers.add_parser("load", help="Load a sheet into a stored collection")
    parser.add_argument("--collection", required=True, help="Collection name")
    parser.add_argument("--sheet-id", help="Spreadsheet id; defaults to GOOGLE_SHEET_ID")
    parser.add_argument("--api-key", help="API key; defaults to GOOGLE_SHEETS_API_KEY")
    parser.add_argument("--sheet-name", help="Tab name; defaults to GOOGLE_SHEET_NAME")
    parser.add_argument("--gid", help="Numeric tab id, used when no tab name is given")
    parser.add_argument(
        "--no-headers",
        action="store_true",
        help="Treat the first row as data and label columns A, B, C, ...",
    )


def _add_entries_command(subparsers: Any) -> None:
    """Register entries subcommand."""
    parser = subparsers.add_parser("entries", help="List stored entry ids and digests")
    parser.add_argument("--collection", required=True, help="Collection name")
