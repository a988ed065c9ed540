"""Command-line entry point: ``wp-block <resource> <command> [options]``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import IO, Mapping, Sequence

from pydantic import ValidationError

from wp_block_cli import __version__
from wp_block_cli.commands import COMMAND_MODULES, CommandContext
from wp_block_cli.errors import BlockCliError, Halt
from wp_block_cli.settings import load_settings
from wp_block_cli.startup import configure_logging
from wp_block_cli.store import EditorStore, create_editor_store

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wp-block",
        description="Inspect WordPress block-editor registries and manage synced patterns.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--snapshot", type=Path, help="Registry snapshot file (JSON or YAML).")
    parser.add_argument("--database-url", dest="database_url", help="SQLAlchemy URL of the WordPress database.")
    parser.add_argument("--sqlite-path", dest="sqlite_path", type=Path, help="Local SQLite post store.")
    parser.add_argument("--wp-version", dest="wp_version", help="Host WordPress version, overriding the snapshot.")
    parser.add_argument("--user", dest="user_id", type=int, help="Author ID for new posts.")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--debug", action="store_true", help="Log debug output to stderr.")
    verbosity.add_argument("--quiet", action="store_true", help="Only log errors.")

    resources = parser.add_subparsers(dest="resource", required=True, metavar="<resource>")
    for module in COMMAND_MODULES:
        module.register(resources)
    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
    stderr: IO[str] | None = None,
    environ: Mapping[str, str] | None = None,
    store: EditorStore | None = None,
) -> int:
    """Run one command and return its exit status.

    ``store`` and ``environ`` are injection points for tests; by default the
    store is built from settings read from the environment and ``.env``.
    """
    out = stdout or sys.stdout
    err = stderr or sys.stderr

    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 2

    try:
        settings = load_settings(
            environ,
            snapshot_path=args.snapshot,
            database_url=args.database_url,
            sqlite_path=args.sqlite_path,
            wp_version=args.wp_version,
            user_id=args.user_id,
        )
    except ValidationError as exc:
        err.write(f"Error: Invalid configuration: {exc}\n")
        return 1

    if args.debug:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = settings.log_level_number
    configure_logging(level)

    ctx = CommandContext(
        store=store or create_editor_store(settings),
        stdin=stdin or sys.stdin,
        stdout=out,
        stderr=err,
    )

    logger.debug("Running %s %s", args.resource, args.action)
    try:
        ctx.store.require_family(args.family)
        args.handler(ctx, args)
    except Halt as exc:
        return exc.code
    except BlockCliError as exc:
        err.write(f"Error: {exc}\n")
        return exc.exit_code
    return 0


__all__ = ["build_parser", "main"]
