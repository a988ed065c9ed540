"""Shared plumbing for resource commands: output, field selection and content input."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Callable, Sequence

from wp_block_cli.errors import ExternalOperationError
from wp_block_cli.formatters import (
    ITEM_FORMATS,
    LIST_FORMATS,
    OutputFormat,
    OutputFormatter,
    OutputOptions,
)
from wp_block_cli.models import ResourceRecord
from wp_block_cli.store import EditorStore


@dataclass(slots=True)
class CommandContext:
    """Everything a command handler may touch: the store and the three streams."""

    store: EditorStore
    stdin: IO[str]
    stdout: IO[str]
    stderr: IO[str]

    def line(self, text: str = "") -> None:
        self.stdout.write(f"{text}\n")

    def success(self, message: str) -> None:
        self.stdout.write(f"Success: {message}\n")

    def warning(self, message: str) -> None:
        self.stderr.write(f"Warning: {message}\n")


Handler = Callable[[CommandContext, argparse.Namespace], None]


def add_action(
    actions: argparse._SubParsersAction,
    name: str,
    handler: Handler,
    *,
    family: str,
    help: str,
) -> argparse.ArgumentParser:
    parser = actions.add_parser(name, help=help, description=help)
    parser.set_defaults(handler=handler, family=family)
    return parser


def add_output_arguments(
    parser: argparse.ArgumentParser,
    *,
    formats: Sequence[str] = LIST_FORMATS,
) -> None:
    parser.add_argument("--field", help="Print the value of a single field.")
    parser.add_argument("--fields", help="Comma-separated list of fields to show.")
    parser.add_argument(
        "--format",
        choices=tuple(formats),
        default=OutputFormat.TABLE.value,
        help="Render output in a particular format.",
    )


def add_item_output_arguments(parser: argparse.ArgumentParser) -> None:
    add_output_arguments(parser, formats=ITEM_FORMATS)


def output_options(args: argparse.Namespace, default_fields: Sequence[str]) -> OutputOptions:
    return OutputOptions.from_args(
        format=args.format,
        fields=args.fields,
        field=args.field,
        default_fields=default_fields,
    )


def display_records(
    ctx: CommandContext,
    args: argparse.Namespace,
    records: Sequence[ResourceRecord],
    default_fields: Sequence[str],
) -> None:
    """Render a filtered collection; ``ids`` reads identifiers off the unprojected records."""
    formatter = OutputFormatter(output_options(args, default_fields), ctx.stdout)
    if formatter.format is OutputFormat.IDS:
        formatter.display_ids(record.identifier for record in records)
        return
    formatter.display_items([record.project() for record in records])


def display_record(ctx: CommandContext, args: argparse.Namespace, record: ResourceRecord) -> None:
    """Render one record; without ``--fields`` the detail fields are shown too."""
    formatter = OutputFormatter(output_options(args, record.get_fields()), ctx.stdout)
    formatter.display_item(record.project())


def read_from_file_or_stdin(ctx: CommandContext, source: str) -> str:
    """Read ``source`` from disk, or all of stdin when it is ``-``."""
    if source == "-":
        try:
            return ctx.stdin.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise ExternalOperationError("Failed to read from STDIN.") from exc

    path = Path(source)
    if not path.exists():
        raise ExternalOperationError(f"File '{source}' does not exist.")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ExternalOperationError(f"Failed to read file '{source}'.") from exc


__all__ = [
    "CommandContext",
    "Handler",
    "add_action",
    "add_item_output_arguments",
    "add_output_arguments",
    "display_record",
    "display_records",
    "output_options",
    "read_from_file_or_stdin",
]
