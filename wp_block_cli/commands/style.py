"""``wp-block style``: registered block style variations."""

from __future__ import annotations

import argparse

from wp_block_cli.errors import NotFoundError
from wp_block_cli.formatters import LIST_FORMATS
from wp_block_cli.models import BlockStyle

from .base import (
    CommandContext,
    add_action,
    add_item_output_arguments,
    add_output_arguments,
    display_record,
    display_records,
)

FAMILY = "style"

# A style is keyed by block and style name together, so there is no single id to list.
STYLE_LIST_FORMATS = tuple(fmt for fmt in LIST_FORMATS if fmt != "ids")


def list_styles(ctx: CommandContext, args: argparse.Namespace) -> None:
    display_records(ctx, args, ctx.store.styles(args.block), BlockStyle.default_fields)


def get_style(ctx: CommandContext, args: argparse.Namespace) -> None:
    style = ctx.store.get_style(args.block_name, args.style_name)
    if style is None:
        raise NotFoundError(
            f"Block style '{args.style_name}' for block '{args.block_name}' is not registered."
        )
    display_record(ctx, args, style)


def register(resources: argparse._SubParsersAction) -> None:
    parser = resources.add_parser("style", help="Retrieves details on registered block styles.")
    actions = parser.add_subparsers(dest="action", required=True, metavar="<command>")

    list_parser = add_action(actions, "list", list_styles, family=FAMILY, help="Lists registered block styles.")
    list_parser.add_argument("--block", help="Only show styles for this block type.")
    add_output_arguments(list_parser, formats=STYLE_LIST_FORMATS)

    get_parser = add_action(actions, "get", get_style, family=FAMILY, help="Gets details about a registered block style.")
    get_parser.add_argument("block_name", metavar="block", help="Block type name.")
    get_parser.add_argument("style_name", metavar="style", help="Style name.")
    add_item_output_arguments(get_parser)


__all__ = ["get_style", "list_styles", "register"]
