"""``wp-block pattern-category``: registered pattern categories."""

from __future__ import annotations

import argparse

from wp_block_cli.errors import NotFoundError
from wp_block_cli.models import PatternCategory

from .base import (
    CommandContext,
    add_action,
    add_item_output_arguments,
    add_output_arguments,
    display_record,
    display_records,
)

FAMILY = "pattern-category"


def list_pattern_categories(ctx: CommandContext, args: argparse.Namespace) -> None:
    display_records(ctx, args, ctx.store.pattern_categories(), PatternCategory.default_fields)


def get_pattern_category(ctx: CommandContext, args: argparse.Namespace) -> None:
    category = ctx.store.get_pattern_category(args.name)
    if category is None:
        raise NotFoundError(f"Block pattern category '{args.name}' is not registered.")
    display_record(ctx, args, category)


def register(resources: argparse._SubParsersAction) -> None:
    parser = resources.add_parser("pattern-category", help="Retrieves details on registered block pattern categories.")
    actions = parser.add_subparsers(dest="action", required=True, metavar="<command>")

    list_parser = add_action(
        actions, "list", list_pattern_categories, family=FAMILY, help="Lists registered block pattern categories."
    )
    add_output_arguments(list_parser)

    get_parser = add_action(
        actions, "get", get_pattern_category, family=FAMILY, help="Gets details about a registered pattern category."
    )
    get_parser.add_argument("name", help="Pattern category name.")
    add_item_output_arguments(get_parser)


__all__ = ["get_pattern_category", "list_pattern_categories", "register"]
