"""``wp-block type``: registered block types."""

from __future__ import annotations

import argparse
import logging

from wp_block_cli.errors import Halt, NotFoundError
from wp_block_cli.models import BlockType
from wp_block_cli.repositories.filters import (
    FlagFilter,
    NamespaceFilter,
    RecordFilter,
    apply_filters,
    require_exclusive,
)

from .base import (
    CommandContext,
    add_action,
    add_item_output_arguments,
    add_output_arguments,
    display_record,
    display_records,
)

logger = logging.getLogger(__name__)

FAMILY = "type"


def list_block_types(ctx: CommandContext, args: argparse.Namespace) -> None:
    require_exclusive(dynamic=args.dynamic, static=args.static)

    filters: list[RecordFilter] = []
    if args.namespace:
        filters.append(NamespaceFilter(args.namespace))
    if args.dynamic:
        filters.append(FlagFilter("is_dynamic", expected=True))
    elif args.static:
        filters.append(FlagFilter("is_dynamic", expected=False))

    block_types = apply_filters(ctx.store.block_types(), filters)
    logger.debug("%d block types after %d filters", len(block_types), len(filters))
    display_records(ctx, args, block_types, BlockType.default_fields)


def get_block_type(ctx: CommandContext, args: argparse.Namespace) -> None:
    block_type = ctx.store.get_block_type(args.name)
    if block_type is None:
        raise NotFoundError(f"Block type '{args.name}' is not registered.")
    display_record(ctx, args, block_type)


def block_type_exists(ctx: CommandContext, args: argparse.Namespace) -> None:
    if ctx.store.get_block_type(args.name) is None:
        raise Halt(1)
    ctx.success(f"Block type '{args.name}' is registered.")


def register(resources: argparse._SubParsersAction) -> None:
    parser = resources.add_parser("type", help="Retrieves details on registered block types.")
    actions = parser.add_subparsers(dest="action", required=True, metavar="<command>")

    list_parser = add_action(actions, "list", list_block_types, family=FAMILY, help="Lists registered block types.")
    list_parser.add_argument("--namespace", help="Filter by block namespace, e.g. 'core'.")
    list_parser.add_argument("--dynamic", action="store_true", help="Only show dynamic (server-rendered) blocks.")
    list_parser.add_argument("--static", action="store_true", help="Only show static blocks.")
    add_output_arguments(list_parser)

    get_parser = add_action(actions, "get", get_block_type, family=FAMILY, help="Gets details about a registered block type.")
    get_parser.add_argument("name", help="Block type name, including namespace.")
    add_item_output_arguments(get_parser)

    exists_parser = add_action(
        actions, "exists", block_type_exists, family=FAMILY, help="Checks whether a block type is registered."
    )
    exists_parser.add_argument("name", help="Block type name, including namespace.")


__all__ = ["block_type_exists", "get_block_type", "list_block_types", "register"]
