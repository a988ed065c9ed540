"""``wp-block pattern``: registered block patterns."""

from __future__ import annotations

import argparse
import logging

from wp_block_cli.errors import NotFoundError
from wp_block_cli.models import BlockPattern
from wp_block_cli.repositories.filters import (
    FlagFilter,
    MembershipFilter,
    RecordFilter,
    SearchFilter,
    apply_filters,
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

FAMILY = "pattern"


def list_patterns(ctx: CommandContext, args: argparse.Namespace) -> None:
    filters: list[RecordFilter] = []
    if args.category:
        filters.append(MembershipFilter("categories", args.category))
    if args.search:
        filters.append(SearchFilter(args.search, text_attributes=("title",), list_attributes=("keywords",)))
    if args.inserter:
        filters.append(FlagFilter("inserter", expected=True))

    patterns = apply_filters(ctx.store.patterns(), filters)
    logger.debug("%d patterns after %d filters", len(patterns), len(filters))
    display_records(ctx, args, patterns, BlockPattern.default_fields)


def get_pattern(ctx: CommandContext, args: argparse.Namespace) -> None:
    pattern = ctx.store.get_pattern(args.name)
    if pattern is None:
        raise NotFoundError(f"Block pattern '{args.name}' is not registered.")
    display_record(ctx, args, pattern)


def register(resources: argparse._SubParsersAction) -> None:
    parser = resources.add_parser("pattern", help="Retrieves details on registered block patterns.")
    actions = parser.add_subparsers(dest="action", required=True, metavar="<command>")

    list_parser = add_action(actions, "list", list_patterns, family=FAMILY, help="Lists registered block patterns.")
    list_parser.add_argument("--category", help="Filter by pattern category.")
    list_parser.add_argument("--search", help="Search in title and keywords.")
    list_parser.add_argument("--inserter", action="store_true", help="Only show patterns visible in the inserter.")
    add_output_arguments(list_parser)

    get_parser = add_action(actions, "get", get_pattern, family=FAMILY, help="Gets details about a registered block pattern.")
    get_parser.add_argument("name", help="Pattern name.")
    add_item_output_arguments(get_parser)


__all__ = ["get_pattern", "list_patterns", "register"]
