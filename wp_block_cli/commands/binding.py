"""``wp-block binding``: registered block binding sources."""

from __future__ import annotations

import argparse

from wp_block_cli.errors import NotFoundError
from wp_block_cli.models import BindingSource

from .base import (
    CommandContext,
    add_action,
    add_item_output_arguments,
    add_output_arguments,
    display_record,
    display_records,
)

FAMILY = "binding"


def list_bindings(ctx: CommandContext, args: argparse.Namespace) -> None:
    display_records(ctx, args, ctx.store.bindings(), BindingSource.default_fields)


def get_binding(ctx: CommandContext, args: argparse.Namespace) -> None:
    source = ctx.store.get_binding(args.name)
    if source is None:
        raise NotFoundError(f"Block binding source '{args.name}' is not registered.")
    display_record(ctx, args, source)


def register(resources: argparse._SubParsersAction) -> None:
    parser = resources.add_parser("binding", help="Retrieves details on registered block binding sources.")
    actions = parser.add_subparsers(dest="action", required=True, metavar="<command>")

    list_parser = add_action(actions, "list", list_bindings, family=FAMILY, help="Lists registered binding sources.")
    add_output_arguments(list_parser)

    get_parser = add_action(actions, "get", get_binding, family=FAMILY, help="Gets details about a binding source.")
    get_parser.add_argument("name", help="Binding source name, e.g. 'core/post-meta'.")
    add_item_output_arguments(get_parser)


__all__ = ["get_binding", "list_bindings", "register"]
