"""``wp-block template``: block templates and template parts."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from wp_block_cli.errors import ExternalOperationError, NotFoundError, UsageError
from wp_block_cli.models import BlockTemplate, TemplateType
from wp_block_cli.repositories.filters import (
    EqualsFilter,
    MembershipFilter,
    RecordFilter,
    ValueInFilter,
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

FAMILY = "template"


def list_templates(ctx: CommandContext, args: argparse.Namespace) -> None:
    template_type = TemplateType(args.type)

    filters: list[RecordFilter] = []
    if args.slug:
        slugs = ValueInFilter.from_csv("slug", args.slug)
        if slugs is not None:
            filters.append(slugs)
    # WordPress only honours the area query for template parts.
    if args.area and template_type is TemplateType.TEMPLATE_PART:
        filters.append(EqualsFilter("area", args.area))
    if args.post_type:
        filters.append(MembershipFilter("post_types", args.post_type, missing_matches=True))
    if args.source:
        filters.append(EqualsFilter("source", args.source))

    templates = apply_filters(ctx.store.templates(template_type), filters)
    logger.debug("%d %s entries after %d filters", len(templates), template_type.value, len(filters))
    display_records(ctx, args, templates, BlockTemplate.default_fields)


def get_template(ctx: CommandContext, args: argparse.Namespace) -> None:
    display_record(ctx, args, _require_template(ctx, args.id, args.type))


def export_template(ctx: CommandContext, args: argparse.Namespace) -> None:
    if args.file and args.dir:
        raise UsageError("The --file and --dir options are mutually exclusive.")

    template = _require_template(ctx, args.id, args.type)

    if args.stdout:
        ctx.stdout.write(template.content)
        return

    if args.file:
        filepath = args.file
        directory = os.path.dirname(filepath)
        if directory and directory != "." and not os.path.isdir(directory):
            _make_directory(directory)
    else:
        directory = args.dir.rstrip("/") if args.dir else "."
        if not os.path.isdir(directory or "/"):
            _make_directory(directory)
        filepath = f"{directory}/{template.slug}.html"

    try:
        with open(filepath, "w", encoding="utf-8", newline="") as handle:
            handle.write(template.content)
    except OSError as exc:
        raise ExternalOperationError(f"Failed to write to '{filepath}'.") from exc

    logger.debug("Wrote %d characters to %s", len(template.content), filepath)
    ctx.success(f"Exported template to '{filepath}'.")


def _require_template(ctx: CommandContext, template_id: str, template_type: str) -> BlockTemplate:
    template = ctx.store.get_template(template_id, TemplateType(template_type))
    if template is None:
        raise NotFoundError(f"Block template '{template_id}' not found.")
    return template


def _make_directory(directory: str) -> None:
    try:
        Path(directory).mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ExternalOperationError(f"Could not create directory '{directory}'.") from exc


def _add_type_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--type",
        choices=[template_type.value for template_type in TemplateType],
        default=TemplateType.TEMPLATE.value,
        help="Template type to query.",
    )


def register(resources: argparse._SubParsersAction) -> None:
    parser = resources.add_parser("template", help="Retrieves details on block templates and template parts.")
    actions = parser.add_subparsers(dest="action", required=True, metavar="<command>")

    list_parser = add_action(actions, "list", list_templates, family=FAMILY, help="Lists block templates or template parts.")
    _add_type_argument(list_parser)
    list_parser.add_argument("--slug", help="Comma-separated list of slugs to include.")
    list_parser.add_argument("--area", help="Filter template parts by area, e.g. 'header'.")
    list_parser.add_argument("--post-type", dest="post_type", help="Filter by the post type a template applies to.")
    list_parser.add_argument("--source", help="Filter by source, e.g. 'theme' or 'custom'.")
    add_output_arguments(list_parser)

    get_parser = add_action(actions, "get", get_template, family=FAMILY, help="Gets details about a block template.")
    get_parser.add_argument("id", help="Template ID, e.g. 'twentytwentyfour//single'.")
    _add_type_argument(get_parser)
    add_item_output_arguments(get_parser)

    export_parser = add_action(
        actions, "export", export_template, family=FAMILY, help="Exports a block template's content to a file."
    )
    export_parser.add_argument("id", help="Template ID, e.g. 'twentytwentyfour//single'.")
    _add_type_argument(export_parser)
    export_parser.add_argument("--file", help="Write to this file path.")
    export_parser.add_argument("--dir", help="Write '<slug>.html' into this directory. Defaults to the current one.")
    export_parser.add_argument("--stdout", action="store_true", help="Print the content instead of writing a file.")


__all__ = ["export_template", "get_template", "list_templates", "register"]
