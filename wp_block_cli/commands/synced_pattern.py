"""``wp-block synced-pattern``: reusable blocks stored as ``wp_block`` posts."""

from __future__ import annotations

import argparse
import logging

from wp_block_cli.errors import BatchError, ExternalOperationError, NotFoundError, UsageError
from wp_block_cli.models import SyncedPattern, SyncStatus
from wp_block_cli.parser import has_named_blocks
from wp_block_cli.repositories.filters import (
    RecordFilter,
    SearchFilter,
    SyncStatusChoice,
    SyncStatusFilter,
    apply_filters,
)
from wp_block_cli.repositories.synced_pattern_repository import RepositoryError

from .base import (
    CommandContext,
    add_action,
    add_item_output_arguments,
    add_output_arguments,
    display_record,
    display_records,
    read_from_file_or_stdin,
)

logger = logging.getLogger(__name__)

FAMILY = "synced-pattern"

INVALID_BLOCKS_WARNING = (
    "Content does not appear to contain valid blocks. "
    "The pattern will be created with the provided content."
)


def list_synced_patterns(ctx: CommandContext, args: argparse.Namespace) -> None:
    filters: list[RecordFilter] = []
    if args.search:
        filters.append(SearchFilter(args.search, text_attributes=("post_title", "post_content")))
    status = SyncStatusChoice(args.sync_status)
    if status is not SyncStatusChoice.ALL:
        filters.append(SyncStatusFilter(status))

    try:
        patterns = apply_filters(ctx.store.synced_patterns(), filters)
    except RepositoryError as exc:
        raise ExternalOperationError(str(exc)) from exc
    display_records(ctx, args, patterns, SyncedPattern.default_fields)


def get_synced_pattern(ctx: CommandContext, args: argparse.Namespace) -> None:
    display_record(ctx, args, _require_pattern(ctx, args.id))


def create_synced_pattern(ctx: CommandContext, args: argparse.Namespace) -> None:
    content = ""
    if args.file:
        content = read_from_file_or_stdin(ctx, args.file)
    elif args.content:
        content = args.content

    if not args.title:
        raise UsageError("Pattern title is required. Use --title=<title>.")
    if not content:
        raise UsageError("Pattern content is required. Use --content=<content> or provide a file.")

    if not has_named_blocks(content):
        ctx.warning(INVALID_BLOCKS_WARNING)

    sync_status = SyncStatus(args.sync_status)
    try:
        post_id = ctx.store.create_synced_pattern(
            title=args.title,
            content=content,
            status=args.status,
            slug=args.slug or None,
            sync_status=sync_status,
        )
    except RepositoryError as exc:
        raise ExternalOperationError(str(exc)) from exc

    if args.porcelain:
        ctx.line(str(post_id))
    else:
        ctx.success(f"Created {sync_status.value} pattern {post_id}.")


def update_synced_pattern(ctx: CommandContext, args: argparse.Namespace) -> None:
    pattern = _require_pattern(ctx, args.id)

    content: str | None = None
    if args.file:
        content = read_from_file_or_stdin(ctx, args.file)
    elif args.content:
        content = args.content
    title = args.title or None

    try:
        if title is not None or content is not None:
            ctx.store.update_synced_pattern(pattern.ID, title=title, content=content)
        if args.sync_status:
            ctx.store.set_sync_status(pattern.ID, SyncStatus(args.sync_status))
    except RepositoryError as exc:
        raise ExternalOperationError(str(exc)) from exc

    ctx.success(f"Updated synced pattern {args.id}.")


def delete_synced_patterns(ctx: CommandContext, args: argparse.Namespace) -> None:
    deleted = 0
    errored = 0

    for raw_id in args.ids:
        post_id = _parse_post_id(raw_id)
        try:
            pattern = ctx.store.get_synced_pattern(post_id) if post_id is not None else None
            if pattern is None:
                ctx.warning(f"Synced pattern with ID {raw_id} not found.")
                errored += 1
                continue
            ctx.store.delete_synced_pattern(post_id, force=args.force)
        except RepositoryError as exc:
            logger.debug("Delete of %s refused: %s", post_id, exc)
            ctx.warning(f"Failed to delete synced pattern {raw_id}.")
            errored += 1
            continue
        deleted += 1

    if deleted:
        action = "Deleted" if args.force else "Trashed"
        ctx.success(f"{action} {deleted} synced pattern(s).")
    if errored:
        raise BatchError(f"Failed to delete {errored} synced pattern(s).")


def _parse_post_id(raw: str) -> int | None:
    try:
        post_id = int(raw)
    except ValueError:
        return None
    return post_id if post_id > 0 else None


def _require_pattern(ctx: CommandContext, raw_id: str) -> SyncedPattern:
    post_id = _parse_post_id(raw_id)
    try:
        pattern = ctx.store.get_synced_pattern(post_id) if post_id is not None else None
    except RepositoryError as exc:
        raise ExternalOperationError(str(exc)) from exc
    if pattern is None:
        raise NotFoundError(f"Synced pattern with ID {raw_id} not found.")
    return pattern


def register(resources: argparse._SubParsersAction) -> None:
    parser = resources.add_parser("synced-pattern", help="Manages synced patterns (reusable blocks).")
    actions = parser.add_subparsers(dest="action", required=True, metavar="<command>")
    sync_choices = [status.value for status in SyncStatus]

    list_parser = add_action(actions, "list", list_synced_patterns, family=FAMILY, help="Lists published synced patterns.")
    list_parser.add_argument("--search", help="Search in title and content.")
    list_parser.add_argument(
        "--sync-status",
        dest="sync_status",
        choices=[choice.value for choice in SyncStatusChoice],
        default=SyncStatusChoice.ALL.value,
        help="Filter by sync status.",
    )
    add_output_arguments(list_parser)

    get_parser = add_action(actions, "get", get_synced_pattern, family=FAMILY, help="Gets details about a synced pattern.")
    get_parser.add_argument("id", help="Pattern post ID.")
    add_item_output_arguments(get_parser)

    create_parser = add_action(actions, "create", create_synced_pattern, family=FAMILY, help="Creates a synced pattern.")
    create_parser.add_argument("file", nargs="?", help="Read content from this file, or '-' for STDIN.")
    create_parser.add_argument("--title", help="Pattern title.")
    create_parser.add_argument("--content", help="Pattern content (block markup).")
    create_parser.add_argument("--slug", help="Pattern slug. Derived from the title when omitted.")
    create_parser.add_argument(
        "--sync-status", dest="sync_status", choices=sync_choices, default=SyncStatus.SYNCED.value,
        help="Whether edits propagate to every instance.",
    )
    create_parser.add_argument("--status", default="publish", help="Post status.")
    create_parser.add_argument("--porcelain", action="store_true", help="Output only the new pattern ID.")

    update_parser = add_action(actions, "update", update_synced_pattern, family=FAMILY, help="Updates a synced pattern.")
    update_parser.add_argument("id", help="Pattern post ID.")
    update_parser.add_argument("file", nargs="?", help="Read content from this file, or '-' for STDIN.")
    update_parser.add_argument("--title", help="New title.")
    update_parser.add_argument("--content", help="New content (block markup).")
    update_parser.add_argument("--sync-status", dest="sync_status", choices=sync_choices, help="New sync status.")

    delete_parser = add_action(actions, "delete", delete_synced_patterns, family=FAMILY, help="Deletes synced patterns.")
    delete_parser.add_argument("ids", nargs="+", metavar="id", help="Pattern post IDs.")
    delete_parser.add_argument("--force", action="store_true", help="Skip the trash and delete permanently.")


__all__ = [
    "create_synced_pattern",
    "delete_synced_patterns",
    "get_synced_pattern",
    "list_synced_patterns",
    "register",
    "update_synced_pattern",
]
