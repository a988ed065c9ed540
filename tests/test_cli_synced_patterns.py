from __future__ import annotations

import json
from pathlib import Path

from wp_block_cli.db.engine import create_engine, create_session_factory
from wp_block_cli.models import SyncStatus
from wp_block_cli.repositories import SyncedPatternRepository
from wp_block_cli.store import EditorStore

BLOCK_CONTENT = "<!-- wp:paragraph --><p>Hello</p><!-- /wp:paragraph -->"
INVALID_BLOCKS_WARNING = (
    "Warning: Content does not appear to contain valid blocks. "
    "The pattern will be created with the provided content.\n"
)


def test_create_then_get_round_trip(run_cli) -> None:
    created = run_cli(
        "synced-pattern", "create", "--title=Call to action", f"--content={BLOCK_CONTENT}", "--porcelain"
    )

    assert created.exit_code == 0
    post_id = int(created.stdout.strip())

    fetched = run_cli("synced-pattern", "get", str(post_id), "--format=json")
    data = json.loads(fetched.stdout)

    assert data["ID"] == post_id
    assert data["post_title"] == "Call to action"
    assert data["post_name"] == "call-to-action"
    assert data["post_content"] == BLOCK_CONTENT
    assert data["post_status"] == "publish"
    assert data["post_author"] == 1
    assert data["sync_status"] == "synced"
    assert list(data) == [
        "ID",
        "post_title",
        "post_name",
        "sync_status",
        "post_date",
        "post_content",
        "post_status",
        "post_author",
    ]


def test_create_messages(run_cli) -> None:
    synced = run_cli("synced-pattern", "create", "--title=One", f"--content={BLOCK_CONTENT}")
    unsynced = run_cli(
        "synced-pattern", "create", "--title=Two", f"--content={BLOCK_CONTENT}", "--sync-status=unsynced"
    )

    assert synced.stdout.startswith("Success: Created synced pattern ")
    assert unsynced.stdout.startswith("Success: Created unsynced pattern ")
    post_id = unsynced.stdout.strip().rstrip(".").rsplit(" ", 1)[-1]
    assert run_cli("synced-pattern", "get", post_id, "--field=sync_status").stdout == "unsynced\n"


def test_create_requires_title_and_content(run_cli) -> None:
    no_title = run_cli("synced-pattern", "create", f"--content={BLOCK_CONTENT}")
    no_content = run_cli("synced-pattern", "create", "--title=Empty")

    assert no_title.exit_code == 1
    assert no_title.stderr == "Error: Pattern title is required. Use --title=<title>.\n"
    assert no_content.exit_code == 1
    assert no_content.stderr == "Error: Pattern content is required. Use --content=<content> or provide a file.\n"


def test_create_warns_on_content_without_blocks(run_cli) -> None:
    result = run_cli("synced-pattern", "create", "--title=Plain", "--content=<p>Just HTML</p>", "--porcelain")

    assert result.exit_code == 0
    assert result.stderr == INVALID_BLOCKS_WARNING
    assert result.stdout.strip().isdigit()


def test_create_reads_file_over_content_flag(run_cli, tmp_path: Path) -> None:
    source = tmp_path / "pattern.html"
    source.write_text(BLOCK_CONTENT, encoding="utf-8")

    result = run_cli(
        "synced-pattern", "create", str(source), "--title=From file", "--content=ignored", "--porcelain"
    )

    post_id = result.stdout.strip()
    assert run_cli("synced-pattern", "get", post_id, "--field=post_content").stdout == f"{BLOCK_CONTENT}\n"


def test_create_reads_stdin(run_cli) -> None:
    result = run_cli("synced-pattern", "create", "-", "--title=Piped", "--porcelain", stdin=BLOCK_CONTENT)

    post_id = result.stdout.strip()
    assert run_cli("synced-pattern", "get", post_id, "--field=post_content").stdout == f"{BLOCK_CONTENT}\n"


def test_create_with_missing_file(run_cli, tmp_path: Path) -> None:
    missing = tmp_path / "missing.html"

    result = run_cli("synced-pattern", "create", str(missing), "--title=Nope")

    assert result.exit_code == 1
    assert result.stderr == f"Error: File '{missing}' does not exist.\n"


def test_create_with_slug_and_status(run_cli) -> None:
    result = run_cli(
        "synced-pattern", "create", "--title=Draft one", f"--content={BLOCK_CONTENT}",
        "--slug=custom-slug", "--status=draft", "--porcelain",
    )

    data = json.loads(run_cli("synced-pattern", "get", result.stdout.strip(), "--format=json").stdout)
    assert data["post_name"] == "custom-slug"
    assert data["post_status"] == "draft"
    assert run_cli("synced-pattern", "list", "--format=count").stdout == "0\n"


def test_list_search_and_sync_status(run_cli, pattern_factory) -> None:
    footer = pattern_factory(title="Footer", content="<!-- wp:site-tagline /-->")
    hero = pattern_factory(title="Hero", sync_status=SyncStatus.UNSYNCED)
    about = pattern_factory(title="About", content="<!-- wp:paragraph --><p>footer links</p><!-- /wp:paragraph -->")

    assert run_cli("synced-pattern", "list", "--format=ids").stdout == f"{about} {footer} {hero}\n"
    assert run_cli("synced-pattern", "list", "--search=FOOTER", "--format=ids").stdout == f"{about} {footer}\n"
    assert run_cli("synced-pattern", "list", "--sync-status=unsynced", "--format=ids").stdout == f"{hero}\n"
    assert run_cli("synced-pattern", "list", "--sync-status=synced", "--format=ids").stdout == f"{about} {footer}\n"

    rows = json.loads(run_cli("synced-pattern", "list", "--format=json").stdout)
    assert list(rows[0]) == ["ID", "post_title", "post_name", "sync_status", "post_date"]


def test_get_unknown_or_foreign_ids(run_cli) -> None:
    for raw in ("99999", "abc"):
        result = run_cli("synced-pattern", "get", raw)
        assert result.exit_code == 1
        assert result.stderr == f"Error: Synced pattern with ID {raw} not found.\n"


def test_update_title_content_and_status(run_cli, pattern_factory, repository) -> None:
    post_id = pattern_factory(title="Before")

    result = run_cli(
        "synced-pattern", "update", str(post_id), "--title=After", "--content=<!-- wp:spacer /-->",
        "--sync-status=unsynced",
    )

    assert result.exit_code == 0
    assert result.stdout == f"Success: Updated synced pattern {post_id}.\n"
    pattern = repository.get_pattern(post_id)
    assert pattern.post_title == "After"
    assert pattern.post_content == "<!-- wp:spacer /-->"
    assert pattern.sync_status is SyncStatus.UNSYNCED

    run_cli("synced-pattern", "update", str(post_id), "--sync-status=synced")
    assert repository.get_pattern(post_id).sync_status is SyncStatus.SYNCED


def test_update_without_changes_still_succeeds(run_cli, pattern_factory, repository) -> None:
    post_id = pattern_factory(title="Same")

    result = run_cli("synced-pattern", "update", str(post_id))

    assert result.stdout == f"Success: Updated synced pattern {post_id}.\n"
    assert repository.get_pattern(post_id).post_title == "Same"


def test_update_unknown(run_cli) -> None:
    result = run_cli("synced-pattern", "update", "4242", "--title=X")

    assert result.stderr == "Error: Synced pattern with ID 4242 not found.\n"


def test_delete_trashes_and_reports_missing(run_cli, pattern_factory, repository) -> None:
    post_id = pattern_factory()

    result = run_cli("synced-pattern", "delete", str(post_id), "222")

    assert result.exit_code == 1
    assert result.stdout == "Success: Trashed 1 synced pattern(s).\n"
    assert result.stderr == (
        "Warning: Synced pattern with ID 222 not found.\n"
        "Error: Failed to delete 1 synced pattern(s).\n"
    )
    assert repository.get_pattern(post_id).post_status == "trash"


def test_delete_already_trashed_fails(run_cli, pattern_factory) -> None:
    post_id = pattern_factory()
    run_cli("synced-pattern", "delete", str(post_id))

    result = run_cli("synced-pattern", "delete", str(post_id))

    assert result.exit_code == 1
    assert result.stdout == ""
    assert result.stderr == (
        f"Warning: Failed to delete synced pattern {post_id}.\n"
        "Error: Failed to delete 1 synced pattern(s).\n"
    )


def test_force_delete_removes_posts(run_cli, pattern_factory, repository) -> None:
    first = pattern_factory(title="One")
    second = pattern_factory(title="Two", sync_status=SyncStatus.UNSYNCED)

    result = run_cli("synced-pattern", "delete", str(first), str(second), "--force")

    assert result.exit_code == 0
    assert result.stdout == "Success: Deleted 2 synced pattern(s).\n"
    assert repository.get_pattern(first) is None
    assert repository.get_pattern(second) is None


def test_delete_only_missing(run_cli) -> None:
    result = run_cli("synced-pattern", "delete", "111", "222")

    assert result.exit_code == 1
    assert result.stdout == ""
    assert result.stderr == (
        "Warning: Synced pattern with ID 111 not found.\n"
        "Warning: Synced pattern with ID 222 not found.\n"
        "Error: Failed to delete 2 synced pattern(s).\n"
    )


def test_delete_reports_each_database_failure(run_cli, registries, read_only_repository) -> None:
    repository, post_ids = read_only_repository
    store = EditorStore(registries=registries, repository=repository)

    result = run_cli("synced-pattern", "delete", *(str(post_id) for post_id in post_ids), store=store)

    assert result.exit_code == 1
    assert result.stdout == ""
    assert result.stderr == (
        f"Warning: Failed to delete synced pattern {post_ids[0]}.\n"
        f"Warning: Failed to delete synced pattern {post_ids[1]}.\n"
        "Error: Failed to delete 2 synced pattern(s).\n"
    )
    assert repository.get_pattern(post_ids[0]).post_status == "publish"


def test_update_sync_status_database_failure_is_an_error(run_cli, registries, read_only_repository) -> None:
    repository, post_ids = read_only_repository
    store = EditorStore(registries=registries, repository=repository)

    result = run_cli("synced-pattern", "update", str(post_ids[0]), "--sync-status=unsynced", store=store)

    assert result.exit_code == 1
    assert result.stdout == ""
    assert result.stderr.startswith(f"Error: Could not update sync status of post {post_ids[0]}")


def test_list_and_get_without_post_tables_are_errors(run_cli, registries) -> None:
    # No schema has been created on this engine.
    repository = SyncedPatternRepository(create_session_factory(create_engine()))
    store = EditorStore(registries=registries, repository=repository)

    listed = run_cli("synced-pattern", "list", store=store)
    fetched = run_cli("synced-pattern", "get", "1", store=store)

    assert listed.exit_code == 1
    assert listed.stderr.startswith("Error: Could not query synced patterns")
    assert fetched.exit_code == 1
    assert fetched.stderr.startswith("Error: Could not query post 1")
