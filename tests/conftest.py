from __future__ import annotations

import io
import os
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

import pytest
from sqlalchemy.engine import Engine

from wp_block_cli.cli import main
from wp_block_cli.db.engine import create_engine, create_session_factory
from wp_block_cli.db.schema import Base, DbPost, DbPostMeta, create_all
from wp_block_cli.repositories import RegistrySet, SyncedPatternRepository, load_snapshot
from wp_block_cli.store import EditorStore

FIXTURES = Path(__file__).parent / "fixtures"
FIXED_NOW = datetime(2024, 5, 1, 12, 30, 0, tzinfo=timezone.utc)


@dataclass(slots=True)
class CliResult:
    exit_code: int
    stdout: str
    stderr: str


@pytest.fixture(scope="session")
def test_database_url() -> str | None:
    """Return a dedicated test database URL if provided via env."""
    return os.getenv("WP_BLOCK_TEST_DATABASE_URL")


@pytest.fixture
def engine(test_database_url: str | None) -> Iterator[Engine]:
    """Yield an engine targeting the test database when configured; otherwise SQLite in-memory."""
    engine = create_engine(test_database_url) if test_database_url else create_engine()
    create_all(engine)
    try:
        yield engine
    finally:
        with engine.begin() as connection:
            if engine.dialect.name == "sqlite":
                Base.metadata.drop_all(bind=connection)
            else:
                connection.execute(DbPostMeta.__table__.delete())
                connection.execute(DbPost.__table__.delete())


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def session_factory(engine: Engine):
    return create_session_factory(engine)


@pytest.fixture
def repository(session_factory, fixed_now: datetime) -> SyncedPatternRepository:
    return SyncedPatternRepository(session_factory, clock=lambda: fixed_now)


@pytest.fixture
def snapshot_path() -> Path:
    return FIXTURES / "snapshot.json"


@pytest.fixture
def registries(snapshot_path: Path) -> RegistrySet:
    return load_snapshot(snapshot_path)


@pytest.fixture
def editor_store(registries: RegistrySet, repository: SyncedPatternRepository) -> EditorStore:
    return EditorStore(registries=registries, repository=repository, user_id=1)


@pytest.fixture
def run_cli(editor_store: EditorStore) -> Callable[..., CliResult]:
    """Invoke ``main`` against the fixture store with captured streams."""

    def _run(*argv: str, stdin: str = "", store: EditorStore | None = None) -> CliResult:
        stdout = io.StringIO()
        stderr = io.StringIO()
        exit_code = main(
            list(argv),
            stdin=io.StringIO(stdin),
            stdout=stdout,
            stderr=stderr,
            environ={},
            store=store or editor_store,
        )
        return CliResult(exit_code=exit_code, stdout=stdout.getvalue(), stderr=stderr.getvalue())

    return _run


@pytest.fixture
def pattern_factory(repository: SyncedPatternRepository) -> Callable[..., int]:
    def _factory(
        title: str = "Call to action",
        content: str = "<!-- wp:paragraph --><p>Hi</p><!-- /wp:paragraph -->",
        **kwargs,
    ) -> int:
        return repository.insert_pattern(title=title, content=content, **kwargs)

    return _factory


@pytest.fixture
def read_only_repository(
    tmp_path: Path, fixed_now: datetime
) -> Iterator[tuple[SyncedPatternRepository, list[int]]]:
    """A repository over a SQLite file opened read-only, seeded with two patterns."""
    db_path = tmp_path / "wp-block.db"
    writable = create_engine(sqlite_path=db_path)
    create_all(writable)
    seeded = SyncedPatternRepository(create_session_factory(writable), clock=lambda: fixed_now)
    post_ids = [seeded.insert_pattern(title=title, content="<p>x</p>") for title in ("Alpha", "Beta")]
    writable.dispose()

    read_only = create_engine(f"sqlite+pysqlite:///file:{db_path.resolve().as_posix()}?mode=ro&uri=true")
    try:
        yield SyncedPatternRepository(create_session_factory(read_only), clock=lambda: fixed_now), post_ids
    finally:
        read_only.dispose()
