"""Factory helpers for constructing the editor store façade."""

from __future__ import annotations

import logging

from wp_block_cli.db.engine import create_engine, create_session_factory, is_sqlite
from wp_block_cli.db.schema import create_all
from wp_block_cli.repositories.registry import RegistrySet
from wp_block_cli.repositories.snapshot import load_snapshot
from wp_block_cli.repositories.synced_pattern_repository import SyncedPatternRepository
from wp_block_cli.settings import Settings

from .editor_store import EditorStore

logger = logging.getLogger(__name__)


def create_editor_store(settings: Settings) -> EditorStore:
    """Build an EditorStore reading the configured snapshot and database on first use."""

    def load_registries() -> RegistrySet:
        return load_snapshot(settings.snapshot_path)

    def open_repository() -> SyncedPatternRepository:
        if settings.database_url:
            engine = create_engine(settings.database_url)
        else:
            engine = create_engine(sqlite_path=settings.sqlite_path)
        if is_sqlite(engine):
            create_all(engine)
        logger.debug("Using post store at %s", engine.url.render_as_string(hide_password=True))
        return SyncedPatternRepository(create_session_factory(engine))

    return EditorStore(
        registries=load_registries if settings.snapshot_path else None,
        repository=open_repository,
        wp_version=settings.wp_version,
        user_id=settings.user_id,
    )


__all__ = ["create_editor_store"]
