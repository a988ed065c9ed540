"""Lightweight orchestration layer over the registries and the post repository."""

from __future__ import annotations

import logging
from typing import Callable

from wp_block_cli.errors import ConfigurationError
from wp_block_cli.models import (
    BindingSource,
    BlockPattern,
    BlockStyle,
    BlockTemplate,
    BlockType,
    PatternCategory,
    SyncedPattern,
    SyncStatus,
    TemplateType,
)
from wp_block_cli.repositories.registry import RegistrySet
from wp_block_cli.repositories.synced_pattern_repository import SyncedPatternRepository
from wp_block_cli.version import require_family

logger = logging.getLogger(__name__)

RegistryLoader = Callable[[], RegistrySet]
RepositoryLoader = Callable[[], SyncedPatternRepository]

MISSING_SNAPSHOT_MESSAGE = (
    "No registry snapshot configured. Use --snapshot=<file> or set WP_BLOCK_SNAPSHOT."
)


class EditorStore:
    """Thin façade the commands talk to instead of individual sources.

    Registries and the database are resolved lazily, so a command only pays
    for (and only fails on) the source it actually reads.
    """

    def __init__(
        self,
        *,
        registries: RegistrySet | RegistryLoader | None = None,
        repository: SyncedPatternRepository | RepositoryLoader | None = None,
        wp_version: str | None = None,
        user_id: int = 0,
    ):
        """Internal constructor; prefer ``create_editor_store`` for public use."""
        self._registries = registries if isinstance(registries, RegistrySet) else None
        self._registry_loader = None if isinstance(registries, RegistrySet) else registries
        self._repository = repository if isinstance(repository, SyncedPatternRepository) else None
        self._repository_loader = (
            None if isinstance(repository, SyncedPatternRepository) else repository
        )
        self._wp_version_override = wp_version
        self.user_id = user_id

    # --------------------------------------------------------------- Sources
    @property
    def has_registries(self) -> bool:
        return self._registries is not None or self._registry_loader is not None

    @property
    def registries(self) -> RegistrySet:
        if self._registries is None:
            if self._registry_loader is None:
                raise ConfigurationError(MISSING_SNAPSHOT_MESSAGE)
            self._registries = self._registry_loader()
        return self._registries

    @property
    def repository(self) -> SyncedPatternRepository:
        if self._repository is None:
            if self._repository_loader is None:
                raise ConfigurationError("No database configured.")
            self._repository = self._repository_loader()
        return self._repository

    @property
    def wp_version(self) -> str | None:
        """Configured host version, else the snapshot's, else unknown."""
        if self._wp_version_override:
            return self._wp_version_override
        if self.has_registries:
            return self.registries.wp_version
        return None

    def require_family(self, family: str) -> None:
        require_family(self.wp_version, family)

    # ------------------------------------------------------------ Registries
    def block_types(self) -> list[BlockType]:
        return self.registries.block_types.all()

    def get_block_type(self, name: str) -> BlockType | None:
        return self.registries.block_types.get(name)

    def patterns(self) -> list[BlockPattern]:
        return self.registries.patterns.all()

    def get_pattern(self, name: str) -> BlockPattern | None:
        return self.registries.patterns.get(name)

    def pattern_categories(self) -> list[PatternCategory]:
        return self.registries.pattern_categories.all()

    def get_pattern_category(self, name: str) -> PatternCategory | None:
        return self.registries.pattern_categories.get(name)

    def styles(self, block_name: str | None = None) -> list[BlockStyle]:
        if block_name:
            return self.registries.styles.for_block(block_name)
        return self.registries.styles.all()

    def get_style(self, block_name: str, style_name: str) -> BlockStyle | None:
        return self.registries.styles.get_style(block_name, style_name)

    def bindings(self) -> list[BindingSource]:
        return self.registries.bindings.all()

    def get_binding(self, name: str) -> BindingSource | None:
        return self.registries.bindings.get(name)

    def templates(self, template_type: TemplateType = TemplateType.TEMPLATE) -> list[BlockTemplate]:
        return self.registries.templates.all(template_type)

    def get_template(
        self,
        template_id: str,
        template_type: TemplateType = TemplateType.TEMPLATE,
    ) -> BlockTemplate | None:
        return self.registries.templates.get(template_id, template_type)

    # -------------------------------------------------------- Synced patterns
    def synced_patterns(self) -> list[SyncedPattern]:
        return self.repository.list_patterns()

    def get_synced_pattern(self, post_id: int) -> SyncedPattern | None:
        return self.repository.get_pattern(post_id)

    def create_synced_pattern(
        self,
        *,
        title: str,
        content: str,
        status: str = "publish",
        slug: str | None = None,
        sync_status: SyncStatus = SyncStatus.SYNCED,
    ) -> int:
        return self.repository.insert_pattern(
            title=title,
            content=content,
            status=status,
            slug=slug,
            author=self.user_id,
            sync_status=sync_status,
        )

    def update_synced_pattern(
        self,
        post_id: int,
        *,
        title: str | None = None,
        content: str | None = None,
    ) -> None:
        self.repository.update_pattern(post_id, title=title, content=content)

    def set_sync_status(self, post_id: int, status: SyncStatus) -> None:
        self.repository.set_sync_status(post_id, status)

    def delete_synced_pattern(self, post_id: int, *, force: bool = False) -> None:
        """Trash the pattern, or delete it permanently with ``force``."""
        if force:
            self.repository.delete_pattern(post_id)
        else:
            self.repository.trash_pattern(post_id)


__all__ = ["EditorStore", "MISSING_SNAPSHOT_MESSAGE", "RegistryLoader", "RepositoryLoader"]
