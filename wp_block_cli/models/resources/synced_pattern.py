"""Synced pattern (``wp_block`` post) record."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from .base import ResourceKind, ResourceRecord

SYNC_STATUS_META_KEY = "wp_pattern_sync_status"
UNSYNCED_META_VALUE = "unsynced"
SYNCED_PATTERN_POST_TYPE = "wp_block"


class SyncStatus(str, Enum):
    SYNCED = "synced"
    UNSYNCED = "unsynced"

    @classmethod
    def from_meta(cls, meta_value: str | None) -> SyncStatus:
        """Derive the status from the stored meta value.

        Only the literal ``unsynced`` marks a pattern as unsynced; a missing
        row, an empty value and anything else all mean synced.
        """
        if meta_value == UNSYNCED_META_VALUE:
            return cls.UNSYNCED
        return cls.SYNCED


class SyncedPattern(ResourceRecord):
    kind: ClassVar[ResourceKind] = ResourceKind.SYNCED_PATTERN
    id_field: ClassVar[str] = "ID"
    default_fields: ClassVar[tuple[str, ...]] = (
        "ID",
        "post_title",
        "post_name",
        "sync_status",
        "post_date",
    )
    detail_fields: ClassVar[tuple[str, ...]] = ("post_content", "post_status", "post_author")

    ID: int
    post_title: str = ""
    post_name: str = ""
    post_content: str = ""
    post_excerpt: str = ""
    post_status: str = "publish"
    post_author: int = 0
    post_date: str = ""
    sync_status: SyncStatus = SyncStatus.SYNCED

    hidden_fields: ClassVar[frozenset[str]] = frozenset({"post_excerpt"})


__all__ = [
    "SYNCED_PATTERN_POST_TYPE",
    "SYNC_STATUS_META_KEY",
    "SyncStatus",
    "SyncedPattern",
    "UNSYNCED_META_VALUE",
]
