"""Typed resource exports and helpers."""

from __future__ import annotations

from .base import ResourceKind, ResourceRecord
from .binding_source import BindingSource
from .block_style import BlockStyle
from .block_type import BlockType
from .pattern import BlockPattern
from .pattern_category import PatternCategory
from .synced_pattern import (
    SYNCED_PATTERN_POST_TYPE,
    SYNC_STATUS_META_KEY,
    UNSYNCED_META_VALUE,
    SyncStatus,
    SyncedPattern,
)
from .template import BlockTemplate, TemplateType

__all__ = [
    "SYNCED_PATTERN_POST_TYPE",
    "SYNC_STATUS_META_KEY",
    "UNSYNCED_META_VALUE",
    "BindingSource",
    "BlockPattern",
    "BlockStyle",
    "BlockTemplate",
    "BlockType",
    "PatternCategory",
    "ResourceKind",
    "ResourceRecord",
    "SyncStatus",
    "SyncedPattern",
    "TemplateType",
]
