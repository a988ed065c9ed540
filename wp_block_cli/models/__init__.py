"""Resource record models."""

from .resources import (
    BindingSource,
    BlockPattern,
    BlockStyle,
    BlockTemplate,
    BlockType,
    PatternCategory,
    ResourceKind,
    ResourceRecord,
    SyncStatus,
    SyncedPattern,
    TemplateType,
)

__all__ = [
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
