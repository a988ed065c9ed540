"""Registry providers and the synced-pattern post repository."""

from .registry import InMemoryRegistry, Registry, RegistrySet, StyleRegistry, TemplateRegistry
from .snapshot import load_snapshot, registries_from_mapping
from .synced_pattern_repository import (
    PostNotFoundError,
    RepositoryError,
    SyncedPatternRepository,
    TrashError,
)

__all__ = [
    "InMemoryRegistry",
    "PostNotFoundError",
    "Registry",
    "RegistrySet",
    "RepositoryError",
    "StyleRegistry",
    "SyncedPatternRepository",
    "TemplateRegistry",
    "TrashError",
    "load_snapshot",
    "registries_from_mapping",
]
