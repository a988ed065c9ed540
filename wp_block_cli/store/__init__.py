"""Editor store orchestration helpers."""

from .editor_store import EditorStore
from .factory import create_editor_store

__all__ = ["EditorStore", "create_editor_store"]
