"""Shared building blocks for resource records."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict


class ResourceKind(str, Enum):
    BLOCK_TYPE = "block-type"
    PATTERN = "block-pattern"
    PATTERN_CATEGORY = "block-pattern-category"
    STYLE = "block-style"
    BINDING = "block-binding"
    TEMPLATE = "block-template"
    SYNCED_PATTERN = "synced-pattern"


class ResourceRecord(BaseModel):
    """Immutable, flat view of one registry item or post.

    Field defaults are the values shown when the external source omits an
    attribute, so a record is fully resolved once constructed. Subclasses
    declare which fields are listed by default and which extra fields a
    single-item ``get`` adds.
    """

    kind: ClassVar[ResourceKind]
    id_field: ClassVar[str] = "name"
    default_fields: ClassVar[tuple[str, ...]] = ()
    detail_fields: ClassVar[tuple[str, ...]] = ()
    hidden_fields: ClassVar[frozenset[str]] = frozenset()

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @property
    def identifier(self) -> Any:
        return getattr(self, self.id_field)

    @classmethod
    def get_fields(cls) -> tuple[str, ...]:
        """Fields shown by ``get`` when no explicit selection is given."""
        return cls.default_fields + cls.detail_fields

    def project(self) -> dict[str, Any]:
        """Return the record keyed by public field names, in declaration order."""
        data = self.model_dump(mode="json", by_alias=True)
        for name in self.hidden_fields:
            data.pop(name, None)
        return data


def text_or_empty(value: Any) -> str:
    return "" if value is None else str(value)


def list_or_empty(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, (str, bytes)):
        return [value]
    if isinstance(value, Sequence):
        return list(value)
    if isinstance(value, dict):
        return list(value.values())
    return [value]


__all__ = ["ResourceKind", "ResourceRecord", "list_or_empty", "text_or_empty"]
