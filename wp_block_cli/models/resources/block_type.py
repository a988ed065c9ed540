"""Registered block type definition."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import field_validator

from .base import ResourceKind, ResourceRecord


class BlockType(ResourceRecord):
    """A block type as held by the block type registry.

    Every attribute except ``name`` and ``is_dynamic`` is optional: depending
    on the host version and how the block was registered the registry may not
    expose it, in which case it projects as ``null``.
    """

    kind: ClassVar[ResourceKind] = ResourceKind.BLOCK_TYPE
    default_fields: ClassVar[tuple[str, ...]] = (
        "name",
        "title",
        "description",
        "category",
        "is_dynamic",
    )
    detail_fields: ClassVar[tuple[str, ...]] = (
        "icon",
        "keywords",
        "parent",
        "ancestor",
        "supports",
        "attributes",
        "provides_context",
        "uses_context",
        "block_hooks",
        "api_version",
    )

    name: str
    title: str | None = None
    description: str | None = None
    category: str | None = None
    is_dynamic: bool = False
    icon: Any = None
    keywords: list[str] | None = None
    parent: list[str] | None = None
    ancestor: list[str] | None = None
    allowed_blocks: list[str] | None = None
    supports: dict[str, Any] | None = None
    attributes: dict[str, Any] | None = None
    provides_context: dict[str, Any] | None = None
    uses_context: list[str] | None = None
    block_hooks: dict[str, Any] | None = None
    selectors: dict[str, Any] | None = None
    styles: list[Any] | None = None
    example: Any = None
    editor_script_handles: list[str] | None = None
    script_handles: list[str] | None = None
    view_script_handles: list[str] | None = None
    view_script_module_ids: list[str] | None = None
    editor_style_handles: list[str] | None = None
    style_handles: list[str] | None = None
    view_style_handles: list[str] | None = None
    api_version: int | None = None

    @field_validator(
        "supports", "attributes", "provides_context", "block_hooks", "selectors", mode="before"
    )
    @classmethod
    def _empty_maps(cls, value: Any) -> Any:
        # PHP encodes an empty associative array as [].
        if isinstance(value, list) and not value:
            return {}
        return value


__all__ = ["BlockType"]
