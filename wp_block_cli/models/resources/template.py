"""Block template and template part documents."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from pydantic import Field, field_validator

from .base import ResourceKind, ResourceRecord, text_or_empty


class TemplateType(str, Enum):
    TEMPLATE = "wp_template"
    TEMPLATE_PART = "wp_template_part"


class BlockTemplate(ResourceRecord):
    """A template (``wp_template``) or template part (``wp_template_part``).

    ``post_types`` is kept for ``--post-type`` filtering but is not a
    projectable field.
    """

    kind: ClassVar[ResourceKind] = ResourceKind.TEMPLATE
    id_field: ClassVar[str] = "id"
    default_fields: ClassVar[tuple[str, ...]] = ("id", "slug", "title", "source", "type")
    detail_fields: ClassVar[tuple[str, ...]] = (
        "theme",
        "description",
        "status",
        "origin",
        "is_custom",
        "has_theme_file",
        "author",
        "area",
        "content",
    )
    hidden_fields: ClassVar[frozenset[str]] = frozenset({"post_types"})

    id: str
    slug: str = ""
    theme: str = ""
    type: TemplateType = TemplateType.TEMPLATE
    source: str = ""
    origin: str | None = None
    title: str = ""
    description: str = ""
    status: str = "publish"
    author: int | None = None
    is_custom: bool = True
    has_theme_file: bool = False
    area: str = ""
    content: str = ""
    post_types: list[str] | None = Field(default=None)

    @field_validator("title", mode="before")
    @classmethod
    def _title(cls, value: Any) -> str:
        if isinstance(value, dict):
            value = value.get("rendered", value.get("raw"))
        return text_or_empty(value)

    @field_validator("slug", "theme", "source", "description", "area", "content", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return text_or_empty(value)


__all__ = ["BlockTemplate", "TemplateType"]
