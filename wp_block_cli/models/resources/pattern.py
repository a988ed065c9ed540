"""Registered block pattern definition."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field, field_validator

from .base import ResourceKind, ResourceRecord, list_or_empty, text_or_empty


class BlockPattern(ResourceRecord):
    kind: ClassVar[ResourceKind] = ResourceKind.PATTERN
    default_fields: ClassVar[tuple[str, ...]] = ("name", "title", "description", "categories")
    detail_fields: ClassVar[tuple[str, ...]] = (
        "content",
        "keywords",
        "blockTypes",
        "postTypes",
        "templateTypes",
        "inserter",
        "viewportWidth",
    )

    name: str = ""
    title: str = ""
    description: str = ""
    categories: list[str] = Field(default_factory=list)
    content: str = ""
    keywords: list[str] = Field(default_factory=list)
    block_types: list[str] = Field(default_factory=list, alias="blockTypes")
    post_types: list[str] = Field(default_factory=list, alias="postTypes")
    template_types: list[str] = Field(default_factory=list, alias="templateTypes")
    inserter: bool = True
    viewport_width: int | None = Field(default=None, alias="viewportWidth")

    @field_validator("name", "title", "description", "content", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return text_or_empty(value)

    @field_validator(
        "categories", "keywords", "block_types", "post_types", "template_types", mode="before"
    )
    @classmethod
    def _lists(cls, value: Any) -> list[Any]:
        return list_or_empty(value)

    @field_validator("inserter", mode="before")
    @classmethod
    def _inserter(cls, value: Any) -> bool:
        # Only an explicit false hides a pattern from the inserter.
        return value is not False


__all__ = ["BlockPattern"]
