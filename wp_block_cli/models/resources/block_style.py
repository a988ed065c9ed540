"""Registered block style variation."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import field_validator

from .base import ResourceKind, ResourceRecord, text_or_empty


class BlockStyle(ResourceRecord):
    """A style variation keyed by (``block_name``, ``name``)."""

    kind: ClassVar[ResourceKind] = ResourceKind.STYLE
    default_fields: ClassVar[tuple[str, ...]] = ("block_name", "name", "label", "is_default")
    detail_fields: ClassVar[tuple[str, ...]] = ("style_handle", "inline_style")

    block_name: str
    name: str
    label: str = ""
    is_default: bool = False
    style_handle: str = ""
    inline_style: str = ""

    @field_validator("label", "style_handle", "inline_style", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return text_or_empty(value)

    @field_validator("is_default", mode="before")
    @classmethod
    def _flag(cls, value: Any) -> bool:
        return bool(value)

    @property
    def identifier(self) -> tuple[str, str]:
        return (self.block_name, self.name)


__all__ = ["BlockStyle"]
