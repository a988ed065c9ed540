"""Registered block binding source."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import field_validator

from .base import ResourceKind, ResourceRecord, text_or_empty


class BindingSource(ResourceRecord):
    kind: ClassVar[ResourceKind] = ResourceKind.BINDING
    default_fields: ClassVar[tuple[str, ...]] = ("name", "label")
    detail_fields: ClassVar[tuple[str, ...]] = ("uses_context",)

    name: str
    label: str = ""
    uses_context: list[str] | None = None

    @field_validator("label", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return text_or_empty(value)


__all__ = ["BindingSource"]
