"""Registered block pattern category."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import field_validator

from .base import ResourceKind, ResourceRecord, text_or_empty


class PatternCategory(ResourceRecord):
    kind: ClassVar[ResourceKind] = ResourceKind.PATTERN_CATEGORY
    default_fields: ClassVar[tuple[str, ...]] = ("name", "label", "description")

    name: str = ""
    label: str = ""
    description: str = ""

    @field_validator("name", "label", "description", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return text_or_empty(value)


__all__ = ["PatternCategory"]
