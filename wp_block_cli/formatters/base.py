"""Output options and cell helpers shared by every formatter."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Protocol, Sequence

from wp_block_cli.errors import UsageError


class OutputFormat(str, Enum):
    TABLE = "table"
    CSV = "csv"
    JSON = "json"
    YAML = "yaml"
    COUNT = "count"
    IDS = "ids"


LIST_FORMATS: tuple[str, ...] = tuple(fmt.value for fmt in OutputFormat)
ITEM_FORMATS: tuple[str, ...] = ("table", "csv", "json", "yaml")


@dataclass(slots=True)
class OutputOptions:
    """What to render: the format and the ordered field selection.

    ``field`` (a single field) wins over ``fields``; either may name fields a
    record does not have, which then render as empty values.
    """

    format: OutputFormat = OutputFormat.TABLE
    fields: tuple[str, ...] = ()
    field: str | None = None

    @classmethod
    def from_args(
        cls,
        *,
        format: str | None,
        fields: str | Sequence[str] | None,
        field: str | None,
        default_fields: Sequence[str],
    ) -> OutputOptions:
        if isinstance(fields, str):
            selected = tuple(chunk.strip() for chunk in fields.split(",") if chunk.strip())
        else:
            selected = tuple(fields or ())
        try:
            output_format = OutputFormat(format or OutputFormat.TABLE.value)
        except ValueError as exc:
            raise UsageError(f"Invalid format: {format}") from exc
        return cls(
            format=output_format,
            fields=selected or tuple(default_fields),
            field=field or None,
        )

    @property
    def selected_fields(self) -> tuple[str, ...]:
        if self.field:
            return (self.field,)
        return self.fields


class Formatter(Protocol):
    def display_items(self, items: Sequence[Mapping[str, Any]]) -> None:
        ...

    def display_item(self, item: Mapping[str, Any]) -> None:
        ...


def select_fields(item: Mapping[str, Any], fields: Sequence[str]) -> dict[str, Any]:
    """Project ``item`` onto ``fields`` in order; unknown fields become ``None``."""
    return {name: item.get(name) for name in fields}


def cell_text(value: Any) -> str:
    """Render one value for a table, CSV cell or ``--field`` line."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)


__all__ = [
    "Formatter",
    "ITEM_FORMATS",
    "LIST_FORMATS",
    "OutputFormat",
    "OutputOptions",
    "cell_text",
    "select_fields",
]
