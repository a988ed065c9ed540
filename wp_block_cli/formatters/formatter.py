"""Render projected records as table, CSV, JSON, YAML, a count or an id list."""

from __future__ import annotations

import csv
import json
from typing import IO, Any, Iterable, Mapping, Sequence

import yaml
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .base import OutputFormat, OutputOptions, cell_text, select_fields

_MIN_TABLE_WIDTH = 80


class OutputFormatter:
    """Writes records to ``stream`` according to ``options``."""

    def __init__(self, options: OutputOptions, stream: IO[str]):
        self.options = options
        self._stream = stream

    @property
    def format(self) -> OutputFormat:
        return self.options.format

    def display_items(self, items: Sequence[Mapping[str, Any]]) -> None:
        fmt = self.options.format
        if fmt is OutputFormat.COUNT:
            self._write_line(str(len(items)))
            return
        if fmt is OutputFormat.IDS:
            raise ValueError("Identifiers must be rendered with display_ids().")

        fields = self.options.selected_fields
        rows = [select_fields(item, fields) for item in items]

        if self.options.field:
            values = [row[self.options.field] for row in rows]
            if fmt is OutputFormat.JSON:
                self._write_line(_to_json(values))
            else:
                for value in values:
                    self._write_line(cell_text(value))
            return

        if fmt is OutputFormat.JSON:
            self._write_line(_to_json(rows))
        elif fmt is OutputFormat.YAML:
            self._write_yaml(rows)
        elif fmt is OutputFormat.CSV:
            self._write_csv(fields, ([row[name] for name in fields] for row in rows))
        else:
            self._write_table(fields, [[row[name] for name in fields] for row in rows])

    def display_item(self, item: Mapping[str, Any]) -> None:
        fmt = self.options.format
        if fmt in (OutputFormat.COUNT, OutputFormat.IDS):
            raise ValueError(f"Format '{fmt.value}' is only available for lists.")

        fields = self.options.selected_fields
        row = select_fields(item, fields)

        if self.options.field:
            value = row[self.options.field]
            self._write_line(_to_json(value) if fmt is OutputFormat.JSON else cell_text(value))
            return

        if fmt is OutputFormat.JSON:
            self._write_line(_to_json(row))
        elif fmt is OutputFormat.YAML:
            self._write_yaml(row)
        elif fmt is OutputFormat.CSV:
            self._write_csv(("Field", "Value"), ([name, value] for name, value in row.items()))
        else:
            self._write_table(("Field", "Value"), [[name, value] for name, value in row.items()])

    def display_ids(self, identifiers: Iterable[Any]) -> None:
        self._write_line(" ".join(str(identifier) for identifier in identifiers))

    def _write_line(self, text: str) -> None:
        self._stream.write(f"{text}\n")

    def _write_yaml(self, data: Any) -> None:
        self._stream.write(
            yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)
        )

    def _write_csv(self, header: Sequence[str], rows: Iterable[Sequence[Any]]) -> None:
        writer = csv.writer(self._stream, lineterminator="\n")
        writer.writerow(header)
        for row in rows:
            writer.writerow([cell_text(value) for value in row])

    def _write_table(self, header: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
        cells = [[cell_text(value) for value in row] for row in rows]
        widths = [len(name) for name in header]
        for row in cells:
            for index, text in enumerate(row):
                longest = max((len(line) for line in text.splitlines()), default=0)
                widths[index] = max(widths[index], longest)

        table = Table(box=box.ASCII, header_style=None, highlight=False, pad_edge=True)
        for name in header:
            table.add_column(Text(name), no_wrap=True, overflow="ignore")
        for row in cells:
            table.add_row(*(Text(text) for text in row))

        # Wide enough that rich never wraps or truncates a cell.
        width = max(_MIN_TABLE_WIDTH, sum(widths) + 3 * len(widths) + 1)
        console = Console(
            file=self._stream,
            width=width,
            color_system=None,
            highlight=False,
            markup=False,
            emoji=False,
            force_terminal=False,
            soft_wrap=False,
        )
        console.print(table)


def _to_json(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


__all__ = ["OutputFormatter"]
