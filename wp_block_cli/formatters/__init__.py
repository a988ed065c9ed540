"""Output formatting for lists and single items."""

from .base import (
    ITEM_FORMATS,
    LIST_FORMATS,
    Formatter,
    OutputFormat,
    OutputOptions,
    cell_text,
    select_fields,
)
from .formatter import OutputFormatter

__all__ = [
    "Formatter",
    "ITEM_FORMATS",
    "LIST_FORMATS",
    "OutputFormat",
    "OutputFormatter",
    "OutputOptions",
    "cell_text",
    "select_fields",
]
