"""Read-only registry providers, one per resource kind."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Generic, Hashable, Iterable, Protocol, TypeVar

from wp_block_cli.models import (
    BindingSource,
    BlockPattern,
    BlockStyle,
    BlockTemplate,
    BlockType,
    PatternCategory,
    ResourceRecord,
    TemplateType,
)

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=ResourceRecord)
RecordT_co = TypeVar("RecordT_co", bound=ResourceRecord, covariant=True)


class Registry(Protocol[RecordT_co]):
    """Ordered collection of records addressable by identifier."""

    def all(self) -> list[RecordT_co]:
        ...

    def get(self, key: str) -> RecordT_co | None:
        ...


class InMemoryRegistry(Generic[RecordT]):
    """Registry backed by an insertion-ordered mapping.

    As in WordPress, registering an identifier twice keeps the first entry.
    """

    def __init__(self, records: Iterable[RecordT] = ()):
        self._records: dict[Hashable, RecordT] = {}
        for record in records:
            self.register(record)

    def register(self, record: RecordT) -> bool:
        key = record.identifier
        if key in self._records:
            logger.debug("%s %r is already registered; ignoring duplicate", record.kind.value, key)
            return False
        self._records[key] = record
        return True

    def all(self) -> list[RecordT]:
        return list(self._records.values())

    def get(self, key: Hashable) -> RecordT | None:
        return self._records.get(key)

    def __len__(self) -> int:
        return len(self._records)


class StyleRegistry(InMemoryRegistry[BlockStyle]):
    """Style variations grouped by block, in registration order."""

    def for_block(self, block_name: str) -> list[BlockStyle]:
        return [style for style in self._records.values() if style.block_name == block_name]

    def get_style(self, block_name: str, style_name: str) -> BlockStyle | None:
        return self._records.get((block_name, style_name))


class TemplateRegistry:
    """Templates and template parts, looked up per template type."""

    def __init__(self, templates: Iterable[BlockTemplate] = ()):
        self._by_type: dict[TemplateType, InMemoryRegistry[BlockTemplate]] = {
            template_type: InMemoryRegistry() for template_type in TemplateType
        }
        for template in templates:
            self._by_type[template.type].register(template)

    def all(self, template_type: TemplateType = TemplateType.TEMPLATE) -> list[BlockTemplate]:
        return self._by_type[TemplateType(template_type)].all()

    def get(
        self,
        template_id: str,
        template_type: TemplateType = TemplateType.TEMPLATE,
    ) -> BlockTemplate | None:
        return self._by_type[TemplateType(template_type)].get(template_id)


@dataclass(slots=True)
class RegistrySet:
    """Every registry a host exposes, plus the host version they came from."""

    block_types: InMemoryRegistry[BlockType] = field(default_factory=InMemoryRegistry)
    patterns: InMemoryRegistry[BlockPattern] = field(default_factory=InMemoryRegistry)
    pattern_categories: InMemoryRegistry[PatternCategory] = field(default_factory=InMemoryRegistry)
    styles: StyleRegistry = field(default_factory=StyleRegistry)
    bindings: InMemoryRegistry[BindingSource] = field(default_factory=InMemoryRegistry)
    templates: TemplateRegistry = field(default_factory=TemplateRegistry)
    wp_version: str | None = None


__all__ = [
    "InMemoryRegistry",
    "Registry",
    "RegistrySet",
    "StyleRegistry",
    "TemplateRegistry",
]
