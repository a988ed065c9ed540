"""Registry snapshots: a host's registries exported to JSON or YAML.

A snapshot is a mapping with any of the keys below. Each collection may be a
list of objects or an object keyed by identifier (the shape WordPress
registries return from ``get_all_registered()``)::

    wp_version: "6.6.2"
    block_types: {core/paragraph: {title: Paragraph, category: text}}
    patterns: [{name: my-theme/hero, title: Hero, categories: [featured]}]
    pattern_categories: [{name: featured, label: Featured}]
    block_styles: {core/button: {outline: {label: Outline}}}
    block_bindings: {core/post-meta: {label: Post Meta}}
    templates: [{id: twentytwentyfour//single, slug: single, ...}]
    template_parts: [{id: twentytwentyfour//header, area: header, ...}]
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, Mapping

import yaml
from pydantic import ValidationError

from wp_block_cli.errors import ConfigurationError
from wp_block_cli.models import (
    BindingSource,
    BlockPattern,
    BlockStyle,
    BlockTemplate,
    BlockType,
    PatternCategory,
    TemplateType,
)

from .registry import InMemoryRegistry, RegistrySet, StyleRegistry, TemplateRegistry

logger = logging.getLogger(__name__)


def load_snapshot(path: str | Path) -> RegistrySet:
    """Read a snapshot file from disk and build the registries it describes."""
    snapshot_path = Path(path).expanduser()
    if not snapshot_path.is_file():
        raise ConfigurationError(f"Registry snapshot '{snapshot_path}' does not exist.")

    try:
        text = snapshot_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Failed to read registry snapshot '{snapshot_path}': {exc}") from exc

    try:
        if snapshot_path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Registry snapshot '{snapshot_path}' is not valid: {exc}") from exc

    logger.debug("Loaded registry snapshot %s", snapshot_path)
    return registries_from_mapping(data or {})


def registries_from_mapping(data: Mapping[str, Any]) -> RegistrySet:
    """Adapt a raw snapshot mapping into typed registries."""
    if not isinstance(data, Mapping):
        raise ConfigurationError("Registry snapshot must be a mapping at the top level.")

    try:
        templates = [
            *(adapt_template(raw) for raw in _entries(data.get("templates"), "id")),
            *(
                adapt_template(raw, default_type=TemplateType.TEMPLATE_PART)
                for raw in _entries(data.get("template_parts"), "id")
            ),
        ]
        registries = RegistrySet(
            block_types=InMemoryRegistry(
                adapt_block_type(raw) for raw in _entries(data.get("block_types"), "name")
            ),
            patterns=InMemoryRegistry(
                BlockPattern.model_validate(raw) for raw in _entries(data.get("patterns"), "name")
            ),
            pattern_categories=InMemoryRegistry(
                PatternCategory.model_validate(raw)
                for raw in _entries(data.get("pattern_categories"), "name")
            ),
            styles=StyleRegistry(_adapt_styles(data.get("block_styles"))),
            bindings=InMemoryRegistry(
                BindingSource.model_validate(raw)
                for raw in _entries(data.get("block_bindings"), "name")
            ),
            templates=TemplateRegistry(templates),
            wp_version=_version_or_none(data.get("wp_version")),
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Registry snapshot contains an invalid entry: {exc}") from exc

    logger.debug(
        "Snapshot registries: %d block types, %d patterns, %d categories, %d styles, "
        "%d bindings, %d templates",
        len(registries.block_types),
        len(registries.patterns),
        len(registries.pattern_categories),
        len(registries.styles),
        len(registries.bindings),
        len(templates),
    )
    return registries


def adapt_block_type(raw: Mapping[str, Any]) -> BlockType:
    """Block types are dynamic when flagged so or when they carry a render callback."""
    payload = dict(raw)
    if "is_dynamic" not in payload:
        payload["is_dynamic"] = bool(payload.get("render_callback"))
    return BlockType.model_validate(payload)


def adapt_template(
    raw: Mapping[str, Any],
    *,
    default_type: TemplateType = TemplateType.TEMPLATE,
) -> BlockTemplate:
    payload = dict(raw)
    payload.setdefault("type", default_type.value)
    if not payload.get("id") and payload.get("theme") and payload.get("slug"):
        payload["id"] = f"{payload['theme']}//{payload['slug']}"
    return BlockTemplate.model_validate(payload)


def _adapt_styles(raw: Any) -> Iterator[BlockStyle]:
    """Accept ``{block: {style: {...}}}`` or a flat list with ``block_name``."""
    if raw is None:
        return
    if isinstance(raw, Mapping):
        for block_name, styles in raw.items():
            for entry in _entries(styles, "name"):
                yield BlockStyle.model_validate({**entry, "block_name": block_name})
        return
    for entry in raw:
        yield BlockStyle.model_validate(entry)


def _entries(raw: Any, key_field: str) -> Iterable[Mapping[str, Any]]:
    if raw is None:
        return []
    if isinstance(raw, Mapping):
        entries = []
        for key, value in raw.items():
            value = value or {}
            if not isinstance(value, Mapping):
                raise ConfigurationError(
                    f"Entry '{key}' must be a mapping of properties, got {type(value).__name__}."
                )
            entries.append({**value, key_field: value.get(key_field) or key})
        return entries
    if isinstance(raw, list):
        return raw
    raise ConfigurationError(
        f"Expected a list or mapping of entries, got {type(raw).__name__}."
    )


def _version_or_none(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


__all__ = ["adapt_block_type", "adapt_template", "load_snapshot", "registries_from_mapping"]
