"""Block markup → parsed block tree, following the WordPress block grammar.

Blocks are delimited by HTML comments::

    <!-- wp:paragraph {"align":"center"} -->
    <p>Hello</p>
    <!-- /wp:paragraph -->

    <!-- wp:my-plugin/divider /-->

HTML outside any block comment becomes a *freeform* block, which has no name.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, Iterator

DEFAULT_NAMESPACE = "core"

_TOKEN_RE = re.compile(
    r"<!--\s+(?P<closer>/)?wp:(?P<namespace>[a-z][a-z0-9_-]*/)?(?P<name>[a-z][a-z0-9_-]*)\s+"
    r"(?:(?P<attrs>\{.*?\})\s+)?(?P<void>/)?-->",
    re.DOTALL,
)


@dataclass(slots=True)
class ParsedBlock:
    """One node of the parsed tree.

    ``inner_content`` interleaves HTML strings with ``None`` placeholders, one
    per entry of ``inner_blocks``, so the original markup can be rebuilt.
    """

    name: str | None
    attrs: dict[str, Any] = field(default_factory=dict)
    inner_blocks: list[ParsedBlock] = field(default_factory=list)
    inner_html: str = ""
    inner_content: list[str | None] = field(default_factory=list)


@dataclass(slots=True)
class _Token:
    kind: str
    name: str
    attrs: dict[str, Any]
    start: int
    end: int


@dataclass(slots=True)
class _Frame:
    block: ParsedBlock
    token_start: int
    token_end: int
    prev_offset: int


def parse_blocks(content: str) -> list[ParsedBlock]:
    """Parse serialized block markup into a list of top-level blocks."""
    output: list[ParsedBlock] = []
    stack: list[_Frame] = []
    offset = 0

    for token in _tokenize(content):
        leading = content[offset : token.start]

        if token.kind == "void-block":
            block = ParsedBlock(name=token.name, attrs=token.attrs)
            if stack:
                _add_inner_block(stack[-1], block, token.start, token.end, content)
            else:
                _add_freeform(output, leading)
                output.append(block)
            offset = token.end
            continue

        if token.kind == "block-opener":
            if not stack:
                _add_freeform(output, leading)
            stack.append(
                _Frame(
                    block=ParsedBlock(name=token.name, attrs=token.attrs),
                    token_start=token.start,
                    token_end=token.end,
                    prev_offset=token.end,
                )
            )
            offset = token.end
            continue

        # Closer without an opener: treat the rest of the document as HTML.
        if not stack:
            _add_freeform(output, content[offset:])
            return output

        frame = stack.pop()
        html = content[frame.prev_offset : token.start]
        frame.block.inner_html += html
        frame.block.inner_content.append(html)
        if stack:
            _add_inner_block(stack[-1], frame.block, frame.token_start, token.end, content)
        else:
            output.append(frame.block)
        offset = token.end

    # Unclosed blocks swallow the remaining markup, innermost first.
    if stack:
        trailing = content[stack[-1].prev_offset :]
        while stack:
            frame = stack.pop()
            if trailing:
                frame.block.inner_html += trailing
                frame.block.inner_content.append(trailing)
                trailing = ""
            if stack:
                parent = stack[-1]
                parent.block.inner_blocks.append(frame.block)
                parent.block.inner_content.append(None)
            else:
                output.append(frame.block)
        return output

    _add_freeform(output, content[offset:])
    return output


def has_named_blocks(content: str) -> bool:
    """True when at least one top-level block has a name (i.e. is not freeform)."""
    return any(block.name for block in parse_blocks(content))


def _tokenize(content: str) -> Iterator[_Token]:
    for match in _TOKEN_RE.finditer(content):
        namespace = (match.group("namespace") or f"{DEFAULT_NAMESPACE}/").rstrip("/")
        name = f"{namespace}/{match.group('name')}"
        if match.group("closer"):
            kind = "block-closer"
        elif match.group("void"):
            kind = "void-block"
        else:
            kind = "block-opener"
        yield _Token(
            kind=kind,
            name=name,
            attrs=_decode_attrs(match.group("attrs")),
            start=match.start(),
            end=match.end(),
        )


def _decode_attrs(raw: str | None) -> dict[str, Any]:
    if not raw:
        return {}
    try:
        decoded = json.loads(raw)
    except json.JSONDecodeError:
        return {}
    return decoded if isinstance(decoded, dict) else {}


def _add_freeform(output: list[ParsedBlock], html: str) -> None:
    if not html:
        return
    output.append(ParsedBlock(name=None, inner_html=html, inner_content=[html]))


def _add_inner_block(parent: _Frame, block: ParsedBlock, token_start: int, token_end: int, content: str) -> None:
    html = content[parent.prev_offset : token_start]
    if html:
        parent.block.inner_html += html
        parent.block.inner_content.append(html)
    parent.block.inner_blocks.append(block)
    parent.block.inner_content.append(None)
    parent.prev_offset = token_end


__all__ = ["DEFAULT_NAMESPACE", "ParsedBlock", "has_named_blocks", "parse_blocks"]
