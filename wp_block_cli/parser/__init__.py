"""Block markup parsing."""

from .block_parser import DEFAULT_NAMESPACE, ParsedBlock, has_named_blocks, parse_blocks

__all__ = ["DEFAULT_NAMESPACE", "ParsedBlock", "has_named_blocks", "parse_blocks"]
