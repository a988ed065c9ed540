"""Resource command groups; each module registers its own argparse sub-tree."""

from . import binding, block_type, pattern, pattern_category, style, synced_pattern, template
from .base import CommandContext

COMMAND_MODULES = (block_type, pattern, pattern_category, style, binding, template, synced_pattern)

__all__ = ["COMMAND_MODULES", "CommandContext"]
