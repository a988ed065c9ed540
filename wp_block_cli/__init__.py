"""Top-level package for the WordPress block-editor CLI."""

__version__ = "0.1.0"

from .startup import configure_logging  # noqa: E402

__all__ = ["__version__", "configure_logging"]
