"""Errors surfaced by commands and translated into exit codes by the CLI."""

from __future__ import annotations


class BlockCliError(RuntimeError):
    """Base class for fatal command errors; the message is shown to the user."""

    exit_code: int = 1


class UsageError(BlockCliError):
    """Raised for invalid flag combinations or missing required arguments."""


class NotFoundError(BlockCliError):
    """Raised when a registry item or synced pattern cannot be found."""


class ExternalOperationError(BlockCliError):
    """Raised when a store write or file operation fails."""


class VersionRequirementError(BlockCliError):
    """Raised when the host is older than a command family requires."""


class ConfigurationError(BlockCliError):
    """Raised when the registry snapshot or database cannot be resolved."""


class BatchError(BlockCliError):
    """Raised after a batch operation when at least one item failed."""


class Halt(Exception):
    """Terminate the command with ``code`` and no message."""

    def __init__(self, code: int = 1):
        super().__init__(code)
        self.code = code


__all__ = [
    "BatchError",
    "BlockCliError",
    "ConfigurationError",
    "ExternalOperationError",
    "Halt",
    "NotFoundError",
    "UsageError",
    "VersionRequirementError",
]
