"""Exception types raised by depcheck-lite."""

from pathlib import Path


class DepcheckError(Exception):
    """Base class for all depcheck-lite errors."""


class ConfigurationError(DepcheckError):
    """The manifest or project config is missing or cannot be parsed."""


class FileReadError(DepcheckError):
    """A source file was enumerated but could not be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read {path}: {reason}")


class RemovalError(DepcheckError):
    """The package manager failed while removing dependencies."""
