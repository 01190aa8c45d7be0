"""Exceptions raised by the skeleton configurator."""

from __future__ import annotations

from pathlib import Path


class ConfigureError(Exception):
    """Base class for failures that abort a configuration run."""


class DiscoveryError(ConfigureError):
    """Raised when the candidate files cannot be searched at all."""

    def __init__(self, message: str, command: str = "", stderr: str = "") -> None:
        self.command = command
        self.stderr = stderr
        super().__init__(message)


class ManifestError(ConfigureError):
    """Raised when the composer manifest cannot be parsed."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")
