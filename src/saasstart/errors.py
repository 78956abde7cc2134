"""Custom exception types raised while scaffolding a project."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class ScaffoldError(RuntimeError):
    """Base class for failures that abort a scaffolding run."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ProjectNameError(ScaffoldError, ValueError):
    """Raised when a candidate project name breaks the naming rules."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(reason)
        self.name = name
        self.reason = reason


class CatalogError(ScaffoldError):
    """Raised when the template catalog is malformed."""


class ExternalCommandError(ScaffoldError):
    """Raised when ``npx`` or ``npm`` cannot complete."""

    def __init__(self, command: Sequence[str], message: str) -> None:
        super().__init__(f"{' '.join(command)}: {message}")
        self.command = tuple(command)


class MaterializationError(ScaffoldError):
    """Raised when an all-or-nothing write fails and has been rolled back."""

    def __init__(self, failures: Sequence[tuple[Path, OSError]]) -> None:
        paths = ", ".join(str(path) for path, _ in failures)
        super().__init__(f"failed to write {paths}")
        self.failures = tuple(failures)


__all__ = [
    "CatalogError",
    "ExternalCommandError",
    "MaterializationError",
    "ProjectNameError",
    "ScaffoldError",
]
