"""Write catalog entries to disk below a project root."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .catalog import TemplateEntry, TemplateGroup
from .errors import MaterializationError

__all__ = [
    "FileMaterializer",
    "MaterializationReport",
    "WriteFailure",
    "WritePolicy",
]


LOGGER = logging.getLogger(__name__)

Writer = Callable[[Path, str], None]


class WritePolicy(str, Enum):
    """How a failed write affects the rest of a materialization."""

    BEST_EFFORT = "best-effort"
    ATOMIC = "atomic"


@dataclass(slots=True, frozen=True)
class WriteFailure:
    path: Path
    error: OSError


@dataclass(slots=True)
class MaterializationReport:
    """Outcome of a :meth:`FileMaterializer.materialize` call."""

    root: Path
    written: list[Path] = field(default_factory=list)
    directories: list[Path] = field(default_factory=list)
    failures: list[WriteFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def _write_text(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")


@dataclass(slots=True)
class _Undo:
    """Bookkeeping needed to reverse an atomic materialization."""

    created_dirs: list[Path] = field(default_factory=list)
    created_files: list[Path] = field(default_factory=list)
    overwritten: list[tuple[Path, bytes]] = field(default_factory=list)

    def rollback(self) -> None:
        for path, previous in reversed(self.overwritten):
            try:
                path.write_bytes(previous)
            except OSError:
                LOGGER.exception("could not restore %s", path)
        for path in reversed(self.created_files):
            try:
                path.unlink(missing_ok=True)
            except OSError:
                LOGGER.exception("could not remove %s", path)
        for directory in reversed(self.created_dirs):
            if not directory.is_dir():
                continue
            try:
                directory.rmdir()
            except OSError:
                LOGGER.warning("left non-empty directory %s in place", directory)


class FileMaterializer:
    """Create directories and write template entries below a root directory.

    With :attr:`WritePolicy.BEST_EFFORT` a failed entry is logged and skipped
    so later entries are still written. With :attr:`WritePolicy.ATOMIC` the
    first failure undoes every change made by the call and raises
    :class:`MaterializationError`.
    """

    def __init__(self, policy: WritePolicy = WritePolicy.BEST_EFFORT, *, writer: Writer | None = None) -> None:
        self.policy = WritePolicy(policy)
        self._writer = writer or _write_text

    def materialize(self, root: str | Path, entries: Iterable[TemplateEntry]) -> MaterializationReport:
        root_path = Path(root)
        report = MaterializationReport(root=root_path)
        undo = _Undo() if self.policy is WritePolicy.ATOMIC else None
        group: TemplateGroup | None = None

        for entry in entries:
            if entry.group is not group:
                group = entry.group
                LOGGER.info("materializing %s templates", group.value)
            destination = root_path.joinpath(*entry.path)
            try:
                self._apply(entry, destination, report, undo)
            except OSError as exc:
                LOGGER.error("failed to write %s: %s", destination, exc)
                report.failures.append(WriteFailure(destination, exc))
                if undo is not None:
                    undo.rollback()
                    raise MaterializationError([(destination, exc)]) from exc

        return report

    def _apply(
        self,
        entry: TemplateEntry,
        destination: Path,
        report: MaterializationReport,
        undo: _Undo | None,
    ) -> None:
        directory = destination if entry.is_directory else destination.parent
        missing = _missing_directories(directory)
        if undo is not None:
            undo.created_dirs.extend(missing)
        directory.mkdir(parents=True, exist_ok=True)
        report.directories.extend(missing)

        if entry.content is None:
            LOGGER.debug("ensured directory %s", destination)
            return

        if undo is not None:
            if destination.is_file():
                undo.overwritten.append((destination, destination.read_bytes()))
            elif not destination.exists():
                undo.created_files.append(destination)

        self._writer(destination, entry.content)
        report.written.append(destination)
        LOGGER.debug("wrote %s", destination)


def _missing_directories(directory: Path) -> list[Path]:
    """Return the ancestors of ``directory`` that do not exist yet, outermost first."""

    missing: list[Path] = []
    current = directory
    while not current.exists():
        missing.append(current)
        if current.parent == current:
            break
        current = current.parent
    return list(reversed(missing))
