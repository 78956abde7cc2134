"""Wrappers around the external ``npx`` and ``npm`` invocations."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from .errors import ExternalCommandError
from .variants import ProviderVariant

__all__ = [
    "CREATE_NEXT_APP_FLAGS",
    "CommandRunner",
    "DEFAULT_SCAFFOLD_TIMEOUT",
    "create_next_app",
    "install_dependencies",
]


LOGGER = logging.getLogger(__name__)

CommandRunner = Callable[..., Any]
"""Anything call-compatible with :func:`subprocess.run`."""

DEFAULT_SCAFFOLD_TIMEOUT = 300.0

CREATE_NEXT_APP_FLAGS = (
    "--typescript",
    "--tailwind",
    "--eslint",
    "--app",
    "--no-src-dir",
    "--no-import-alias",
)


def _run(
    command: Sequence[str],
    *,
    cwd: Path,
    runner: CommandRunner,
    timeout: float | None = None,
) -> None:
    LOGGER.info("running %s in %s", " ".join(command), cwd)
    try:
        runner(list(command), cwd=cwd, check=True, timeout=timeout)
    except subprocess.TimeoutExpired as exc:
        raise ExternalCommandError(command, f"timed out after {exc.timeout:g}s") from exc
    except subprocess.CalledProcessError as exc:
        raise ExternalCommandError(command, f"exited with status {exc.returncode}") from exc
    except OSError as exc:
        raise ExternalCommandError(command, str(exc)) from exc


def create_next_app(
    name: str,
    parent: str | Path,
    *,
    timeout: float | None = DEFAULT_SCAFFOLD_TIMEOUT,
    runner: CommandRunner = subprocess.run,
) -> Path:
    """Run ``create-next-app`` for ``name`` inside ``parent``.

    Output is inherited from the current terminal so the user sees the
    scaffolder's own progress. Returns the path the project is expected at.
    """

    parent_path = Path(parent)
    command = ["npx", "create-next-app@latest", name, *CREATE_NEXT_APP_FLAGS]
    _run(command, cwd=parent_path, runner=runner, timeout=timeout)
    return parent_path / name


def install_dependencies(
    project_root: str | Path,
    variant: ProviderVariant,
    *,
    runner: CommandRunner = subprocess.run,
) -> None:
    """Install the provider SDKs for ``variant`` into ``project_root``."""

    root = Path(project_root)
    for packages in (variant.dependencies, variant.client_dependencies):
        _run(["npm", "install", *packages], cwd=root, runner=runner)
