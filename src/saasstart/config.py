"""Configuration shared by the orchestrator and the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .commands import DEFAULT_SCAFFOLD_TIMEOUT
from .materializer import WritePolicy
from .naming import validate_project_name
from .variants import ProviderVariant

DEFAULT_PROJECT_NAME = "my-app"


@dataclass(slots=True)
class ScaffoldConfig:
    """Settings for one scaffolding run.

    Attributes
    ----------
    variant:
        Backend provider whose SDKs and glue code are generated.
    parent_directory:
        Directory in which ``create-next-app`` creates the project folder.
    name:
        Project name. When ``None`` the orchestrator prompts for one.
    write_policy:
        Whether template writes are best-effort or all-or-nothing.
    scaffold_timeout:
        Upper bound, in seconds, for the ``create-next-app`` step. ``None``
        waits forever.
    """

    variant: ProviderVariant
    parent_directory: Path
    name: str | None = None
    write_policy: WritePolicy = WritePolicy.BEST_EFFORT
    scaffold_timeout: float | None = DEFAULT_SCAFFOLD_TIMEOUT

    @classmethod
    def create(
        cls,
        variant: ProviderVariant | str,
        *,
        parent_directory: str | Path | None = None,
        name: str | None = None,
        atomic: bool = False,
        scaffold_timeout: float | None = DEFAULT_SCAFFOLD_TIMEOUT,
    ) -> "ScaffoldConfig":
        """Build a :class:`ScaffoldConfig`, validating ``name`` when given.

        Raises :class:`~saasstart.errors.ProjectNameError` for a bad name and
        :class:`ValueError` for a non-positive timeout.
        """

        if name is not None:
            validate_project_name(name)
        if scaffold_timeout is not None and scaffold_timeout <= 0:
            raise ValueError("scaffold timeout must be positive")

        parent = Path(parent_directory) if parent_directory is not None else Path.cwd()
        return cls(
            variant=ProviderVariant(variant),
            parent_directory=parent.expanduser().resolve(),
            name=name,
            write_policy=WritePolicy.ATOMIC if atomic else WritePolicy.BEST_EFFORT,
            scaffold_timeout=scaffold_timeout,
        )

    def project_root(self, name: str) -> Path:
        return self.parent_directory / name
