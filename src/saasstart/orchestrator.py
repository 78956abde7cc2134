"""Sequence the steps that turn a project name into a configured SaaS app."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from .catalog import TemplateCatalog
from .commands import CommandRunner, create_next_app, install_dependencies
from .config import DEFAULT_PROJECT_NAME, ScaffoldConfig
from .errors import ScaffoldError
from .materializer import FileMaterializer, MaterializationReport
from .naming import check_project_name, suggest_project_name, validate_project_name

__all__ = ["ScaffoldOrchestrator", "ScaffoldStage", "PROMPT_QUESTION"]


LOGGER = logging.getLogger(__name__)

PROMPT_QUESTION = "Name for your project?"

PromptFn = Callable[[str, str], str]


class ScaffoldStage(str, Enum):
    """Linear stages of a run; any failure ends the run at that stage."""

    START = "start"
    PROMPT_NAME = "prompt-name"
    INVOKE_SCAFFOLD_COMMAND = "invoke-scaffold-command"
    RESOLVE_PROJECT_ROOT = "resolve-project-root"
    INSTALL_DEPENDENCIES = "install-dependencies"
    MATERIALIZE_TEMPLATES = "materialize-templates"
    DONE = "done"


class ScaffoldOrchestrator:
    """Run the scaffold command, install SDKs and write the template files.

    Every stage after the prompt receives the project root explicitly; the
    process working directory is never changed. A failing stage stops the
    run and leaves whatever earlier stages produced on disk.
    """

    def __init__(
        self,
        config: ScaffoldConfig,
        *,
        prompt: PromptFn | None = None,
        runner: CommandRunner = subprocess.run,
        materializer: FileMaterializer | None = None,
        catalog: TemplateCatalog | None = None,
        console: Console | None = None,
    ) -> None:
        self.config = config
        self.console = console or Console()
        self._prompt = prompt or self._ask
        self._runner = runner
        self._materializer = materializer or FileMaterializer(config.write_policy)
        self._catalog = catalog or TemplateCatalog()
        self.stage = ScaffoldStage.START
        self.report: MaterializationReport | None = None

    def run(self) -> int:
        """Execute every stage and return the process exit code."""

        variant = self.config.variant
        self.console.print("-----Welcome to SaaSStart-----")
        self.console.print(
            f"---->You are using default setup : Next.js(TS), {variant.title}, Mailgun, Stripe"
        )

        try:
            self._enter(ScaffoldStage.PROMPT_NAME)
            name = self._resolve_name()

            self._enter(ScaffoldStage.INVOKE_SCAFFOLD_COMMAND)
            self.console.print("Creating Next app")
            create_next_app(
                name,
                self.config.parent_directory,
                timeout=self.config.scaffold_timeout,
                runner=self._runner,
            )
            self.console.print("Next app created Successfully")

            self._enter(ScaffoldStage.RESOLVE_PROJECT_ROOT)
            project_root = self._resolve_project_root(name)

            self._enter(ScaffoldStage.INSTALL_DEPENDENCIES)
            self.console.print("Installing additional dependencies...")
            install_dependencies(project_root, variant, runner=self._runner)
            self.console.print("[green]Dependencies installed successfully[/green]")

            self._enter(ScaffoldStage.MATERIALIZE_TEMPLATES)
            self.console.print("Configuring project...")
            self.report = self._materializer.materialize(project_root, self._catalog.entries_for(variant))
        except KeyboardInterrupt:
            LOGGER.warning("interrupted during %s", self.stage.value)
            self.console.print("[red]Aborted.[/red]")
            return 1
        except ScaffoldError as exc:
            LOGGER.error("stage %s failed: %s", self.stage.value, exc)
            self.console.print(f"[red]Cannot create Next App:[/red] {escape(str(exc))}")
            return 1

        if not self.report.ok:
            self.console.print(
                f"[yellow]{len(self.report.failures)} file(s) could not be written; "
                "see the log above for details.[/yellow]"
            )

        self._enter(ScaffoldStage.DONE)
        self.console.print("[green]Project created successfully![/green]")
        self.console.print("[green]Run --> npm run dev[/green]")
        self.console.print("[green]Add ENV variable[/green]")
        return 0

    def _enter(self, stage: ScaffoldStage) -> None:
        LOGGER.info("stage %s", stage.value)
        self.stage = stage

    def _resolve_name(self) -> str:
        if self.config.name is not None:
            return validate_project_name(self.config.name)

        while True:
            candidate = self._prompt(PROMPT_QUESTION, DEFAULT_PROJECT_NAME)
            ok, reason = check_project_name(candidate)
            if ok:
                return candidate
            suggestion = suggest_project_name(candidate, default=DEFAULT_PROJECT_NAME)
            self.console.print(f"[red]{reason}[/red] Try [bold]{escape(suggestion)}[/bold].")

    def _resolve_project_root(self, name: str) -> Path:
        project_root = self.config.project_root(name)
        if not project_root.is_dir():
            raise ScaffoldError(f"project directory {project_root} was not created")
        self.console.print(f"Using project directory {escape(str(project_root))}")
        return project_root

    def _ask(self, question: str, default: str) -> str:
        return Prompt.ask(question, default=default, console=self.console)
