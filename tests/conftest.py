from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


class FakeRunner:
    """Stand-in for ``subprocess.run`` that mimics ``create-next-app``."""

    def __init__(self, *, fail_on: str | None = None, create_project: bool = True) -> None:
        self.fail_on = fail_on
        self.create_project = create_project
        self.calls: list[dict[str, Any]] = []

    def __call__(self, command: list[str], *, cwd: Path, check: bool, timeout: float | None) -> None:
        self.calls.append({"command": list(command), "cwd": Path(cwd), "check": check, "timeout": timeout})
        if self.fail_on is not None and self.fail_on in command:
            raise subprocess.CalledProcessError(1, command)
        if "create-next-app@latest" in command and self.create_project:
            project = Path(cwd) / command[2]
            (project / "app").mkdir(parents=True)
            (project / "app" / "page.tsx").write_text("default page", encoding="utf-8")
            (project / "app" / "layout.tsx").write_text("default layout", encoding="utf-8")
            (project / "app" / "globals.css").write_text("default css", encoding="utf-8")

    @property
    def commands(self) -> list[list[str]]:
        return [call["command"] for call in self.calls]


@pytest.fixture()
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture()
def make_runner() -> type[FakeRunner]:
    return FakeRunner
